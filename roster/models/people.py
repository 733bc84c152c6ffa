from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import date

from ..config import ReportSettings
from ..dates import format_date
from .kinds import SalaryTier, TeacherType


def new_key() -> str:
    return uuid.uuid4().hex


def date_text(value: date | None, settings: ReportSettings | None = None) -> str:
    if value is None:
        return ""
    s = settings or ReportSettings()
    return format_date(value, s.pattern, s.locale)


def render_block(title: str, fields: list[tuple[str, object]]) -> str:
    lines = [f"{title}:"]
    for label, value in fields:
        lines.append(f"{label}: {value!s}")
    return "\n".join(lines)


@dataclass(frozen=True)
class Student:
    name: str | None = None
    surname: str | None = None
    birth_date: date | None = None
    phone: str | None = None
    address: str | None = None
    email: str | None = None
    key: str = field(default_factory=new_key)

    def describe(self, settings: ReportSettings | None = None) -> str:
        return render_block(
            "Student",
            [
                ("name", self.name),
                ("surname", self.surname),
                ("birth date", date_text(self.birth_date, settings)),
                ("phone", self.phone),
                ("address", self.address),
                ("email", self.email),
            ],
        )

    def __str__(self) -> str:
        return self.describe()


@dataclass(frozen=True)
class Teacher:
    name: str | None = None
    surname: str | None = None
    birth_date: date | None = None
    email: str | None = None
    type: TeacherType | None = None
    salary: SalaryTier | None = None
    key: str = field(default_factory=new_key)

    def describe(self, settings: ReportSettings | None = None) -> str:
        return render_block(
            "Teacher",
            [
                ("name", self.name),
                ("surname", self.surname),
                ("birth date", date_text(self.birth_date, settings)),
                ("email", self.email),
                ("type", self.type),
                ("salary", self.salary),
            ],
        )

    def __str__(self) -> str:
        return self.describe()
