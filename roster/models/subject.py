from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Sequence, Tuple

from ..config import ReportSettings
from .people import Student, Teacher, date_text, new_key, render_block


def _names(members: Sequence[Student] | Sequence[Teacher] | None) -> str:
    if members is None:
        return "None"
    # unnamed members still take a slot so the roster size stays visible
    return "[" + ", ".join(str(m.name) for m in members) + "]"


@dataclass(frozen=True)
class Subject:
    name: str | None = None
    year: date | None = None  # date the term begins
    teachers: Tuple[Teacher, ...] | None = None
    students: Tuple[Student, ...] | None = None
    key: str = field(default_factory=new_key)

    def __post_init__(self) -> None:
        # rosters are references, stored as tuples so the subject stays immutable
        if self.teachers is not None and not isinstance(self.teachers, tuple):
            object.__setattr__(self, "teachers", tuple(self.teachers))
        if self.students is not None and not isinstance(self.students, tuple):
            object.__setattr__(self, "students", tuple(self.students))

    def has_teacher(self, teacher: Teacher) -> bool:
        return self.teachers is not None and any(t.key == teacher.key for t in self.teachers)

    def has_student(self, student: Student) -> bool:
        return self.students is not None and any(s.key == student.key for s in self.students)

    def describe(self, settings: ReportSettings | None = None) -> str:
        return render_block(
            "Subject",
            [
                ("name", self.name),
                ("year", date_text(self.year, settings)),
                ("teachers", _names(self.teachers)),
                ("students", _names(self.students)),
            ],
        )

    def __str__(self) -> str:
        return self.describe()
