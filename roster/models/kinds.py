from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TeacherType(str, Enum):
    intern = "intern"
    extern = "extern"

    def __str__(self) -> str:
        return self.value


class SalaryLevel(str, Enum):
    junior = "junior"
    medium = "medium"
    senior = "senior"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class SalaryTier:
    # amount is carried by the tier, never implied by the level
    level: SalaryLevel
    amount: float

    @classmethod
    def junior(cls, amount: float) -> SalaryTier:
        return cls(SalaryLevel.junior, float(amount))

    @classmethod
    def medium(cls, amount: float) -> SalaryTier:
        return cls(SalaryLevel.medium, float(amount))

    @classmethod
    def senior(cls, amount: float) -> SalaryTier:
        return cls(SalaryLevel.senior, float(amount))

    @property
    def label(self) -> str:
        return self.level.value

    @property
    def amount_text(self) -> str:
        return str(float(self.amount))

    def __str__(self) -> str:
        return self.label
