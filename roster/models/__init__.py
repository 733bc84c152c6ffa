# Re-export common types
from .kinds import SalaryLevel, SalaryTier, TeacherType
from .people import Student, Teacher
from .subject import Subject

__all__ = [
    "Student",
    "Teacher",
    "Subject",
    "TeacherType",
    "SalaryLevel",
    "SalaryTier",
]
