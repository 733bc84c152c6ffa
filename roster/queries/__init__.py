from .membership import (
    Membership,
    student_subjects,
    students_in_several_subjects,
    teachers_in_several_subjects,
)
from .ordering import sort_by_birth_date, sort_by_date, sort_subjects_by_date
from .partition import TeacherPartition, partition_by_classification, partition_by_filter
from .reports import (
    AgeLine,
    DatedSubject,
    Dump,
    SalaryLine,
    age_report,
    full_dump,
    run_queries,
    salary_report,
    subject_dates,
    subject_default_dates,
)

__all__ = [
    "Membership",
    "student_subjects",
    "students_in_several_subjects",
    "teachers_in_several_subjects",
    "TeacherPartition",
    "partition_by_filter",
    "partition_by_classification",
    "sort_by_date",
    "sort_by_birth_date",
    "sort_subjects_by_date",
    "DatedSubject",
    "SalaryLine",
    "AgeLine",
    "Dump",
    "subject_dates",
    "subject_default_dates",
    "salary_report",
    "full_dump",
    "age_report",
    "run_queries",
]
