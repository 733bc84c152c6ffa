from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from datetime import date
from typing import Any, Dict, List, Sequence

from ..config import ReportSettings
from ..data.sample import Dataset
from ..dates import default_formatted, format_date, years_between
from ..models import Student, Subject, Teacher
from .membership import student_subjects, students_in_several_subjects, teachers_in_several_subjects
from .ordering import names, sort_by_birth_date, sort_subjects_by_date
from .partition import TeacherPartition, partition_by_classification, partition_by_filter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DatedSubject:
    name: str
    date_text: str


@dataclass(frozen=True)
class SalaryLine:
    name: str
    level: str
    amount: str


@dataclass(frozen=True)
class AgeLine:
    role: str  # student, teacher
    name: str
    age: int


@dataclass(frozen=True)
class Dump:
    students: List[str]
    teachers: List[str]
    subjects: List[str]


def subject_dates(
    subjects: Sequence[Subject], settings: ReportSettings | None = None
) -> List[DatedSubject]:
    s = settings or ReportSettings()
    out: List[DatedSubject] = []
    for sub in subjects:
        if sub.name is None or sub.year is None:
            logger.debug(f"Skip subject {sub.name!r} without name or date")
            continue
        out.append(DatedSubject(sub.name, format_date(sub.year, s.pattern, s.locale)))
    return out


def subject_default_dates(subjects: Sequence[Subject]) -> List[DatedSubject]:
    return [
        DatedSubject(sub.name, default_formatted(sub.year))
        for sub in subjects
        if sub.name is not None and sub.year is not None
    ]


def salary_report(teachers: Sequence[Teacher]) -> List[SalaryLine]:
    out: List[SalaryLine] = []
    for t in teachers:
        if t.name is None or t.salary is None:
            logger.debug(f"Skip teacher {t.name!r} without name or salary")
            continue
        out.append(SalaryLine(t.name, t.salary.label, t.salary.amount_text))
    return out


def full_dump(
    students: Sequence[Student],
    teachers: Sequence[Teacher],
    subjects: Sequence[Subject],
    settings: ReportSettings | None = None,
) -> Dump:
    return Dump(
        students=[x.describe(settings) for x in students],
        teachers=[x.describe(settings) for x in teachers],
        subjects=[x.describe(settings) for x in subjects],
    )


def age_report(
    students: Sequence[Student],
    teachers: Sequence[Teacher],
    today: date | None = None,
) -> List[AgeLine]:
    """Whole-year ages of every named, dated student then teacher.

    ``today`` defaults to the wall clock, so results drift between runs
    unless it is pinned.
    """
    now = today or date.today()
    out: List[AgeLine] = []
    for role, people in (("student", students), ("teacher", teachers)):
        for p in people:
            if p.name is None or p.birth_date is None:
                logger.debug(f"Skip {role} {p.name!r} without name or birth date")
                continue
            out.append(AgeLine(role, p.name, years_between(p.birth_date, now)))
    return out


def _partition_dict(p: TeacherPartition) -> Dict[str, Any]:
    return {
        "intern_count": len(p.intern),
        "intern": p.intern_names,
        "extern_count": len(p.extern),
        "extern": p.extern_names,
    }


def run_queries(
    ds: Dataset, settings: ReportSettings | None = None, today: date | None = None
) -> Dict[str, Any]:
    s = settings or ReportSettings()
    several_students = students_in_several_subjects(ds.students, ds.subjects)
    several_teachers = teachers_in_several_subjects(ds.teachers, ds.subjects)
    report: Dict[str, Any] = {
        "task_1": [asdict(m) for m in student_subjects(ds.students, ds.subjects)],
        "task_2": {"count": len(several_students), "names": several_students},
        "task_3": {"count": len(several_teachers), "names": several_teachers},
        "task_4": _partition_dict(partition_by_filter(ds.teachers)),
        "task_4_1": _partition_dict(partition_by_classification(ds.teachers)),
        "task_5": {
            "students": names(sort_by_birth_date(ds.students)),
            "teachers": names(sort_by_birth_date(ds.teachers)),
        },
        "task_6": names(sort_subjects_by_date(ds.subjects)),
        "task_7": [asdict(d) for d in subject_dates(ds.subjects, s)],
        "task_8": [asdict(x) for x in salary_report(ds.teachers)],
        "task_9": [asdict(d) for d in subject_default_dates(ds.subjects)],
        "task_10": asdict(full_dump(ds.students, ds.teachers, ds.subjects, s)),
        "task_11": [asdict(a) for a in age_report(ds.students, ds.teachers, today)],
    }
    logger.info(f"Ran {len(report)} report tasks")
    return report
