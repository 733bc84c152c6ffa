from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Iterable, List, Tuple, TypeVar

from ..models import SalaryTier, Student, Subject, Teacher, TeacherType

Named = TypeVar("Named", Student, Teacher)


@dataclass(frozen=True)
class Dataset:
    students: Tuple[Student, ...]
    teachers: Tuple[Teacher, ...]
    subjects: Tuple[Subject, ...]


# Subject -> (teacher letter, student letter) used to draw the sample rosters
ROSTER_LETTERS: dict[str, Tuple[str, str]] = {
    "Kotlin": ("u", "a"),
    "Swift": ("o", "e"),
    "Dart": ("i", "i"),
    "Python": ("e", "o"),
    "JavaScript": ("a", "u"),
}


def having_letter(items: Iterable[Named], letter: str) -> List[Named]:
    # Case-sensitive; unnamed entries never match
    return [x for x in items if x.name is not None and letter in x.name]


def build_students() -> List[Student]:
    return [
        Student(name="Óliver", birth_date=date(2019, 5, 1), email="oliver@student.com"),
        Student(name="Ángel", birth_date=date(2013, 9, 1), email="angel@student.com"),
        Student(name="Sara", birth_date=date(1984, 9, 1), email="sara@student.com"),
        Student(name="Eduardo", birth_date=date(1956, 12, 1), email="eduardo@student.com"),
        Student(name="María", birth_date=date(1956, 4, 1), email="maria@student.com"),
        Student(name="Miguel", birth_date=date(1983, 6, 1), email="miguel@student.com"),
        Student(name="Lucía", birth_date=date(1995, 2, 1), email="lucia@student.com"),
    ]


def build_teachers() -> List[Teacher]:
    return [
        Teacher(
            name="David",
            birth_date=date(1985, 4, 1),
            email="david@teacher.com",
            type=TeacherType.extern,
            salary=SalaryTier.senior(50.0),
        ),
        Teacher(
            name="Jaime",
            birth_date=date(1974, 6, 1),
            email="jaime@teacher.com",
            type=TeacherType.intern,
            salary=SalaryTier.medium(40.0),
        ),
        Teacher(
            name="Pedro",
            birth_date=date(1979, 9, 1),
            email="pedro@teacher.com",
            type=TeacherType.intern,
            salary=SalaryTier.senior(50.0),
        ),
        Teacher(
            name="Daniel",
            birth_date=date(1981, 2, 1),
            email="daniel@teacher.com",
            type=TeacherType.intern,
            salary=SalaryTier.senior(50.0),
        ),
        Teacher(
            name="Laura",
            birth_date=date(1980, 10, 1),
            email="laura@teacher.com",
            type=TeacherType.extern,
            salary=SalaryTier.junior(20.0),
        ),
    ]


def build_subjects(teachers: List[Teacher], students: List[Student]) -> List[Subject]:
    starts = {
        "Kotlin": date(2018, 9, 1),
        "Swift": date(2019, 3, 1),
        "Dart": date(2019, 4, 1),
        "Python": date(2018, 10, 1),
        "JavaScript": date(2018, 9, 1),
    }
    out: List[Subject] = []
    for name, (t_letter, s_letter) in ROSTER_LETTERS.items():
        out.append(
            Subject(
                name=name,
                year=starts[name],
                teachers=tuple(having_letter(teachers, t_letter)),
                students=tuple(having_letter(students, s_letter)),
            )
        )
    return out


def build_dataset() -> Dataset:
    logger = logging.getLogger(__name__)
    students = build_students()
    teachers = build_teachers()
    subjects = build_subjects(teachers, students)
    logger.info(
        f"Built sample dataset: {len(students)} students, "
        f"{len(teachers)} teachers, {len(subjects)} subjects"
    )
    return Dataset(tuple(students), tuple(teachers), tuple(subjects))
