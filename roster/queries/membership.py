from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Sequence

from ..models import Student, Subject, Teacher

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Membership:
    name: str
    count: int
    subjects: List[str]


def subjects_of_student(student: Student, subjects: Sequence[Subject]) -> List[Subject]:
    return [s for s in subjects if s.has_student(student)]


def subjects_of_teacher(teacher: Teacher, subjects: Sequence[Subject]) -> List[Subject]:
    return [s for s in subjects if s.has_teacher(teacher)]


def student_subjects(students: Sequence[Student], subjects: Sequence[Subject]) -> List[Membership]:
    out: List[Membership] = []
    for st in students:
        if st.name is None:
            logger.debug("Skip unnamed student in subject membership")
            continue
        found = subjects_of_student(st, subjects)
        # unnamed subjects count but have no name to list
        names = [s.name for s in found if s.name is not None]
        out.append(Membership(st.name, len(found), names))
    return out


def students_in_several_subjects(
    students: Sequence[Student], subjects: Sequence[Subject]
) -> List[str]:
    return [
        st.name
        for st in students
        if st.name is not None and len(subjects_of_student(st, subjects)) > 1
    ]


def teachers_in_several_subjects(
    teachers: Sequence[Teacher], subjects: Sequence[Subject]
) -> List[str]:
    return [
        t.name
        for t in teachers
        if t.name is not None and len(subjects_of_teacher(t, subjects)) > 1
    ]
