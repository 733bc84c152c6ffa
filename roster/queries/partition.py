from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from ..models import Teacher, TeacherType


@dataclass(frozen=True)
class TeacherPartition:
    intern: Tuple[Teacher, ...]
    extern: Tuple[Teacher, ...]

    @property
    def intern_names(self) -> List[str]:
        return [t.name for t in self.intern if t.name is not None]

    @property
    def extern_names(self) -> List[str]:
        return [t.name for t in self.extern if t.name is not None]


def partition_by_filter(teachers: Sequence[Teacher]) -> TeacherPartition:
    return TeacherPartition(
        intern=tuple(t for t in teachers if t.type is TeacherType.intern),
        extern=tuple(t for t in teachers if t.type is TeacherType.extern),
    )


def partition_by_classification(teachers: Sequence[Teacher]) -> TeacherPartition:
    intern: List[Teacher] = []
    extern: List[Teacher] = []
    for t in teachers:
        if t.type is TeacherType.intern:
            intern.append(t)
        elif t.type is TeacherType.extern:
            extern.append(t)
        # untyped teachers belong to neither side
    return TeacherPartition(tuple(intern), tuple(extern))
