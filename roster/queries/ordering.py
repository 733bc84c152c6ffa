from __future__ import annotations

from datetime import date
from typing import Callable, List, Sequence, Tuple, TypeVar

from ..dates import as_date
from ..models import Student, Subject, Teacher

T = TypeVar("T")
Person = TypeVar("Person", Student, Teacher)


def sort_by_date(items: Sequence[T], when: Callable[[T], date | None]) -> List[T]:
    """Ascending by ``when(item)``.

    Undated items go after every dated one. ``sorted`` is stable, so equal
    dates and undated items keep their input order.
    """

    def key(item: T) -> Tuple[bool, date]:
        d = when(item)
        return (d is None, as_date(d) if d is not None else date.min)

    return sorted(items, key=key)


def sort_by_birth_date(people: Sequence[Person]) -> List[Person]:
    return sort_by_date(people, lambda p: p.birth_date)


def sort_subjects_by_date(subjects: Sequence[Subject]) -> List[Subject]:
    return sort_by_date(subjects, lambda s: s.year)


def names(items: Sequence[Student] | Sequence[Teacher] | Sequence[Subject]) -> List[str]:
    return [x.name for x in items if x.name is not None]
