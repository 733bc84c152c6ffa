from __future__ import annotations

import json
import logging
from datetime import date
from pathlib import Path
from typing import Any, Dict, List, Sequence, TypeVar

from ..models import SalaryLevel, SalaryTier, Student, Subject, Teacher, TeacherType
from .sample import Dataset, having_letter

Named = TypeVar("Named", Student, Teacher)


class DatasetError(ValueError):
    pass


def load_json(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def parse_date(raw: object, where: str) -> date | None:
    # Accepts "YYYY-MM" (day 1) or "YYYY-MM-DD"
    if raw is None:
        return None
    if not isinstance(raw, str):
        raise DatasetError(f"{where}: expected an ISO date string, got {raw!r}")
    text = raw.strip()
    if len(text) == 7:
        text += "-01"
    try:
        return date.fromisoformat(text)
    except ValueError as exc:
        raise DatasetError(f"{where}: invalid date {raw!r}") from exc


def _parse_type(raw: object, where: str) -> TeacherType | None:
    if raw is None:
        return None
    try:
        return TeacherType(raw)
    except ValueError as exc:
        raise DatasetError(f"{where}: unknown teacher type {raw!r}") from exc


def _parse_salary(raw: object, where: str) -> SalaryTier | None:
    if raw is None:
        return None
    if not isinstance(raw, dict):
        raise DatasetError(f"{where}: salary must be an object with level and amount")
    try:
        level = SalaryLevel(raw.get("level"))
        amount = float(raw["amount"])
    except (KeyError, TypeError, ValueError) as exc:
        raise DatasetError(f"{where}: invalid salary {raw!r}") from exc
    return SalaryTier(level, amount)


def _entries(data: Dict[str, Any], key: str) -> List[tuple[str, Dict[str, Any]]]:
    raw = data.get(key, [])
    if not isinstance(raw, list):
        raise DatasetError(f"{key}: expected a list, got {type(raw).__name__}")
    out: List[tuple[str, Dict[str, Any]]] = []
    for i, entry in enumerate(raw):
        where = f"{key}[{i}]"
        if not isinstance(entry, dict):
            raise DatasetError(f"{where}: expected an object, got {type(entry).__name__}")
        out.append((where, entry))
    return out


def _text(entry: Dict[str, Any], field: str, where: str) -> str | None:
    v = entry.get(field)
    if v is not None and not isinstance(v, str):
        raise DatasetError(f"{where}: {field} must be a string, got {v!r}")
    return v


def _pick(pool: Sequence[Named], spec: Dict[str, Any], kind: str, where: str) -> List[Named] | None:
    letter = spec.get(f"{kind}_letter")
    if letter is not None:
        if not isinstance(letter, str) or not letter:
            raise DatasetError(f"{where}: {kind}_letter must be a non-empty string")
        return having_letter(pool, letter)
    names = spec.get(f"{kind}s")
    if names is None:
        return None
    if not isinstance(names, list) or not all(isinstance(n, str) for n in names):
        raise DatasetError(f"{where}: {kind}s must be a list of names")
    by_name: Dict[str, List[Named]] = {}
    for m in pool:
        if m.name is not None:
            by_name.setdefault(m.name, []).append(m)
    missing = [n for n in names if n not in by_name]
    if missing:
        raise DatasetError(f"{where}: unknown {kind}(s) {missing}")
    # names are not identities; a shared name cannot pick one entity
    ambiguous = [n for n in names if len(by_name[n]) > 1]
    if ambiguous:
        raise DatasetError(f"{where}: ambiguous {kind}(s) {ambiguous}")
    return [by_name[n][0] for n in names]


def dataset_from_dict(data: Dict[str, Any]) -> Dataset:
    students: List[Student] = []
    for where, s in _entries(data, "students"):
        students.append(
            Student(
                name=_text(s, "name", where),
                surname=_text(s, "surname", where),
                birth_date=parse_date(s.get("birth_date"), where),
                phone=_text(s, "phone", where),
                address=_text(s, "address", where),
                email=_text(s, "email", where),
            )
        )
    teachers: List[Teacher] = []
    for where, t in _entries(data, "teachers"):
        teachers.append(
            Teacher(
                name=_text(t, "name", where),
                surname=_text(t, "surname", where),
                birth_date=parse_date(t.get("birth_date"), where),
                email=_text(t, "email", where),
                type=_parse_type(t.get("type"), where),
                salary=_parse_salary(t.get("salary"), where),
            )
        )
    subjects: List[Subject] = []
    for where, sub in _entries(data, "subjects"):
        picked_teachers = _pick(teachers, sub, "teacher", where)
        picked_students = _pick(students, sub, "student", where)
        subjects.append(
            Subject(
                name=_text(sub, "name", where),
                year=parse_date(sub.get("year"), where),
                teachers=tuple(picked_teachers) if picked_teachers is not None else None,
                students=tuple(picked_students) if picked_students is not None else None,
            )
        )
    return Dataset(tuple(students), tuple(teachers), tuple(subjects))


def load_dataset(path: Path | str) -> Dataset:
    logger = logging.getLogger(__name__)
    p = Path(path)
    try:
        data = load_json(p)
    except json.JSONDecodeError as exc:
        raise DatasetError(f"{p}: not valid JSON ({exc})") from exc
    if not isinstance(data, dict):
        raise DatasetError(f"{p}: top-level JSON value must be an object")
    ds = dataset_from_dict(data)
    logger.info(
        f"Loaded {p.name}: {len(ds.students)} students, "
        f"{len(ds.teachers)} teachers, {len(ds.subjects)} subjects"
    )
    return ds
