from datetime import date, datetime

from roster.config import ReportSettings
from roster.data import build_dataset
from roster.models import SalaryTier, Student, Subject, Teacher, TeacherType
from roster.queries import (
    age_report,
    full_dump,
    partition_by_classification,
    partition_by_filter,
    salary_report,
    sort_by_birth_date,
    sort_subjects_by_date,
    student_subjects,
    students_in_several_subjects,
    subject_dates,
    subject_default_dates,
    teachers_in_several_subjects,
)


def test_student_subject_membership() -> None:
    ds = build_dataset()
    rows = {m.name: m for m in student_subjects(ds.students, ds.subjects)}
    assert rows["Eduardo"].count == 3
    assert rows["Eduardo"].subjects == ["Kotlin", "Python", "JavaScript"]
    assert rows["Óliver"].subjects == ["Swift", "Dart"]
    assert rows["Ángel"].count == 1
    assert list(rows) == ["Óliver", "Ángel", "Sara", "Eduardo", "María", "Miguel", "Lucía"]


def test_students_and_teachers_in_several_subjects() -> None:
    ds = build_dataset()
    assert students_in_several_subjects(ds.students, ds.subjects) == [
        "Óliver", "Eduardo", "Miguel", "Lucía",
    ]
    assert teachers_in_several_subjects(ds.teachers, ds.subjects) == [
        "David", "Jaime", "Pedro", "Daniel", "Laura",
    ]


def test_single_or_no_subject_is_not_several() -> None:
    once = Student(name="Sara")
    never = Student(name="Pablo")
    twice = Student(name="Lucía")
    subjects = [
        Subject(name="Kotlin", students=(once, twice)),
        Subject(name="Swift", students=(twice,)),
        Subject(name="Dart"),
    ]
    assert students_in_several_subjects([once, never, twice], subjects) == ["Lucía"]


def test_membership_uses_identity_not_name() -> None:
    first = Student(name="Sara")
    second = Student(name="Sara")
    subjects = [Subject(name="Kotlin", students=(first,)), Subject(name="Swift", students=(first,))]
    rows = student_subjects([first, second], subjects)
    assert [(m.name, m.count) for m in rows] == [("Sara", 2), ("Sara", 0)]
    assert students_in_several_subjects([first, second], subjects) == ["Sara"]


def test_unnamed_entities_are_skipped() -> None:
    ghost = Student()
    t = Teacher()
    subjects = [Subject(students=(ghost,), teachers=(t,)), Subject(students=(ghost,), teachers=(t,))]
    assert student_subjects([ghost], subjects) == []
    assert students_in_several_subjects([ghost], subjects) == []
    assert teachers_in_several_subjects([t], subjects) == []


def test_reference_partition() -> None:
    ds = build_dataset()
    p = partition_by_filter(ds.teachers)
    assert p.intern_names == ["Jaime", "Pedro", "Daniel"]
    assert p.extern_names == ["David", "Laura"]
    assert partition_by_classification(ds.teachers) == p


def test_partition_covers_every_teacher_once() -> None:
    teachers = list(build_dataset().teachers) + [Teacher(name="Nadie"), Teacher()]
    a = partition_by_filter(teachers)
    b = partition_by_classification(teachers)
    assert a == b
    untyped = [t for t in teachers if t.type is None]
    keys = [t.key for t in a.intern + a.extern + tuple(untyped)]
    assert len(keys) == len(set(keys)) == len(teachers)


def test_sort_students_by_birth_date() -> None:
    ds = build_dataset()
    assert [s.name for s in sort_by_birth_date(ds.students)] == [
        "María", "Eduardo", "Miguel", "Sara", "Lucía", "Ángel", "Óliver",
    ]
    assert [t.name for t in sort_by_birth_date(ds.teachers)] == [
        "Jaime", "Pedro", "Laura", "Daniel", "David",
    ]


def test_sort_puts_undated_last_in_input_order() -> None:
    a = Student(name="a")
    b = Student(name="b", birth_date=date(2000, 1, 1))
    c = Student(name="c")
    d = Student(name="d", birth_date=date(1990, 1, 1))
    people = [a, b, c, d]
    assert sort_by_birth_date(people) == [d, b, a, c]
    assert people == [a, b, c, d]


def test_sort_mixes_dates_and_datetimes() -> None:
    noon = Student(name="noon", birth_date=datetime(1990, 1, 1, 12))
    plain = Student(name="plain", birth_date=date(1980, 1, 1))
    same_day = Student(name="same_day", birth_date=date(1990, 1, 1))
    assert sort_by_birth_date([noon, plain, same_day]) == [plain, noon, same_day]


def test_sort_subjects_is_stable_on_equal_dates() -> None:
    ds = build_dataset()
    assert [s.name for s in sort_subjects_by_date(ds.subjects)] == [
        "Kotlin", "JavaScript", "Python", "Swift", "Dart",
    ]


def test_subject_dates_both_entry_points_agree() -> None:
    ds = build_dataset()
    explicit = subject_dates(ds.subjects, ReportSettings())
    assert explicit == subject_default_dates(ds.subjects)
    dart = next(d for d in explicit if d.name == "Dart")
    assert dart.date_text == "lunes 01 de abril de 2019"


def test_subject_dates_skip_missing_and_honour_locale() -> None:
    subjects = [Subject(name="Dart", year=date(2019, 4, 2)), Subject(name="Go"), Subject(year=date(2019, 1, 1))]
    rows = subject_dates(subjects, ReportSettings("EEEE dd 'of' MMMM 'of' yyyy", "en_US"))
    assert [(r.name, r.date_text) for r in rows] == [("Dart", "Tuesday 02 of April of 2019")]


def test_salary_report() -> None:
    ds = build_dataset()
    lines = salary_report(list(ds.teachers) + [Teacher(name="Nadie"), Teacher(salary=SalaryTier.junior(1))])
    assert [(x.name, x.level, x.amount) for x in lines] == [
        ("David", "senior", "50.0"),
        ("Jaime", "medium", "40.0"),
        ("Pedro", "senior", "50.0"),
        ("Daniel", "senior", "50.0"),
        ("Laura", "junior", "20.0"),
    ]


def test_full_dump_renders_everything_in_order() -> None:
    ds = build_dataset()
    dump = full_dump(ds.students, ds.teachers, ds.subjects)
    assert len(dump.students) == 7 and len(dump.teachers) == 5 and len(dump.subjects) == 5
    assert dump.students[0].startswith("Student:\nname: Óliver")
    assert "type: extern" in dump.teachers[0]
    assert "teachers: [Laura]" in dump.subjects[0]


def test_age_report_with_fixed_today() -> None:
    ds = build_dataset()
    rows = age_report(ds.students, ds.teachers, today=date(2024, 4, 1))
    ages = {(r.role, r.name): r.age for r in rows}
    assert ages[("student", "María")] == 68
    assert ages[("student", "Eduardo")] == 67
    assert ages[("student", "Óliver")] == 4
    assert ages[("teacher", "David")] == 39
    assert [r.role for r in rows] == ["student"] * 7 + ["teacher"] * 5


def test_age_report_skips_missing_fields() -> None:
    people = [Student(name="Sara"), Student(birth_date=date(2000, 1, 1))]
    teachers = [Teacher(name="Laura", type=TeacherType.extern)]
    assert age_report(people, teachers, today=date(2024, 1, 1)) == []
