from datetime import date

from roster.models import SalaryLevel, SalaryTier, Student, Subject, Teacher, TeacherType


def test_all_fields_default_to_absent() -> None:
    s = Student()
    assert s.name is None and s.birth_date is None and s.email is None
    sub = Subject()
    assert sub.teachers is None and sub.students is None


def test_keys_are_unique_per_entity() -> None:
    a = Student(name="Sara")
    b = Student(name="Sara")
    assert a.key != b.key
    assert a != b


def test_student_rendering_marks_absent_fields() -> None:
    text = Student(name="Sara", email="sara@student.com").describe()
    assert text.splitlines() == [
        "Student:",
        "name: Sara",
        "surname: None",
        "birth date: ",
        "phone: None",
        "address: None",
        "email: sara@student.com",
    ]


def test_teacher_rendering_uses_formatted_birth_date() -> None:
    t = Teacher(
        name="Jaime",
        birth_date=date(2019, 4, 2),
        type=TeacherType.intern,
        salary=SalaryTier.medium(40.0),
    )
    lines = t.describe().splitlines()
    assert lines[0] == "Teacher:"
    assert "birth date: martes 02 de abril de 2019" in lines
    assert "type: intern" in lines
    assert "salary: medium" in lines


def test_salary_amount_is_independent_of_level() -> None:
    a = SalaryTier.senior(50.0)
    b = SalaryTier.senior(65)
    assert a.level is b.level is SalaryLevel.senior
    assert a.amount_text == "50.0"
    assert b.amount_text == "65.0"
    assert str(SalaryTier.junior(20.0)) == "junior"


def test_subject_rendering_lists_roster_names() -> None:
    laura = Teacher(name="Laura")
    sara = Student(name="Sara")
    sub = Subject(name="Kotlin", year=date(2019, 4, 2), teachers=[laura], students=(sara,))
    assert isinstance(sub.teachers, tuple)
    lines = sub.describe().splitlines()
    assert lines == [
        "Subject:",
        "name: Kotlin",
        "year: martes 02 de abril de 2019",
        "teachers: [Laura]",
        "students: [Sara]",
    ]
    assert "students: None" in Subject(name="Dart").describe()
