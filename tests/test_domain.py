import pytest

from domain.grades import Grade, Semester
from domain.models import Student, Enrollment, build_course


@pytest.mark.parametrize("marks, expected", [
    (100, Grade.A),
    (90, Grade.A),
    (89.9, Grade.B),
    (80, Grade.B),
    (70, Grade.C),
    (60, Grade.D),
    (59.5, Grade.F),
    (0, Grade.F),
])
def test_grade_from_marks(marks, expected):
    assert Grade.from_marks(marks) is expected


def test_grade_points():
    assert [g.points for g in Grade] == [4.0, 3.0, 2.0, 1.0, 0.0]
    assert Grade.B.letter == "B"


def test_semester_from_choice():
    assert Semester.from_choice(1) is Semester.SPRING
    assert Semester.from_choice(3) is Semester.FALL
    with pytest.raises(IndexError):
        Semester.from_choice(4)


def test_semester_parse():
    assert Semester.parse(" fall ") is Semester.FALL
    with pytest.raises(ValueError):
        Semester.parse("WINTER")


def test_student_course_list_has_no_duplicates():
    student = Student("S1", "R1", "Ada", "ada@example.edu")
    student.enroll_in_course("CS101")
    student.enroll_in_course("CS201")
    student.enroll_in_course("CS101")
    assert student.enrolled_courses == ["CS101", "CS201"]

    student.unenroll_from_course("CS101")
    student.unenroll_from_course("CS999")
    assert student.enrolled_courses == ["CS201"]


def test_student_defaults_and_deactivate():
    student = Student("S1", "R1", "Ada", "ada@example.edu")
    assert student.active and student.gpa == 0.0

    student.deactivate()
    assert not student.active
    assert "Inactive" in student.get_display_info()


def test_build_course_strips_fields():
    course = build_course(" CS101 ", "Intro ", 3, "I1", Semester.FALL, " CSE")
    assert course.code == "CS101"
    assert course.title == "Intro"
    assert course.department == "CSE"
    assert "Fall" in str(course)


@pytest.mark.parametrize("credits", [0, -3, 2.5, True])
def test_build_course_rejects_bad_credits(credits):
    with pytest.raises(ValueError):
        build_course("CS101", "Intro", credits, "I1", Semester.FALL, "CSE")


def test_build_course_requires_code():
    with pytest.raises(ValueError):
        build_course("", "Intro", 3, "I1", Semester.FALL, "CSE")


def test_course_is_immutable():
    course = build_course("CS101", "Intro", 3, "I1", Semester.FALL, "CSE")
    with pytest.raises(AttributeError):
        course.credits = 5


def test_enrollment_record_grade():
    enrollment = Enrollment("S1", "CS101")
    assert not enrollment.is_graded

    enrollment.record_grade(72.5)
    assert enrollment.grade is Grade.C
    assert enrollment.marks == 72.5
