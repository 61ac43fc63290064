"""
Domain Models
Student, Course and Enrollment records held by the record store
"""

from datetime import datetime
from typing import List, NamedTuple, Optional

from domain.grades import Grade, Semester


class Student:
    """
    Registered student
    Never deleted, only deactivated
    """

    def __init__(self, student_id: str, reg_no: str, full_name: str, email: str):
        self.student_id = student_id
        self.reg_no = reg_no
        self.full_name = full_name
        self.email = email
        self.active = True
        self.gpa = 0.0
        self.created_at = datetime.now()

        # Course codes in enrollment order
        self.enrolled_courses: List[str] = []

    def enroll_in_course(self, course_code: str):
        if course_code not in self.enrolled_courses:
            self.enrolled_courses.append(course_code)

    def unenroll_from_course(self, course_code: str):
        if course_code in self.enrolled_courses:
            self.enrolled_courses.remove(course_code)

    def deactivate(self):
        self.active = False

    def get_display_info(self) -> str:
        """One-line summary for listings"""
        status = "Active" if self.active else "Inactive"
        return (f"ID: {self.student_id} | Reg No: {self.reg_no} | "
                f"Name: {self.full_name} | Email: {self.email} | Status: {status}")

    def __repr__(self):
        return f"Student({self.student_id!r}, {self.full_name!r})"


class Course(NamedTuple):
    """Catalog course, immutable once built"""

    code: str
    title: str
    credits: int
    instructor_id: str
    semester: Semester
    department: str

    def __str__(self):
        return (f"{self.code}: {self.title} | Credits: {self.credits} | "
                f"Instructor: {self.instructor_id} | "
                f"Semester: {self.semester.display_name} | Dept: {self.department}")


def build_course(code: str, title: str, credits: int, instructor_id: str,
                 semester: Semester, department: str) -> Course:
    """
    Build a validated course

    Args:
        code: Unique course code
        title: Course title
        credits: Credit count, must be a positive integer
        instructor_id: Instructor identifier
        semester: Term the course runs in
        department: Owning department

    Returns:
        Course instance

    Raises:
        ValueError: Missing code/title or non-positive credits
    """
    if not code or not code.strip():
        raise ValueError("Course code is required")
    if not title or not title.strip():
        raise ValueError("Course title is required")
    if isinstance(credits, bool) or not isinstance(credits, int) or credits <= 0:
        raise ValueError(f"Credits must be a positive integer: {credits!r}")
    if not isinstance(semester, Semester):
        raise ValueError(f"Invalid semester: {semester!r}")

    return Course(code.strip(), title.strip(), credits,
                  instructor_id.strip(), semester, department.strip())


class Enrollment:
    """
    One student-course attempt
    Unenrolling flips active off, history is kept
    """

    def __init__(self, student_id: str, course_code: str):
        self.student_id = student_id
        self.course_code = course_code
        self.active = True
        self.grade: Optional[Grade] = None
        self.marks: Optional[float] = None
        self.enrolled_at = datetime.now()

    @property
    def is_graded(self) -> bool:
        return self.grade is not None

    def record_grade(self, marks: float):
        """Store marks and derive the letter grade"""
        self.marks = marks
        self.grade = Grade.from_marks(marks)

    def __repr__(self):
        status = "active" if self.active else "inactive"
        return f"Enrollment({self.student_id!r}, {self.course_code!r}, {status})"
