"""
Record Store Module
In-memory storage for students, courses and enrollments
Keyed by student id and course code
"""

from typing import List, Dict, Optional

from domain.grades import Semester
from domain.models import Student, Course, Enrollment


class RecordStore:
    """
    In-memory record store
    Holds students, courses and per-student enrollment history
    """

    def __init__(self):
        self.students: Dict[str, Student] = {}
        self.courses: Dict[str, Course] = {}
        # {student_id: [Enrollment, ...]} in enrollment order
        self.enrollments: Dict[str, List[Enrollment]] = {}

    # ===========================
    # STUDENT OPERATIONS
    # ===========================

    def add_student(self, student: Student):
        """Add or replace a student, keeping any enrollment history"""
        self.students[student.student_id] = student
        self.enrollments.setdefault(student.student_id, [])

    def get_student(self, student_id: str) -> Optional[Student]:
        return self.students.get(student_id)

    def get_all_students(self) -> List[Student]:
        return list(self.students.values())

    def get_active_students(self) -> List[Student]:
        return [s for s in self.students.values() if s.active]

    def update_student(self, student_id: str, full_name: str = None,
                       email: str = None) -> bool:
        """
        Update student profile fields

        Args:
            student_id: Student identifier
            full_name: New name, blank keeps current
            email: New email, blank keeps current

        Returns:
            False if the student is unknown
        """
        student = self.students.get(student_id)
        if student is None:
            return False

        if full_name:
            student.full_name = full_name
        if email:
            student.email = email
        return True

    def deactivate_student(self, student_id: str) -> bool:
        student = self.students.get(student_id)
        if student is None:
            return False

        student.deactivate()
        return True

    # ===========================
    # COURSE OPERATIONS
    # ===========================

    def add_course(self, course: Course):
        """Add a course, replacing any course with the same code"""
        self.courses[course.code] = course

    def get_course(self, course_code: str) -> Optional[Course]:
        return self.courses.get(course_code)

    def get_all_courses(self) -> List[Course]:
        return list(self.courses.values())

    def search_courses_by_instructor(self, instructor_id: str) -> List[Course]:
        return [c for c in self.courses.values() if c.instructor_id == instructor_id]

    def search_courses_by_department(self, department: str) -> List[Course]:
        department = department.lower()
        return [c for c in self.courses.values() if c.department.lower() == department]

    def search_courses_by_semester(self, semester: Semester) -> List[Course]:
        return [c for c in self.courses.values() if c.semester == semester]

    # ===========================
    # ENROLLMENT OPERATIONS
    # ===========================

    def get_enrollments(self, student_id: str) -> List[Enrollment]:
        """All enrollment records for a student, inactive included"""
        return self.enrollments.get(student_id, [])

    def get_active_enrollments(self, student_id: str) -> List[Enrollment]:
        return [e for e in self.get_enrollments(student_id) if e.active]

    def find_active_enrollment(self, student_id: str,
                               course_code: str) -> Optional[Enrollment]:
        """First active enrollment for the course, or None"""
        for enrollment in self.get_enrollments(student_id):
            if enrollment.course_code == course_code and enrollment.active:
                return enrollment
        return None

    def add_enrollment(self, enrollment: Enrollment):
        self.enrollments.setdefault(enrollment.student_id, []).append(enrollment)

    # ===========================
    # STATISTICS
    # ===========================

    def get_statistics(self) -> Dict:
        """Get store statistics"""
        return {
            'total_students': len(self.students),
            'active_students': len(self.get_active_students()),
            'total_courses': len(self.courses),
            'active_enrollments': sum(
                1 for records in self.enrollments.values()
                for e in records if e.active
            ),
        }

    def clear(self):
        """Remove all records"""
        self.students.clear()
        self.courses.clear()
        self.enrollments.clear()


# Singleton instance
_store_instance = None

def get_store() -> RecordStore:
    """Get singleton record store instance"""
    global _store_instance
    if _store_instance is None:
        _store_instance = RecordStore()
    return _store_instance
