"""
Enrollment Validation Module
Duplicate and credit-limit checks for enrollment requests
"""

from typing import Tuple

import config
from database.store import RecordStore
from domain.exceptions import (
    NotFoundError,
    DuplicateEnrollmentError,
    CreditLimitExceededError,
)
from domain.models import Student, Course


class EnrollmentValidator:
    """
    Validates enrollment requests against store state
    Raises the matching domain error on the first failed rule
    """

    def __init__(self, store: RecordStore,
                 max_credits: int = config.MAX_CREDITS_PER_SEMESTER):
        self.store = store
        self.max_credits = max_credits

    def resolve(self, student_id: str, course_code: str) -> Tuple[Student, Course]:
        """
        Look up both sides of an enrollment request

        Raises:
            NotFoundError: Unknown student or course
        """
        student = self.store.get_student(student_id)
        if student is None:
            raise NotFoundError("Student", student_id)

        course = self.store.get_course(course_code)
        if course is None:
            raise NotFoundError("Course", course_code)

        return student, course

    def is_duplicate(self, student_id: str, course_code: str) -> bool:
        """Check for an existing active enrollment in the course"""
        return self.store.find_active_enrollment(student_id, course_code) is not None

    def current_credits(self, student_id: str) -> int:
        """Sum of credits across active enrollments"""
        total = 0
        for enrollment in self.store.get_active_enrollments(student_id):
            course = self.store.get_course(enrollment.course_code)
            if course is not None:
                total += course.credits
        return total

    def validate(self, student_id: str, course_code: str) -> Tuple[Student, Course]:
        """
        Run all enrollment rules

        Args:
            student_id: Student identifier
            course_code: Target course code

        Returns:
            (student, course) when the request is allowed

        Raises:
            NotFoundError: Unknown student or course
            DuplicateEnrollmentError: Already actively enrolled
            CreditLimitExceededError: Cap would be exceeded
        """
        student, course = self.resolve(student_id, course_code)

        if self.is_duplicate(student_id, course_code):
            raise DuplicateEnrollmentError(
                f"Student already enrolled in course: {course_code}"
            )

        current = self.current_credits(student_id)
        if current + course.credits > self.max_credits:
            raise CreditLimitExceededError(current, course.credits, self.max_credits)

        return student, course
