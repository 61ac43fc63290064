"""
Enrollment Engine Module
Core enrollment, unenrollment and grading logic
Maintains per-student GPA from graded active enrollments
"""

from typing import Dict
import logging
import numpy as np

import config
from database.store import RecordStore, get_store
from domain.exceptions import RecordsError
from domain.models import Enrollment
from enrollment.validator import EnrollmentValidator


class EnrollmentEngine:
    """
    Central enrollment and grading engine
    Reads and writes the record store directly
    """

    def __init__(self, store: RecordStore = None,
                 max_credits: int = config.MAX_CREDITS_PER_SEMESTER):
        self.store = store if store is not None else get_store()
        self.validator = EnrollmentValidator(self.store, max_credits)

        # Statistics
        self.total_enrolled = 0
        self.total_rejected = 0
        self.total_unenrolled = 0
        self.total_grades_recorded = 0

        self._setup_logging()

    @property
    def max_credits(self) -> int:
        return self.validator.max_credits

    def _setup_logging(self):
        """Setup enrollment logging"""
        self.logger = logging.getLogger('EnrollmentEngine')
        self.logger.setLevel(config.LOG_LEVEL)

        if config.LOG_TO_FILE and not self.logger.handlers:
            handler = logging.FileHandler(config.ENROLLMENT_LOG)
            formatter = logging.Formatter(
                config.LOG_FORMAT,
                datefmt=config.LOG_DATE_FORMAT
            )
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)

    # ===========================
    # ENROLLMENT
    # ===========================

    def enroll(self, student_id: str, course_code: str) -> Enrollment:
        """
        Enroll a student in a course

        Args:
            student_id: Student identifier
            course_code: Course code

        Returns:
            The new active enrollment

        Raises:
            NotFoundError: Unknown student or course
            DuplicateEnrollmentError: Already actively enrolled
            CreditLimitExceededError: Cap would be exceeded
        """
        try:
            student, course = self.validator.validate(student_id, course_code)
        except RecordsError as e:
            self.total_rejected += 1
            self.logger.warning(f"Enrollment rejected: {student_id} -> {course_code} | {e}")
            raise

        enrollment = Enrollment(student.student_id, course.code)
        self.store.add_enrollment(enrollment)
        student.enroll_in_course(course.code)

        self.total_enrolled += 1
        self.logger.info(
            f"Enrolled: {student_id} -> {course_code} | Credits: {course.credits}"
        )
        return enrollment

    def unenroll(self, student_id: str, course_code: str) -> bool:
        """
        Unenroll a student from a course
        Unknown student or no active enrollment is a silent no-op

        Returns:
            True if an active enrollment was closed
        """
        enrollment = self.store.find_active_enrollment(student_id, course_code)
        if enrollment is None:
            return False

        enrollment.active = False
        student = self.store.get_student(student_id)
        if student is not None:
            student.unenroll_from_course(course_code)

        self.total_unenrolled += 1
        self.logger.info(f"Unenrolled: {student_id} -> {course_code}")
        return True

    # ===========================
    # GRADING
    # ===========================

    def record_grade(self, student_id: str, course_code: str, marks: float) -> bool:
        """
        Record marks for an active enrollment and refresh GPA
        No active enrollment records nothing but still refreshes GPA

        Args:
            student_id: Student identifier
            course_code: Course code
            marks: Numeric marks, letter grade derived from thresholds

        Returns:
            True if a grade was recorded
        """
        enrollment = self.store.find_active_enrollment(student_id, course_code)
        if enrollment is None:
            self.update_student_gpa(student_id)
            return False

        enrollment.record_grade(marks)
        self.update_student_gpa(student_id)

        self.total_grades_recorded += 1
        self.logger.info(
            f"Grade recorded: {student_id} -> {course_code} | "
            f"Marks: {marks:.1f} | Grade: {enrollment.grade.letter}"
        )
        return True

    def update_student_gpa(self, student_id: str):
        """
        Recompute GPA over active graded enrollments
        Left unchanged when there are none
        """
        student = self.store.get_student(student_id)
        if student is None:
            return

        points = []
        credits = []
        for enrollment in self.store.get_active_enrollments(student_id):
            if not enrollment.is_graded:
                continue
            course = self.store.get_course(enrollment.course_code)
            if course is None:
                continue
            points.append(enrollment.grade.points)
            credits.append(course.credits)

        if sum(credits) > 0:
            student.gpa = float(np.average(points, weights=credits))

    # ===========================
    # STATISTICS
    # ===========================

    def get_statistics(self) -> Dict:
        """Get engine statistics"""
        return {
            'total_enrolled': self.total_enrolled,
            'total_rejected': self.total_rejected,
            'total_unenrolled': self.total_unenrolled,
            'total_grades_recorded': self.total_grades_recorded,
            'max_credits': self.max_credits,
            'store': self.store.get_statistics()
        }

    def print_statistics(self):
        """Print session enrollment statistics"""
        stats = self.get_statistics()

        print("\n" + "=" * 60)
        print("SESSION STATISTICS")
        print("=" * 60)
        print(f"Enrollments Granted: {stats['total_enrolled']}")
        print(f"Enrollments Rejected: {stats['total_rejected']}")
        print(f"Unenrollments: {stats['total_unenrolled']}")
        print(f"Grades Recorded: {stats['total_grades_recorded']}")
        print(f"Credit Cap: {stats['max_credits']}")
        print("=" * 60)
