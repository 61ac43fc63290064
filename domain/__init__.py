"""
Domain module
Records, enumerations and errors
"""

from .grades import Grade, Semester
from .models import Student, Course, Enrollment, build_course
from .exceptions import (
    RecordsError,
    NotFoundError,
    DuplicateEnrollmentError,
    CreditLimitExceededError,
)

__all__ = [
    'Grade', 'Semester',
    'Student', 'Course', 'Enrollment', 'build_course',
    'RecordsError', 'NotFoundError',
    'DuplicateEnrollmentError', 'CreditLimitExceededError',
]
