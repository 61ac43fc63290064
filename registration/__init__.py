"""
Student and course registration module
CLI-based record maintenance
"""

from .register import StudentRegistration, run_student_cli
from .catalog import CourseCatalog, run_course_cli

__all__ = ['StudentRegistration', 'run_student_cli', 'CourseCatalog', 'run_course_cli']
