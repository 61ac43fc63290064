"""
Enrollment module
Enrollment rules, grading and transcripts
"""

from .enrollment_engine import EnrollmentEngine
from .validator import EnrollmentValidator
from .transcript import generate_transcript

__all__ = ['EnrollmentEngine', 'EnrollmentValidator', 'generate_transcript']
