"""
Record storage module
In-memory store for students, courses and enrollments
"""

from .store import RecordStore, get_store

__all__ = ['RecordStore', 'get_store']
