"""
Shared fixtures for the records manager tests
"""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

import config
from database.store import RecordStore
from domain.grades import Semester
from domain.models import Student, build_course
from enrollment.enrollment_engine import EnrollmentEngine


@pytest.fixture(autouse=True)
def no_log_files(monkeypatch):
    monkeypatch.setattr(config, "LOG_TO_FILE", False)


@pytest.fixture
def store():
    store = RecordStore()
    store.add_student(Student("S1", "REG001", "Ada Lovelace", "ada@example.edu"))
    store.add_student(Student("S2", "REG002", "Alan Turing", "alan@example.edu"))
    store.add_course(build_course("CS101", "Intro to Programming", 3, "I1", Semester.FALL, "CSE"))
    store.add_course(build_course("CS201", "Data Structures", 4, "I1", Semester.SPRING, "CSE"))
    store.add_course(build_course("MA101", "Calculus", 15, "I2", Semester.FALL, "Math"))
    store.add_course(build_course("PE100", "Physical Education", 1, "I3", Semester.SUMMER, "Sports"))
    return store


@pytest.fixture
def engine(store):
    return EnrollmentEngine(store, max_credits=18)


@pytest.fixture
def feed_input(monkeypatch):
    """Replace input() with a scripted sequence of answers"""
    def _feed(*answers):
        answers = iter(answers)
        monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    return _feed
