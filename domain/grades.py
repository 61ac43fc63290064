"""
Grade and Semester Enumerations
Letter grades with quality points, academic terms
"""

from enum import Enum

import config


class Grade(Enum):
    """Letter grade with its quality-point value"""

    A = 4.0
    B = 3.0
    C = 2.0
    D = 1.0
    F = 0.0

    @property
    def letter(self) -> str:
        return self.name

    @property
    def points(self) -> float:
        return self.value

    @classmethod
    def from_marks(cls, marks: float) -> "Grade":
        """
        Derive letter grade from numeric marks

        Args:
            marks: Marks out of 100

        Returns:
            Grade for the first threshold the marks reach, F otherwise
        """
        for minimum, letter in config.GRADE_THRESHOLDS:
            if marks >= minimum:
                return cls[letter]
        return cls.F


class Semester(Enum):
    """Academic term a course runs in"""

    SPRING = "Spring"
    SUMMER = "Summer"
    FALL = "Fall"

    @property
    def display_name(self) -> str:
        return self.value

    @classmethod
    def from_choice(cls, choice: int) -> "Semester":
        """Map a 1-based menu number to a semester"""
        members = list(cls)
        if choice < 1 or choice > len(members):
            raise IndexError(f"Invalid semester choice: {choice}")
        return members[choice - 1]

    @classmethod
    def parse(cls, text: str) -> "Semester":
        """Parse a semester name, case-insensitive"""
        key = text.strip().upper()
        if key not in cls.__members__:
            raise ValueError(f"Unknown semester: {text}")
        return cls[key]
