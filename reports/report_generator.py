"""
Report Generator Module
Summary reports across all stored records
GPA statistics, top students, course load and grade distribution
"""

from typing import Dict, List
import numpy as np

import config
from database.store import RecordStore
from domain.grades import Grade
from domain.models import Student


class ReportGenerator:
    """
    Aggregates store contents into summary reports
    """

    def __init__(self, store: RecordStore):
        self.store = store

    def _graded_students(self) -> List[Student]:
        """Active students holding at least one graded active enrollment"""
        graded = []
        for student in self.store.get_active_students():
            enrollments = self.store.get_active_enrollments(student.student_id)
            if any(e.is_graded for e in enrollments):
                graded.append(student)
        return graded

    def gpa_summary(self) -> Dict:
        """
        GPA statistics over graded active students

        Returns:
            Dictionary with count, mean, max, min and std (zeros when empty)
        """
        gpas = [s.gpa for s in self._graded_students()]

        if not gpas:
            return {'count': 0, 'mean': 0.0, 'max': 0.0, 'min': 0.0, 'std': 0.0}

        return {
            'count': len(gpas),
            'mean': float(np.mean(gpas)),
            'max': float(np.max(gpas)),
            'min': float(np.min(gpas)),
            'std': float(np.std(gpas)),
        }

    def top_students(self, n: int = config.TOP_STUDENTS_COUNT) -> List[Student]:
        """Active students ordered by GPA, highest first"""
        students = self.store.get_active_students()
        return sorted(students, key=lambda s: s.gpa, reverse=True)[:n]

    def course_enrollment_counts(self) -> Dict[str, int]:
        """Active enrollment count per course code"""
        counts = {course.code: 0 for course in self.store.get_all_courses()}

        for student in self.store.get_all_students():
            for enrollment in self.store.get_active_enrollments(student.student_id):
                if enrollment.course_code in counts:
                    counts[enrollment.course_code] += 1

        return counts

    def grade_distribution(self) -> Dict[str, int]:
        """Count of each letter grade over active graded enrollments"""
        distribution = {grade.letter: 0 for grade in Grade}

        for student in self.store.get_all_students():
            for enrollment in self.store.get_active_enrollments(student.student_id):
                if enrollment.is_graded:
                    distribution[enrollment.grade.letter] += 1

        return distribution

    def show_reports(self):
        """Print all reports"""
        stats = self.store.get_statistics()
        summary = self.gpa_summary()

        print("\n" + "=" * 60)
        print("RECORDS SUMMARY")
        print("=" * 60)
        print(f"Total Students: {stats['total_students']}")
        print(f"Active Students: {stats['active_students']}")
        print(f"Total Courses: {stats['total_courses']}")
        print(f"Active Enrollments: {stats['active_enrollments']}")

        print("\n" + "-" * 60)
        print("GPA STATISTICS")
        print("-" * 60)
        if summary['count']:
            print(f"Graded Students: {summary['count']}")
            print(f"Mean: {summary['mean']:.2f}  Max: {summary['max']:.2f}  "
                  f"Min: {summary['min']:.2f}  Std: {summary['std']:.2f}")
        else:
            print("No graded students yet")

        print("\n" + "-" * 60)
        print("TOP STUDENTS")
        print("-" * 60)
        top = self.top_students()
        if top:
            print(f"{'No.':<5} {'ID':<12} {'Name':<25} {'GPA':<6}")
            for i, student in enumerate(top, 1):
                print(f"{i:<5} {student.student_id:<12} {student.full_name:<25} "
                      f"{student.gpa:<6.2f}")
        else:
            print("No active students")

        print("\n" + "-" * 60)
        print("COURSE ENROLLMENT")
        print("-" * 60)
        counts = self.course_enrollment_counts()
        if counts:
            for code, count in sorted(counts.items()):
                print(f"{code:<12} {count}")
        else:
            print("No courses")

        print("\n" + "-" * 60)
        print("GRADE DISTRIBUTION")
        print("-" * 60)
        for letter, count in self.grade_distribution().items():
            print(f"{letter}: {count}")

        print("=" * 60)
