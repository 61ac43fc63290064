"""
Course Catalog Module
CLI-based interface for adding and searching courses
"""

from typing import List

from database.store import RecordStore
from domain.grades import Semester
from domain.models import Course, build_course


def prompt_semester() -> Semester:
    """Ask for a semester by menu number"""
    print("Select Semester:")
    for i, semester in enumerate(Semester, 1):
        print(f"{i}. {semester.display_name}")
    return Semester.from_choice(int(input("Semester: ").strip()))


def print_courses(courses: List[Course], heading: str, empty_message: str):
    if not courses:
        print(f"\n[INFO] {empty_message}")
        return

    print("\n" + heading)
    print("-" * 60)
    for course in courses:
        print(course)


class CourseCatalog:
    """
    Course catalog management from the console
    """

    def __init__(self, store: RecordStore):
        self.store = store

    def add_course_cli(self):
        """CLI interface for adding a course"""
        print("\nEnter course details:")
        code = input("Course Code: ").strip()
        title = input("Course Title: ").strip()
        credits = int(input("Credits: ").strip())
        instructor_id = input("Instructor ID: ").strip()
        semester = prompt_semester()
        department = input("Department: ").strip()

        course = build_course(
            code=code,
            title=title,
            credits=credits,
            instructor_id=instructor_id,
            semester=semester,
            department=department
        )
        self.store.add_course(course)
        print(f"[SUCCESS] Course added: {course.code}")

    def list_courses(self):
        print_courses(self.store.get_all_courses(), "ALL COURSES", "No courses found")

    def search_by_instructor_cli(self):
        instructor_id = input("Instructor ID: ").strip()
        print_courses(
            self.store.search_courses_by_instructor(instructor_id),
            f"Courses by Instructor {instructor_id}:",
            f"No courses found for instructor: {instructor_id}"
        )

    def search_by_department_cli(self):
        department = input("Department: ").strip()
        print_courses(
            self.store.search_courses_by_department(department),
            f"Courses in Department {department}:",
            f"No courses found for department: {department}"
        )

    def search_by_semester_cli(self):
        semester = prompt_semester()
        print_courses(
            self.store.search_courses_by_semester(semester),
            f"Courses in {semester.display_name} Semester:",
            f"No courses found for semester: {semester.display_name}"
        )


def run_course_cli(store: RecordStore):
    """Run the course management menu"""
    catalog = CourseCatalog(store)

    while True:
        print("\n" + "=" * 60)
        print("COURSE MANAGEMENT")
        print("=" * 60)
        print("1. Add Course")
        print("2. List All Courses")
        print("3. Search Courses by Instructor")
        print("4. Search Courses by Department")
        print("5. Search Courses by Semester")
        print("0. Back to Main Menu")
        print("=" * 60)

        choice = input("Enter choice: ").strip()

        if choice == '1':
            catalog.add_course_cli()
        elif choice == '2':
            catalog.list_courses()
        elif choice == '3':
            catalog.search_by_instructor_cli()
        elif choice == '4':
            catalog.search_by_department_cli()
        elif choice == '5':
            catalog.search_by_semester_cli()
        elif choice == '0':
            break
        else:
            print("[ERROR] Invalid choice")
