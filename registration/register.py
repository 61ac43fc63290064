"""
Student Registration Module
CLI-based interface for registering and maintaining students
"""

from database.store import RecordStore
from domain.models import Student


class StudentRegistration:
    """
    Student profile management from the console
    Add, list, view, update and deactivate
    """

    def __init__(self, store: RecordStore):
        self.store = store

    def add_student_cli(self):
        """CLI interface for registering a new student"""
        print("\nEnter student details:")
        student_id = input("Student ID: ").strip()
        reg_no = input("Registration Number: ").strip()
        full_name = input("Full Name: ").strip()
        email = input("Email: ").strip()

        if not student_id or not full_name:
            print("[ERROR] Student ID and name are required!")
            return False

        if self.store.get_student(student_id):
            print(f"\n[WARNING] Student {student_id} already exists!")
            overwrite = input("Overwrite existing data? (y/n): ").strip().lower()
            if overwrite != 'y':
                print("[CANCELLED] Registration cancelled")
                return False

        self.store.add_student(Student(student_id, reg_no, full_name, email))
        print(f"[SUCCESS] Student added: {full_name} ({student_id})")
        return True

    def list_students(self):
        """List all active students"""
        students = self.store.get_active_students()

        if not students:
            print("\n[INFO] No active students found")
            return

        print("\n" + "=" * 60)
        print("ACTIVE STUDENTS")
        print("=" * 60)
        for student in students:
            print(student.get_display_info())
        print("=" * 60)
        print(f"Total Students: {len(students)}")

    def view_profile_cli(self):
        student_id = input("Student ID: ").strip()
        student = self.store.get_student(student_id)

        if student is None:
            print("[ERROR] Student not found")
            return

        print("\n" + student.get_display_info())
        print(f"Registered: {student.created_at:%Y-%m-%d %H:%M}")
        print(f"Enrolled Courses: {', '.join(student.enrolled_courses) or 'None'}")
        print(f"GPA: {student.gpa:.2f}")

    def update_student_cli(self):
        student_id = input("Student ID: ").strip()
        if self.store.get_student(student_id) is None:
            print("[ERROR] Student not found")
            return

        full_name = input("New Full Name (Enter to keep current): ").strip()
        email = input("New Email (Enter to keep current): ").strip()

        self.store.update_student(student_id, full_name, email)
        print("[SUCCESS] Student updated")

    def deactivate_student_cli(self):
        student_id = input("Student ID: ").strip()

        if self.store.deactivate_student(student_id):
            print("[SUCCESS] Student deactivated")
        else:
            print("[ERROR] Student not found")


def run_student_cli(store: RecordStore):
    """Run the student management menu"""
    registration = StudentRegistration(store)

    while True:
        print("\n" + "=" * 60)
        print("STUDENT MANAGEMENT")
        print("=" * 60)
        print("1. Add Student")
        print("2. List Active Students")
        print("3. View Student Profile")
        print("4. Update Student")
        print("5. Deactivate Student")
        print("0. Back to Main Menu")
        print("=" * 60)

        choice = input("Enter choice: ").strip()

        if choice == '1':
            registration.add_student_cli()
        elif choice == '2':
            registration.list_students()
        elif choice == '3':
            registration.view_profile_cli()
        elif choice == '4':
            registration.update_student_cli()
        elif choice == '5':
            registration.deactivate_student_cli()
        elif choice == '0':
            break
        else:
            print("[ERROR] Invalid choice")
