"""
Campus Records Manager - Main Entry Point
CLI-based student, course, enrollment and grade management
"""

import sys
import signal
from pathlib import Path
import logging

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent))

import config
from database.store import RecordStore, get_store
from domain.exceptions import RecordsError
from enrollment.enrollment_engine import EnrollmentEngine
from enrollment.transcript import generate_transcript
from registration.register import run_student_cli
from registration.catalog import run_course_cli
from reports.report_generator import ReportGenerator
from transfer.import_export import ImportExportService


class RecordsSystem:
    """
    Main records system controller
    Manages startup and the CLI menus
    """

    def __init__(self, store: RecordStore = None):
        self.store = store if store is not None else get_store()
        self.engine = EnrollmentEngine(self.store)
        self.transfer = ImportExportService(self.store)
        self.reports = ReportGenerator(self.store)

        self._setup_logging()

    def _setup_logging(self):
        """Setup system logging"""
        self.logger = logging.getLogger('RecordsSystem')
        self.logger.setLevel(config.LOG_LEVEL)

        if config.LOG_TO_FILE and not self.logger.handlers:
            handler = logging.FileHandler(config.SYSTEM_LOG)
            formatter = logging.Formatter(
                config.LOG_FORMAT,
                datefmt=config.LOG_DATE_FORMAT
            )
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)

    def _signal_handler(self, signum, frame):
        """Handle interrupt signals"""
        print("\n\n[System] Interrupt received, shutting down...")
        sys.exit(0)

    def install_signal_handlers(self):
        signal.signal(signal.SIGINT, self._signal_handler)
        signal.signal(signal.SIGTERM, self._signal_handler)

    def initialize(self, data_dir: Path = config.DATA_DIR):
        """Load initial data files when present"""
        print("\n" + "=" * 60)
        print(f"{config.SYSTEM_NAME} v{config.VERSION}")
        print("=" * 60)

        student_file = Path(data_dir) / config.STUDENTS_CSV
        course_file = Path(data_dir) / config.COURSES_CSV

        if student_file.exists():
            count = self.transfer.import_students_from_csv(student_file)
            print(f"✓ Loaded {count} students")
        if course_file.exists():
            count = self.transfer.import_courses_from_csv(course_file)
            print(f"✓ Loaded {count} courses")
        if not student_file.exists() and not course_file.exists():
            print("No initial data files found. Starting with empty system.")

        self.logger.info("System initialized")

    def show_menu(self):
        """Show main menu"""
        while True:
            print("\n" + "=" * 60)
            print("CAMPUS RECORDS MANAGER - MAIN MENU")
            print("=" * 60)
            print("1. Manage Students")
            print("2. Manage Courses")
            print("3. Manage Enrollments")
            print("4. Manage Grades")
            print("5. Import/Export Data")
            print("6. Backup & Utilities")
            print("7. Show Reports")
            print("8. Platform Information")
            print("0. Exit")
            print("=" * 60)

            choice = input("\nEnter choice: ").strip()

            if choice == '0':
                print("\n[System] Thank you for using CCRM!")
                break

            try:
                if choice == '1':
                    run_student_cli(self.store)
                elif choice == '2':
                    run_course_cli(self.store)
                elif choice == '3':
                    self.manage_enrollments()
                elif choice == '4':
                    self.manage_grades()
                elif choice == '5':
                    self.import_export_data()
                elif choice == '6':
                    self.backup_utilities()
                elif choice == '7':
                    self.reports.show_reports()
                    self.engine.print_statistics()
                elif choice == '8':
                    config.print_platform_info()
                else:
                    print("[ERROR] Invalid choice")
            except (RecordsError, ValueError, IndexError, OSError) as e:
                self.logger.error(f"Operation failed: {e}")
                print(f"[ERROR] {e}")

    # ===========================
    # ENROLLMENTS
    # ===========================

    def manage_enrollments(self):
        while True:
            print("\n" + "=" * 60)
            print("ENROLLMENT MANAGEMENT")
            print("=" * 60)
            print("1. Enroll Student in Course")
            print("2. Unenroll Student from Course")
            print("3. View Student Enrollments")
            print("0. Back to Main Menu")
            print("=" * 60)

            choice = input("Enter choice: ").strip()

            if choice == '1':
                self.enroll_student()
            elif choice == '2':
                self.unenroll_student()
            elif choice == '3':
                self.view_student_enrollments()
            elif choice == '0':
                break
            else:
                print("[ERROR] Invalid choice")

    def enroll_student(self):
        student_id = input("Student ID: ").strip()
        course_code = input("Course Code: ").strip()

        try:
            self.engine.enroll(student_id, course_code)
            print("[SUCCESS] Student enrolled")
        except RecordsError as e:
            print(f"[ERROR] Enrollment failed: {e}")

    def unenroll_student(self):
        student_id = input("Student ID: ").strip()
        course_code = input("Course Code: ").strip()

        if self.engine.unenroll(student_id, course_code):
            print("[SUCCESS] Student unenrolled")
        else:
            print("[INFO] No active enrollment found, nothing to do")

    def view_student_enrollments(self):
        student_id = input("Student ID: ").strip()
        student = self.store.get_student(student_id)

        if student is None:
            print("[ERROR] Student not found")
            return

        print(f"\nEnrollments for {student.full_name}:")
        for course_code in student.enrolled_courses:
            course = self.store.get_course(course_code)
            if course is not None:
                print(f"- {course.code}: {course.title}")

    # ===========================
    # GRADES
    # ===========================

    def manage_grades(self):
        while True:
            print("\n" + "=" * 60)
            print("GRADE MANAGEMENT")
            print("=" * 60)
            print("1. Record Grade")
            print("2. View Student Transcript")
            print("0. Back to Main Menu")
            print("=" * 60)

            choice = input("Enter choice: ").strip()

            if choice == '1':
                self.record_grade()
            elif choice == '2':
                student_id = input("Student ID: ").strip()
                print("\n" + generate_transcript(self.store, student_id))
            elif choice == '0':
                break
            else:
                print("[ERROR] Invalid choice")

    def record_grade(self):
        student_id = input("Student ID: ").strip()
        course_code = input("Course Code: ").strip()
        marks = float(input("Marks (0-100): ").strip())

        if self.engine.record_grade(student_id, course_code, marks):
            print("[SUCCESS] Grade recorded")
        else:
            print("[INFO] No active enrollment found, grade not recorded")

    # ===========================
    # IMPORT / EXPORT / BACKUP
    # ===========================

    def import_export_data(self):
        while True:
            print("\n" + "=" * 60)
            print("IMPORT/EXPORT DATA")
            print("=" * 60)
            print("1. Import Students from CSV")
            print("2. Import Courses from CSV")
            print("3. Export Students to CSV")
            print("4. Export Courses to CSV")
            print("0. Back to Main Menu")
            print("=" * 60)

            choice = input("Enter choice: ").strip()

            if choice == '1':
                path = Path(input("CSV file path: ").strip())
                count = self.transfer.import_students_from_csv(path)
                print(f"[SUCCESS] Imported {count} students")
            elif choice == '2':
                path = Path(input("CSV file path: ").strip())
                count = self.transfer.import_courses_from_csv(path)
                print(f"[SUCCESS] Imported {count} courses")
            elif choice == '3':
                path = config.DATA_DIR / config.STUDENTS_EXPORT_CSV
                self.transfer.export_students_to_csv(path)
                print(f"[SUCCESS] Students exported to: {path}")
            elif choice == '4':
                path = config.DATA_DIR / config.COURSES_EXPORT_CSV
                self.transfer.export_courses_to_csv(path)
                print(f"[SUCCESS] Courses exported to: {path}")
            elif choice == '0':
                break
            else:
                print("[ERROR] Invalid choice")

    def backup_utilities(self):
        while True:
            print("\n" + "=" * 60)
            print("BACKUP & UTILITIES")
            print("=" * 60)
            print("1. Create Backup")
            print("2. Show Backup Directory Size")
            print("3. List Backup Files by Depth")
            print("0. Back to Main Menu")
            print("=" * 60)

            choice = input("Enter choice: ").strip()

            if choice == '1':
                self.transfer.create_backup(config.BACKUP_DIR)
            elif choice == '2':
                size = self.transfer.get_backup_directory_size(config.BACKUP_DIR)
                print(f"Backup directory size: {size} bytes")
            elif choice == '3':
                max_depth = int(input("Max depth: ").strip())
                self.transfer.list_backup_files_by_depth(config.BACKUP_DIR, max_depth)
            elif choice == '0':
                break
            else:
                print("[ERROR] Invalid choice")


def main():
    """Main entry point"""
    system = RecordsSystem()
    system.install_signal_handlers()

    try:
        system.initialize()
        system.show_menu()

    except Exception as e:
        print(f"\n[ERROR] System error: {e}")
        import traceback
        traceback.print_exc()

    finally:
        print("\n[System] Goodbye!")


if __name__ == "__main__":
    main()
