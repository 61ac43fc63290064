"""
Import/Export Module
CSV import and export of students and courses
Timestamped backups and backup directory utilities
"""

import csv
from datetime import datetime
from pathlib import Path
from typing import List, Tuple
import logging

import config
from database.store import RecordStore
from domain.grades import Semester
from domain.models import Student, build_course


class ImportExportService:
    """
    Moves records between the store and CSV files
    Also manages backup snapshots of exported data
    """

    def __init__(self, store: RecordStore):
        self.store = store
        self._setup_logging()

    def _setup_logging(self):
        """Setup transfer logging"""
        self.logger = logging.getLogger('ImportExportService')
        self.logger.setLevel(config.LOG_LEVEL)

        if config.LOG_TO_FILE and not self.logger.handlers:
            handler = logging.FileHandler(config.TRANSFER_LOG)
            formatter = logging.Formatter(
                config.LOG_FORMAT,
                datefmt=config.LOG_DATE_FORMAT
            )
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)

    def _read_rows(self, path: Path, min_columns: int):
        """Yield stripped data rows, skipping header, blanks and short rows"""
        with open(path, 'r', newline='', encoding='utf-8') as f:
            reader = csv.reader(f)
            next(reader, None)

            for line_no, row in enumerate(reader, 2):
                if not any(cell.strip() for cell in row):
                    continue
                if len(row) < min_columns:
                    self.logger.warning(
                        f"Skipping malformed row {line_no} in {path}: {row}"
                    )
                    continue
                yield [cell.strip() for cell in row]

    # ===========================
    # IMPORT
    # ===========================

    def import_students_from_csv(self, path: Path) -> int:
        """
        Import students from CSV (id,reg_no,full_name,email)

        Args:
            path: CSV file path

        Returns:
            Number of students imported
        """
        path = Path(path)
        count = 0

        for row in self._read_rows(path, len(config.STUDENT_CSV_HEADER)):
            student_id, reg_no, full_name, email = row[:4]
            self.store.add_student(Student(student_id, reg_no, full_name, email))
            count += 1

        self.logger.info(f"Imported {count} students from {path}")
        return count

    def import_courses_from_csv(self, path: Path) -> int:
        """
        Import courses from CSV
        (code,title,credits,instructor_id,semester,department)

        Args:
            path: CSV file path

        Returns:
            Number of courses imported

        Raises:
            ValueError: Non-integer credits or unknown semester
        """
        path = Path(path)
        count = 0

        for row in self._read_rows(path, len(config.COURSE_CSV_HEADER)):
            code, title, credits, instructor_id, semester, department = row[:6]
            course = build_course(
                code=code,
                title=title,
                credits=int(credits),
                instructor_id=instructor_id,
                semester=Semester.parse(semester),
                department=department
            )
            self.store.add_course(course)
            count += 1

        self.logger.info(f"Imported {count} courses from {path}")
        return count

    # ===========================
    # EXPORT
    # ===========================

    def export_students_to_csv(self, path: Path) -> int:
        """Write all students to CSV, returns row count"""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        students = self.store.get_all_students()

        with open(path, 'w', newline='', encoding='utf-8') as f:
            writer = csv.writer(f)
            writer.writerow(config.STUDENT_CSV_HEADER)
            for s in students:
                writer.writerow([s.student_id, s.reg_no, s.full_name, s.email])

        self.logger.info(f"Exported {len(students)} students to {path}")
        return len(students)

    def export_courses_to_csv(self, path: Path) -> int:
        """Write all courses to CSV, returns row count"""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        courses = self.store.get_all_courses()

        with open(path, 'w', newline='', encoding='utf-8') as f:
            writer = csv.writer(f)
            writer.writerow(config.COURSE_CSV_HEADER)
            for c in courses:
                writer.writerow([c.code, c.title, c.credits, c.instructor_id,
                                 c.semester.name, c.department])

        self.logger.info(f"Exported {len(courses)} courses to {path}")
        return len(courses)

    # ===========================
    # BACKUP
    # ===========================

    def create_backup(self, backup_root: Path) -> Path:
        """
        Export current records into a timestamped backup folder

        Args:
            backup_root: Directory holding all backups

        Returns:
            Path of the new backup folder
        """
        timestamp = datetime.now().strftime(config.BACKUP_TIMESTAMP_FORMAT)
        backup_dir = Path(backup_root) / f"{config.BACKUP_PREFIX}{timestamp}"
        backup_dir.mkdir(parents=True, exist_ok=True)

        self.export_students_to_csv(backup_dir / config.STUDENTS_CSV)
        self.export_courses_to_csv(backup_dir / config.COURSES_CSV)

        self.logger.info(f"Backup created at {backup_dir}")
        print(f"[Backup] Backup created at: {backup_dir}")
        return backup_dir

    def get_backup_directory_size(self, path: Path) -> int:
        """Total size in bytes of all files under path"""
        path = Path(path)
        if not path.exists():
            return 0

        return sum(p.stat().st_size for p in path.rglob('*') if p.is_file())

    def list_backup_files_by_depth(self, path: Path,
                                   max_depth: int) -> List[Tuple[int, Path]]:
        """
        List entries under path down to max_depth levels

        Args:
            path: Root directory
            max_depth: Deepest level to include, children of root are depth 1

        Returns:
            List of (depth, path) in walk order
        """
        path = Path(path)
        entries = []

        def walk(directory: Path, depth: int):
            if depth > max_depth:
                return
            for child in sorted(directory.iterdir()):
                entries.append((depth, child))
                if child.is_dir():
                    walk(child, depth + 1)

        if path.is_dir():
            walk(path, 1)

        print(f"\n[Backup] Files in {path} (max depth {max_depth}):")
        for depth, entry in entries:
            print(f"{'  ' * depth}{entry.name}{'/' if entry.is_dir() else ''}")

        return entries
