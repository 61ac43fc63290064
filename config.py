"""
Configuration file for Campus Records Manager
Central configuration for all system parameters
"""

import sys
import platform
from pathlib import Path

# ===========================
# PATH CONFIGURATION
# ===========================
BASE_DIR = Path(__file__).parent
DATA_DIR = BASE_DIR / "data"
BACKUP_DIR = BASE_DIR / "backups"
LOGS_DIR = BASE_DIR / "logs"

# Create directories if they don't exist
DATA_DIR.mkdir(exist_ok=True)
BACKUP_DIR.mkdir(exist_ok=True)
LOGS_DIR.mkdir(exist_ok=True)

# ===========================
# ENROLLMENT CONFIGURATION
# ===========================
MAX_CREDITS_PER_SEMESTER = 24  # Credit cap across active enrollments

# ===========================
# GRADING CONFIGURATION
# ===========================
# (minimum marks, letter) - checked top-down, anything lower is F
GRADE_THRESHOLDS = [
    (90.0, "A"),
    (80.0, "B"),
    (70.0, "C"),
    (60.0, "D"),
]

# ===========================
# IMPORT / EXPORT CONFIGURATION
# ===========================
STUDENTS_CSV = "students.csv"
COURSES_CSV = "courses.csv"
STUDENTS_EXPORT_CSV = "students_export.csv"
COURSES_EXPORT_CSV = "courses_export.csv"
STUDENT_CSV_HEADER = ["id", "reg_no", "full_name", "email"]
COURSE_CSV_HEADER = ["code", "title", "credits", "instructor_id", "semester", "department"]
BACKUP_PREFIX = "backup_"
BACKUP_TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"

# ===========================
# REPORT CONFIGURATION
# ===========================
TOP_STUDENTS_COUNT = 5

# ===========================
# LOGGING CONFIGURATION
# ===========================
LOG_LEVEL = "INFO"  # Options: "DEBUG", "INFO", "WARNING", "ERROR"
LOG_TO_FILE = True
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

# Log file paths
SYSTEM_LOG = LOGS_DIR / "system.log"
ENROLLMENT_LOG = LOGS_DIR / "enrollment.log"
TRANSFER_LOG = LOGS_DIR / "transfer.log"

# ===========================
# SYSTEM CONFIGURATION
# ===========================
SYSTEM_NAME = "Campus Course & Records Manager"
VERSION = "1.0.0"


def print_platform_info():
    """Print interpreter, OS and configured paths"""
    print("\n" + "=" * 60)
    print("PLATFORM INFORMATION")
    print("=" * 60)
    print(f"System: {SYSTEM_NAME} v{VERSION}")
    print(f"Python: {platform.python_version()} ({platform.python_implementation()})")
    print(f"OS: {platform.system()} {platform.release()}")
    print(f"Machine: {platform.machine()}")
    print(f"Executable: {sys.executable}")
    print(f"Data Directory: {DATA_DIR}")
    print(f"Backup Directory: {BACKUP_DIR}")
    print(f"Max Credits Per Semester: {MAX_CREDITS_PER_SEMESTER}")
    print("=" * 60)
