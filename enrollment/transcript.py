"""
Transcript Module
Renders a per-student transcript from stored records
"""

from database.store import RecordStore


def generate_transcript(store: RecordStore, student_id: str) -> str:
    """
    Build transcript text for a student

    Args:
        store: Record store to read from
        student_id: Student identifier

    Returns:
        Transcript text, or a not-found message for unknown students
    """
    student = store.get_student(student_id)
    if student is None:
        return f"Student not found: {student_id}"

    lines = [
        "=== TRANSCRIPT ===",
        f"Student: {student.full_name}",
        f"Registration No: {student.reg_no}",
        f"GPA: {student.gpa:.2f}",
        "",
        "Course Records:",
        f"{'Code':<10} {'Title':<25} {'Credits':<8} {'Grade':<6} {'Marks':<6}",
        "-" * 60,
    ]

    for enrollment in store.get_active_enrollments(student_id):
        course = store.get_course(enrollment.course_code)
        if course is None:
            continue

        grade = enrollment.grade.letter if enrollment.is_graded else "N/A"
        marks = enrollment.marks if enrollment.marks is not None else 0.0
        lines.append(
            f"{course.code:<10} {course.title:<25} {course.credits:<8} "
            f"{grade:<6} {marks:<6.1f}"
        )

    return "\n".join(lines) + "\n"
