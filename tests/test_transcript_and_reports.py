import pytest

from enrollment.transcript import generate_transcript
from reports.report_generator import ReportGenerator


def test_transcript_unknown_student(store):
    assert generate_transcript(store, "NOPE") == "Student not found: NOPE"


def test_transcript_lists_active_enrollments(engine, store):
    engine.enroll("S1", "CS101")
    engine.enroll("S1", "CS201")
    engine.enroll("S1", "PE100")
    engine.record_grade("S1", "CS101", 93)
    engine.unenroll("S1", "PE100")

    transcript = generate_transcript(store, "S1")

    assert "Student: Ada Lovelace" in transcript
    assert "Registration No: REG001" in transcript
    assert "GPA: 4.00" in transcript
    cs101 = next(line for line in transcript.splitlines() if line.startswith("CS101"))
    assert "Intro to Programming" in cs101 and " A " in cs101 and "93.0" in cs101
    cs201 = next(line for line in transcript.splitlines() if line.startswith("CS201"))
    assert "N/A" in cs201 and "0.0" in cs201
    assert "PE100" not in transcript


def test_reports(engine, store):
    engine.enroll("S1", "CS101")
    engine.enroll("S2", "CS101")
    engine.enroll("S2", "CS201")
    engine.record_grade("S1", "CS101", 95)
    engine.record_grade("S2", "CS101", 65)

    reports = ReportGenerator(store)

    summary = reports.gpa_summary()
    assert summary['count'] == 2
    assert summary['mean'] == pytest.approx(2.5)
    assert summary['max'] == pytest.approx(4.0)
    assert summary['min'] == pytest.approx(1.0)

    assert [s.student_id for s in reports.top_students(1)] == ["S1"]
    assert reports.course_enrollment_counts() == {
        "CS101": 2, "CS201": 1, "MA101": 0, "PE100": 0
    }
    assert reports.grade_distribution() == {"A": 1, "B": 0, "C": 0, "D": 1, "F": 0}


def test_gpa_summary_empty(store):
    assert ReportGenerator(store).gpa_summary()['count'] == 0


def test_show_reports_prints(engine, store, capsys):
    engine.enroll("S1", "CS101")
    ReportGenerator(store).show_reports()

    out = capsys.readouterr().out
    assert "RECORDS SUMMARY" in out
    assert "No graded students yet" in out
    assert "CS101" in out
