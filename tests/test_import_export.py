import pytest

from database.store import RecordStore
from domain.grades import Semester
from transfer.import_export import ImportExportService


def test_import_students(tmp_path):
    csv_file = tmp_path / "students.csv"
    csv_file.write_text(
        "id,reg_no,full_name,email\n"
        "S1,REG001,Ada Lovelace,ada@example.edu\n"
        "\n"
        "S2,REG002\n"
        "S3, REG003 , Grace Hopper ,grace@example.edu\n"
    )
    store = RecordStore()

    count = ImportExportService(store).import_students_from_csv(csv_file)

    assert count == 2
    assert store.get_student("S3").full_name == "Grace Hopper"
    assert store.get_student("S2") is None
    assert store.get_enrollments("S1") == []


def test_import_courses(tmp_path):
    csv_file = tmp_path / "courses.csv"
    csv_file.write_text(
        "code,title,credits,instructor_id,semester,department\n"
        "CS101,Intro to Programming,3,I1,FALL,CSE\n"
        "MA101,Calculus,4,I2,spring,Math\n"
    )
    store = RecordStore()

    assert ImportExportService(store).import_courses_from_csv(csv_file) == 2
    assert store.get_course("MA101").semester is Semester.SPRING
    assert store.get_course("CS101").credits == 3


def test_import_courses_bad_credits(tmp_path):
    csv_file = tmp_path / "courses.csv"
    csv_file.write_text(
        "code,title,credits,instructor_id,semester,department\n"
        "CS101,Intro,three,I1,FALL,CSE\n"
    )

    with pytest.raises(ValueError):
        ImportExportService(RecordStore()).import_courses_from_csv(csv_file)


def test_export_then_import(store, tmp_path):
    service = ImportExportService(store)
    assert service.export_students_to_csv(tmp_path / "out" / "students.csv") == 2
    assert service.export_courses_to_csv(tmp_path / "out" / "courses.csv") == 4

    header = (tmp_path / "out" / "courses.csv").read_text().splitlines()[0]
    assert header == "code,title,credits,instructor_id,semester,department"

    fresh = RecordStore()
    loader = ImportExportService(fresh)
    loader.import_students_from_csv(tmp_path / "out" / "students.csv")
    loader.import_courses_from_csv(tmp_path / "out" / "courses.csv")

    assert fresh.get_student("S2").email == "alan@example.edu"
    assert fresh.get_course("MA101") == store.get_course("MA101")


def test_backup_size_and_listing(store, tmp_path, capsys):
    service = ImportExportService(store)
    backup_root = tmp_path / "backups"

    backup_dir = service.create_backup(backup_root)

    assert backup_dir.parent == backup_root
    assert backup_dir.name.startswith("backup_")
    assert (backup_dir / "students.csv").exists()
    assert (backup_dir / "courses.csv").exists()

    expected = sum(p.stat().st_size for p in backup_dir.iterdir())
    assert service.get_backup_directory_size(backup_root) == expected

    shallow = service.list_backup_files_by_depth(backup_root, 1)
    assert shallow == [(1, backup_dir)]

    deep = service.list_backup_files_by_depth(backup_root, 2)
    assert [(d, p.name) for d, p in deep] == [
        (1, backup_dir.name), (2, "courses.csv"), (2, "students.csv")
    ]
    assert "students.csv" in capsys.readouterr().out


def test_missing_backup_directory(tmp_path):
    service = ImportExportService(RecordStore())
    assert service.get_backup_directory_size(tmp_path / "missing") == 0
    assert service.list_backup_files_by_depth(tmp_path / "missing", 3) == []
