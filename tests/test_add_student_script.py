from __future__ import annotations

import json

from scripts import add_student


def test_add_student_writes_record(data_file, capsys):
    code = add_student.main([
        "--name", "Alice",
        "--roll-no", "21CS001",
        "--university-id", "UNI-001",
        "--year", "2",
        "--department", "CS",
        "--file", str(data_file),
    ])

    assert code == 0
    data = json.loads(data_file.read_text(encoding="utf-8"))
    assert len(data) == 1
    assert data[0]["rollNo"] == "21CS001"
    assert data[0]["address"] == ""
    assert "OK: student added" in capsys.readouterr().out


def test_add_student_reports_missing_fields(data_file, capsys):
    code = add_student.main(["--name", "Alice", "--file", str(data_file)])

    assert code == 1
    assert "Missing required fields" in capsys.readouterr().err
    assert not data_file.exists()


def test_add_student_uses_configured_file(tmp_path, monkeypatch):
    target = tmp_path / "env.json"
    monkeypatch.setenv("STUDENTS_FILE", str(target))
    code = add_student.main([
        "--name", "Bob", "--roll-no", "1", "--university-id", "U", "--year", "1", "--department", "ECE",
    ])
    assert code == 0
    assert json.loads(target.read_text(encoding="utf-8"))[0]["name"] == "Bob"
