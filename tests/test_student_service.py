from __future__ import annotations

import logging
import threading

import pytest

from student_info.domain.students import MISSING_FIELDS_MESSAGE
from student_info.repositories.json_storage import StudentStore
from student_info.services.student_service import MissingFieldsError, StudentService


@pytest.fixture()
def service(data_file):
    return StudentService(StudentStore(data_file), clock=lambda: 1_700_000_000.5)


def test_create_student_assigns_millisecond_id_and_persists(service, alice):
    student = service.create_student(alice)

    assert student.id == 1_700_000_000_500
    stored = service.store.load()
    assert [s.to_dict() for s in stored] == [student.to_dict()]


def test_create_student_appends_in_insertion_order(service, alice):
    service.create_student(alice)
    service.create_student({**alice, "name": "bob"})
    assert [s.name for s in service.list_students()] == ["Alice", "bob"]


def test_create_student_rejects_missing_fields_without_touching_store(service, alice, data_file):
    del alice["universityId"]
    with pytest.raises(MissingFieldsError) as excinfo:
        service.create_student(alice)
    assert excinfo.value.missing == ["universityId"]
    assert str(excinfo.value) == MISSING_FIELDS_MESSAGE
    assert not data_file.exists()


def test_create_student_logs_the_new_record(service, alice, caplog):
    with caplog.at_level(logging.INFO, logger="student_info"):
        service.create_student(alice)
    assert "Added new student" in caplog.text
    assert "Alice" in caplog.text


def test_list_students_without_both_filter_args_returns_all(service, alice):
    service.create_student(alice)
    service.create_student({**alice, "name": "bob", "department": "ECE"})

    assert len(service.list_students()) == 2
    assert len(service.list_students("name", None)) == 2
    assert len(service.list_students("", "ali")) == 2
    assert len(service.list_students("name", "")) == 2


def test_list_students_filters_by_field(service, alice):
    service.create_student(alice)
    service.create_student({**alice, "name": "bob", "department": "ECE"})

    assert [s.name for s in service.list_students("name", "ali")] == ["Alice"]
    assert [s.name for s in service.list_students("department", "ec")] == ["bob"]
    assert service.list_students("department", "math") == []
    assert service.list_students("unknown", "a") == []


def test_concurrent_creates_keep_every_record(service, alice):
    count = 40
    start = threading.Barrier(count)

    def worker(i):
        start.wait()
        service.create_student({**alice, "rollNo": f"R{i}"})

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(count)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    stored = service.list_students()
    assert len(stored) == count
    assert sorted(s.roll_no for s in stored) == sorted(f"R{i}" for i in range(count))
