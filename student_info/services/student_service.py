"""Student use cases (listing, filtering, creation)."""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping, Optional

from student_info.domain.students import (
    MISSING_FIELDS_MESSAGE,
    Student,
    matches,
    missing_required_fields,
    now_millis,
)
from student_info.repositories.json_storage import StudentStore

logger = logging.getLogger(__name__)


class StudentError(Exception):
    """Base exception for student workflow."""


class MissingFieldsError(StudentError):
    """Raised when a creation payload lacks one of the required fields."""

    def __init__(self, missing: list[str]):
        super().__init__(MISSING_FIELDS_MESSAGE)
        self.message = MISSING_FIELDS_MESSAGE
        self.missing = missing


class StudentService:
    """Loads, filters and appends student records through a StudentStore."""

    def __init__(self, store: StudentStore, clock: Optional[Callable[[], float]] = None) -> None:
        self.store = store
        self._clock = clock

    def list_students(self, search_by: str | None = None, query: str | None = None) -> list[Student]:
        students = self.store.load()
        if not search_by or not query:
            return students
        return [s for s in students if matches(s, search_by, query)]

    def create_student(self, payload: Mapping[str, Any]) -> Student:
        missing = missing_required_fields(payload)
        if missing:
            raise MissingFieldsError(missing)
        student = Student.from_payload(payload, student_id=now_millis(self._clock))
        with self.store.lock:
            students = self.store.load()
            students.append(student)
            self.store.save(students)
        logger.info("Added new student (and saved to %s): %s", self.store.path.name, student.to_dict())
        return student
