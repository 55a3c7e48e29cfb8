"""Domain helpers for student records: field layout, validation and filtering."""
from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any, Mapping, Optional

# Persisted key order mirrors this tuple.
FIELDS = (
    "id",
    "name",
    "rollNo",
    "universityId",
    "bloodGroup",
    "address",
    "year",
    "department",
)
REQUIRED_FIELDS = ("name", "rollNo", "universityId", "year", "department")
MISSING_FIELDS_MESSAGE = "Missing required fields: " + ", ".join(REQUIRED_FIELDS)

_ATTRS = {
    "id": "id",
    "name": "name",
    "rollNo": "roll_no",
    "universityId": "university_id",
    "bloodGroup": "blood_group",
    "address": "address",
    "year": "year",
    "department": "department",
}


@dataclass
class Student:
    """One student entry as stored in the JSON document."""

    id: Any
    name: Any
    roll_no: Any
    university_id: Any
    blood_group: Any = None
    address: Any = ""
    year: Any = None
    department: Any = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any], *, student_id: int) -> "Student":
        """Build a new record from a creation body. Address falls back to ""."""
        return cls(
            id=student_id,
            name=payload.get("name"),
            roll_no=payload.get("rollNo"),
            university_id=payload.get("universityId"),
            blood_group=payload.get("bloodGroup"),
            address=payload.get("address") or "",
            year=payload.get("year"),
            department=payload.get("department"),
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Student":
        return cls(**{attr: data.get(key) for key, attr in _ATTRS.items()})

    def to_dict(self) -> dict:
        return {key: getattr(self, attr) for key, attr in _ATTRS.items()}

    def value_of(self, field: str | None) -> Any:
        """Lookup by JSON field name; unknown names yield None."""
        attr = _ATTRS.get(field or "")
        if attr is None:
            return None
        return getattr(self, attr)


def missing_required_fields(payload: Mapping[str, Any]) -> list[str]:
    """Required fields whose value is absent or falsy (empty string, 0, null)."""
    return [field for field in REQUIRED_FIELDS if not payload.get(field)]


def matches(student: Student, search_by: str, query: str) -> bool:
    """Case-insensitive substring match of query against one field."""
    value = student.value_of(search_by)
    if not value:
        return False
    text = value if isinstance(value, str) else str(value)
    return query.lower() in text.lower()


def now_millis(clock: Optional[Any] = None) -> int:
    return int((clock or time.time)() * 1000)
