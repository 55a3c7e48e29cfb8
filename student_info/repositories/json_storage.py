"""
JSON-document persistence for student records.

The whole collection lives in one pretty-printed JSON array. Every read loads
the full document and every write replaces it. Reads fail open: a missing,
empty or corrupt document is seen as an empty collection and the failure only
shows up in the log, since callers have no other error channel.

Stored entries are mapped onto the eight known student fields: keys outside
that set are dropped on load, and missing ones come back as null.
"""

from __future__ import annotations

import json
import logging
import os
import stat
import tempfile
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional

from student_info.domain.students import Student

logger = logging.getLogger(__name__)


def _current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask


@dataclass
class LoadResult:
    """Outcome of reading the document before the fail-open downgrade."""

    students: list[Student] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class StudentStore:
    """Load/save helpers around the JSON document at `path`."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        # Held by writers around load+append+save; reads never take it.
        self.lock = threading.Lock()

    def read(self) -> LoadResult:
        if not self.path.exists():
            return LoadResult()
        try:
            raw = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            return LoadResult(error=f"could not read {self.path}: {exc}")
        if not raw.strip():
            return LoadResult()
        try:
            data = json.loads(raw)
        except ValueError as exc:
            return LoadResult(error=f"invalid JSON in {self.path}: {exc}")
        if not isinstance(data, list):
            return LoadResult(error=f"expected a JSON array in {self.path}, got {type(data).__name__}")
        students = []
        for index, item in enumerate(data):
            if not isinstance(item, dict):
                return LoadResult(error=f"entry {index} in {self.path} is not an object")
            students.append(Student.from_dict(item))
        return LoadResult(students=students)

    def load(self) -> list[Student]:
        result = self.read()
        if not result.ok:
            logger.error("Error reading from database: %s", result.error)
            return []
        return result.students

    def save(self, students: Iterable[Student]) -> None:
        tmp_name = None
        try:
            payload = json.dumps([s.to_dict() for s in students], ensure_ascii=False, indent=2)
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent)
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
            # mkstemp creates 0600; keep the mode a plain write would give.
            os.chmod(tmp_name, self._target_mode())
            os.replace(tmp_name, self.path)
            tmp_name = None
        except (OSError, TypeError, ValueError):
            logger.exception("Error writing to database %s", self.path)
        finally:
            if tmp_name is not None:
                try:
                    os.unlink(tmp_name)
                except OSError:
                    pass

    def _target_mode(self) -> int:
        try:
            return stat.S_IMODE(self.path.stat().st_mode)
        except OSError:
            return 0o666 & ~_current_umask()

    def ensure_exists(self) -> bool:
        """Create the document with an empty collection when absent."""
        if self.path.exists():
            return False
        self.save([])
        return self.path.exists()
