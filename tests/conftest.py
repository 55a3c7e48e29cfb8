from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Make the student_info package importable when running tests from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from student_info.core import config as core_config  # noqa: E402


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Keep env-driven settings isolated between tests."""
    for name in ("PORT", "HOST", "STUDENTS_FILE", "CORS_ORIGINS", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    core_config.get_settings.cache_clear()
    yield
    core_config.get_settings.cache_clear()


@pytest.fixture()
def data_file(tmp_path):
    return tmp_path / "students.json"


@pytest.fixture()
def alice():
    return {
        "name": "Alice",
        "rollNo": "21CS001",
        "universityId": "UNI-001",
        "bloodGroup": "O+",
        "address": "12 Main St",
        "year": "2",
        "department": "CS",
    }
