#!/usr/bin/env python3
"""
Add a student record directly to the JSON document.

Usage:
  python scripts/add_student.py --name "Alice" --roll-no 21CS01 --university-id U-1 \
      --year 2 --department CS [--blood-group O+] [--address "..."] [--file students.json]
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from student_info.core.config import get_settings  # noqa: E402
from student_info.repositories.json_storage import StudentStore  # noqa: E402
from student_info.services.student_service import MissingFieldsError, StudentService  # noqa: E402


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Add a student to the JSON database")
    ap.add_argument("--name", help="Full name")
    ap.add_argument("--roll-no", dest="rollNo", help="Roll number")
    ap.add_argument("--university-id", dest="universityId", help="University ID")
    ap.add_argument("--blood-group", dest="bloodGroup", help="Blood group (optional)")
    ap.add_argument("--address", help="Address (optional)")
    ap.add_argument("--year", help="Year of study")
    ap.add_argument("--department", help="Department")
    ap.add_argument("--file", help="Path to the JSON document (default: STUDENTS_FILE or ./students.json)")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    path = Path(args.file) if args.file else get_settings().data_file
    payload = {k: v for k, v in vars(args).items() if k != "file" and v is not None}

    svc = StudentService(StudentStore(path))
    try:
        student = svc.create_student(payload)
    except MissingFieldsError as exc:
        sys.stderr.write(f"Error: {exc.message}\n")
        return 1
    print("OK: student added")
    print(f"  ID: {student.id}")
    print(f"  Name: {student.name}")
    print(f"  File: {path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
