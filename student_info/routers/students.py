from __future__ import annotations

import json
from typing import Any, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from fastapi.responses import JSONResponse

from student_info.api_errors import INVALID_BODY_MESSAGE
from student_info.services.student_service import MissingFieldsError, StudentService

router = APIRouter(prefix="/students", tags=["students"])


def _get_student_service(request: Request) -> StudentService:
    svc = getattr(getattr(request.app, "state", None), "student_service", None)
    if not svc:
        raise RuntimeError("StudentService not configured")
    return svc


async def _json_payload(request: Request) -> dict[str, Any]:
    """Parsed JSON object body; anything that is not a JSON object reads as {}."""
    content_type = request.headers.get("content-type", "").lower()
    if "json" not in content_type:
        return {}
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        data = json.loads(raw)
    except ValueError:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, INVALID_BODY_MESSAGE)
    return data if isinstance(data, dict) else {}


@router.get("")
def list_students(
    request: Request,
    search_by: Optional[str] = Query(None, alias="searchBy"),
    query: Optional[str] = Query(None),
):
    svc = _get_student_service(request)
    students = svc.list_students(search_by, query)
    return {"students": [s.to_dict() for s in students]}


@router.post("", status_code=status.HTTP_201_CREATED)
def create_student(request: Request, payload: dict[str, Any] = Depends(_json_payload)):
    svc = _get_student_service(request)
    try:
        student = svc.create_student(payload)
    except MissingFieldsError as exc:
        return JSONResponse({"error": exc.message}, status_code=status.HTTP_400_BAD_REQUEST)
    return {"message": "Student added", "student": student.to_dict()}
