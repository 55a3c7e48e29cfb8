from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["health"])

LIVENESS_TEXT = "Student Info Backend Running"


@router.get("/", response_class=PlainTextResponse)
def root():
    return LIVENESS_TEXT
