from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from student_info import __version__
from student_info.api_errors import register_error_handlers
from student_info.core.config import Settings, get_settings
from student_info.core.logging import setup_logging
from student_info.repositories.json_storage import StudentStore
from student_info.routers import health as health_router
from student_info.routers import students as students_router
from student_info.services.student_service import StudentService

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Factory compatible with uvicorn (`--factory`) and tests."""
    settings = settings or get_settings()
    store = StudentStore(settings.data_file)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging(settings.log_level)
        if store.ensure_exists():
            logger.info("Created empty %s database file.", store.path.name)
        logger.info("Server listening on http://localhost:%s", settings.port)
        yield

    app = FastAPI(title="Student Info API", version=__version__, lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)

    app.state.student_service = StudentService(store)

    app.include_router(health_router.router)
    app.include_router(students_router.router)
    return app


app = create_app()
