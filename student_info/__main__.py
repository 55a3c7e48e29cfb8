"""Run the API with uvicorn: `python -m student_info`."""

import uvicorn

from student_info.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run("student_info.app:app", host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
