"""
FastAPI routers grouped by domain (health, students).

Each module exposes an APIRouter that create_app (student_info.app) includes in the application.
"""
