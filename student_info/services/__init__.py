"""
High-level use cases for the Student Info API.

Routers (FastAPI endpoints) call these services instead of manipulating the
JSON document directly.
"""
