"""
Core utilities shared across the Student Info API.

This package hosts configuration helpers (env vars, storage paths) and the
logging setup. Routers/services depend on these primitives instead of reading
os.environ directly.
"""
