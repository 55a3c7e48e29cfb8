"""Student Info backend: list, filter and create student records kept in a JSON file."""

__version__ = "1.0.0"
