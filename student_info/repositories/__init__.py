"""
Persistence adapters.

These modules encapsulate how student records are stored/retrieved (today a
single JSON document). Services depend on the store instead of touching the
file directly.
"""
