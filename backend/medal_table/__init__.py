"""Olympic medal table: validation, ranking and a read-only JSON API."""

__version__ = "0.1.0"
