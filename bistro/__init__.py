"""Restaurant kitchen, floor and finance service over a shared SQLite database."""

__version__ = "0.1.0"