"""A thin SQLite connection wrapper shared by the repositories."""

from __future__ import annotations

import os
import sqlite3
from pathlib import Path


class Database:
    """An SQLite database in WAL mode with foreign keys enforced."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = os.fspath(path)
        try:
            self.connection = sqlite3.connect(
                self.path, isolation_level=None, check_same_thread=False
            )
        except sqlite3.Error as exc:
            raise RuntimeError(f"Failed to open database: {self.path}") from exc
        self.execute("PRAGMA journal_mode=WAL;")
        self.execute("PRAGMA foreign_keys=ON;")

    def execute(self, sql: str) -> None:
        """Run one or more SQL statements, discarding any rows."""
        try:
            self.connection.executescript(sql)
        except sqlite3.Error as exc:
            raise RuntimeError(f"SQL error: {exc}") from exc

    def execute_file(self, path: str | os.PathLike[str]) -> None:
        """Run the SQL statements stored in a file."""
        try:
            sql = Path(path).read_text(encoding="utf-8")
        except OSError as exc:
            raise RuntimeError(f"Cannot open SQL file: {os.fspath(path)}") from exc
        self.execute(sql)

    def close(self) -> None:
        """Close the connection."""
        self.connection.close()

    def __enter__(self) -> Database:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()