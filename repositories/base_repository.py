"""
Base repository with shared SQLite connection handling.
"""

import sqlite3
import threading
from abc import ABC
from contextlib import contextmanager

from infrastructure.schema_manager import SchemaManager


class BaseRepository(ABC):
    """
    Common base for SQLite-backed repositories.

    Each unit of work opens its own short-lived connection, so repositories
    can be shared between the HTTP worker threads and the Discord bot.
    """

    _ready_paths: set[str] = set()
    _ready_lock = threading.Lock()

    def __init__(self, db_path: str):
        """
        Args:
            db_path: Path to the SQLite history database; the schema is created on first use
        """
        self.db_path = db_path
        with BaseRepository._ready_lock:
            if db_path not in BaseRepository._ready_paths:
                SchemaManager(db_path).initialize()
                BaseRepository._ready_paths.add(db_path)

    def get_connection(self) -> sqlite3.Connection:
        """Open a connection returning rows addressable by column name."""
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA busy_timeout=5000")
        return conn

    @contextmanager
    def connection(self):
        """Yield a connection; commit if the block succeeds, roll back otherwise, always close."""
        conn = self.get_connection()
        try:
            yield conn
        except Exception:
            conn.rollback()
            raise
        else:
            conn.commit()
        finally:
            conn.close()

    @contextmanager
    def cursor(self):
        """Shortcut for a cursor inside connection()."""
        with self.connection() as conn:
            yield conn.cursor()
