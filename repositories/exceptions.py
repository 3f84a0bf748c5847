"""
Data access exceptions.

Raised by repositories so callers never have to catch sqlite3 errors directly.
"""


class RepositoryError(Exception):
    """Base class for data access failures."""


class HistoryUnavailableError(RepositoryError):
    """The round history could not be read. Fatal to the request that needed it."""

    def __init__(self, db_path: str, cause: Exception):
        self.db_path = db_path
        self.cause = cause
        super().__init__(f"Round history unavailable ({db_path}): {cause}")
