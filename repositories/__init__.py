"""
Repository layer for data access abstraction.
"""

from repositories.base_repository import BaseRepository
from repositories.exceptions import HistoryUnavailableError, RepositoryError
from repositories.history_repository import HistoryRepository
from repositories.interfaces import IHistoryRepository

__all__ = [
    "BaseRepository",
    "HistoryRepository",
    "IHistoryRepository",
    "HistoryUnavailableError",
    "RepositoryError",
]
