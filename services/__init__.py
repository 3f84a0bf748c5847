"""
Application services layer.

Services orchestrate business operations using repositories and domain services.
"""

from services.interfaces import IShuffleService

# Result type for consistent error handling
from services.result import Result
from services.shuffle_service import ShuffleService

__all__ = ["IShuffleService", "Result", "ShuffleService"]
