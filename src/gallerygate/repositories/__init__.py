# Repositories package

from .base_repository import BaseRepository
from .sign_history_repository import SignHistoryRepository
from .user_repository import UserRepository

__all__ = [
    "BaseRepository",
    "SignHistoryRepository",
    "UserRepository",
]
