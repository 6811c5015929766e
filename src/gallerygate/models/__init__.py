from .sign_history import SignHistory
from .user import User

__all__ = ["SignHistory", "User"]
