from .user import User
from .user_record import UserRecord, NewUserRecord, UserChanges

__all__ = ["User", "UserRecord", "NewUserRecord", "UserChanges"]
