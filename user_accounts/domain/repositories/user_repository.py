from abc import ABC, abstractmethod
from typing import List, Optional
from ..models.user_record import NewUserRecord, UserChanges, UserRecord


class UserRepository(ABC):
    """Repository interface - defines contract for user data access"""

    @abstractmethod
    async def find_by_id(self, user_id: str) -> Optional[UserRecord]:
        """Find user by ID"""
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[UserRecord]:
        """Find user by email address"""
        pass

    @abstractmethod
    async def find_all(self) -> List[UserRecord]:
        """List every stored user"""
        pass

    @abstractmethod
    async def add(self, record: NewUserRecord) -> UserRecord:
        """Insert a new user and return it with timestamps set"""
        pass

    @abstractmethod
    async def update_by_id(self, user_id: str, changes: UserChanges) -> Optional[UserRecord]:
        """Apply a partial update to the user with this ID"""
        pass

    @abstractmethod
    async def update_by_email(self, email: str, changes: UserChanges) -> Optional[UserRecord]:
        """Apply a partial update to the user with this email"""
        pass
