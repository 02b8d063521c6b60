from abc import ABC, abstractmethod
from typing import Optional


class Encrypter(ABC):
    """Issues access tokens bound to a user ID and reads them back"""

    @abstractmethod
    async def encrypt(self, subject: str) -> str:
        """Issue a new token for ``subject``; every call yields a distinct token"""
        pass

    @abstractmethod
    async def decrypt(self, token: str) -> Optional[str]:
        """Return the subject of a valid token, None otherwise"""
        pass
