from abc import ABC, abstractmethod


class Hasher(ABC):
    """One-way password hashing"""

    @abstractmethod
    async def hash(self, plaintext: str) -> str:
        pass

    @abstractmethod
    async def compare(self, plaintext: str, hashed: str) -> bool:
        pass
