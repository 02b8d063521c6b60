# Standard library imports
import asyncio

# Local application imports
from ...core.security import hash_password, verify_password
from ...domain.ports.hasher import Hasher


class BcryptHasher(Hasher):
    """bcrypt-backed Hasher; hashing runs in a worker thread to keep the event loop free"""

    async def hash(self, plaintext: str) -> str:
        return await asyncio.to_thread(hash_password, plaintext)

    async def compare(self, plaintext: str, hashed: str) -> bool:
        if not hashed:
            return False
        return await asyncio.to_thread(verify_password, plaintext, hashed)
