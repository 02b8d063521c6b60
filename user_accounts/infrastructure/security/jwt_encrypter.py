# Standard library imports
import logging
from typing import Optional

# Local application imports
from ...core.security import create_jwt_token, decode_jwt_token
from ...domain.ports.encrypter import Encrypter

logger = logging.getLogger(__name__)


class JwtEncrypter(Encrypter):
    """Encrypter issuing signed JWTs with the user ID in the ``sub`` claim"""

    async def encrypt(self, subject: str) -> str:
        return create_jwt_token({"sub": subject})

    async def decrypt(self, token: str) -> Optional[str]:
        if not token:
            return None
        try:
            payload = decode_jwt_token(token)
        except ValueError as e:
            logger.info(f"Rejected access token: {e}")
            return None
        subject = payload.get("sub")
        return str(subject) if subject else None
