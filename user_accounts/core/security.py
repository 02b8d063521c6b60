# Standard library imports
import time
import uuid
from typing import Any, Dict

# External package imports
import jwt
import bcrypt
from jwt.exceptions import InvalidTokenError, DecodeError

# Local application imports
from .config import get_settings

# bcrypt only reads the first 72 bytes of a password
BCRYPT_MAX_PASSWORD_BYTES = 72


def _password_bytes(plain_password: str) -> bytes:
    return plain_password.encode("utf-8")[:BCRYPT_MAX_PASSWORD_BYTES]


def hash_password(plain_password: str) -> str:
    """
    Hash a plain password using bcrypt

    Args:
        plain_password: The plain text password to hash

    Returns:
        Hashed password string
    """
    salt = bcrypt.gensalt(rounds=get_settings().bcrypt_rounds)
    hashed = bcrypt.hashpw(_password_bytes(plain_password), salt)
    return hashed.decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a hashed password

    Args:
        plain_password: The plain text password to verify
        hashed_password: The hashed password to compare against

    Returns:
        True if passwords match, False otherwise
    """
    try:
        return bcrypt.checkpw(
            _password_bytes(plain_password),
            hashed_password.encode("utf-8")
        )
    except ValueError:
        # Malformed hash (e.g. not produced by bcrypt)
        return False


def create_jwt_token(payload: Dict[str, Any]) -> str:
    """
    Create a JWT token with expiration

    Every token gets its own ``jti`` claim, so two tokens issued for the
    same subject within the same second are still different strings.

    Args:
        payload: Dictionary containing token claims (e.g., sub)

    Returns:
        Encoded JWT token string
    """
    settings = get_settings()
    issued_at = int(time.time())

    token_payload = {
        **payload,
        "iat": issued_at,
        "jti": uuid.uuid4().hex,
    }
    if settings.access_token_expire_minutes > 0:
        token_payload["exp"] = issued_at + (settings.access_token_expire_minutes * 60)

    token = jwt.encode(
        token_payload,
        settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm
    )
    return token


def decode_jwt_token(token: str) -> Dict[str, Any]:
    """
    Decode and validate a JWT token

    Args:
        token: The JWT token string to decode

    Returns:
        Dictionary containing decoded token claims

    Raises:
        ValueError: If token is invalid, expired or cannot be decoded
    """
    settings = get_settings()
    try:
        decoded = jwt.decode(
            token,
            settings.jwt_secret_key,
            algorithms=[settings.jwt_algorithm]
        )
        return decoded
    except (InvalidTokenError, DecodeError) as e:
        raise ValueError(f"Invalid token: {str(e)}")
