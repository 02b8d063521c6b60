# Standard library imports
from dataclasses import dataclass

# Local application imports
from ..exceptions import InvalidPasswordError
from ..result import Err, Ok, Result

PASSWORD_MIN_LENGTH = 6


@dataclass(frozen=True)
class Password:
    """Plain-text password that passed the strength rules (never persisted)"""
    value: str

    @classmethod
    def create(cls, raw: str) -> Result["Password", InvalidPasswordError]:
        if not isinstance(raw, str) or not raw:
            return Err(InvalidPasswordError(raw))
        if len(raw) < PASSWORD_MIN_LENGTH:
            return Err(InvalidPasswordError(raw))
        if not any(char.isdigit() for char in raw):
            return Err(InvalidPasswordError(raw))
        return Ok(cls(raw))

    def __repr__(self) -> str:
        return "Password(value='***')"
