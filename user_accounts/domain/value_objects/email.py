# Standard library imports
import re
from dataclasses import dataclass

# Local application imports
from ..exceptions import InvalidEmailError
from ..result import Err, Ok, Result

EMAIL_MAX_LENGTH = 256
_EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


@dataclass(frozen=True)
class Email:
    """E-mail address with a local part, a domain and a dotted suffix"""
    value: str

    @classmethod
    def create(cls, raw: str) -> Result["Email", InvalidEmailError]:
        if not isinstance(raw, str) or not raw:
            return Err(InvalidEmailError(raw))
        if len(raw) > EMAIL_MAX_LENGTH or not _EMAIL_PATTERN.fullmatch(raw):
            return Err(InvalidEmailError(raw))
        return Ok(cls(raw))
