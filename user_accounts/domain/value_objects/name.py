# Standard library imports
from dataclasses import dataclass

# Local application imports
from ..exceptions import InvalidNameError
from ..result import Err, Ok, Result


@dataclass(frozen=True)
class Name:
    """Non-empty user display name, stored trimmed"""
    value: str

    @classmethod
    def create(cls, raw: str) -> Result["Name", InvalidNameError]:
        if not isinstance(raw, str) or not raw.strip():
            return Err(InvalidNameError(raw))
        return Ok(cls(raw.strip()))
