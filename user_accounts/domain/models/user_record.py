# Standard library imports
from dataclasses import dataclass, fields
from datetime import datetime
from typing import Any, Dict, Optional

# Local application imports
from ..constants import UserFields


@dataclass
class UserRecord:
    """Persisted user account as returned by the repository"""
    id: str
    name: str
    email: str
    access_token: str
    created_at: datetime
    updated_at: datetime
    password_hash: Optional[str] = None


@dataclass
class NewUserRecord:
    """Payload for inserting a new account; timestamps are set by the repository"""
    id: str
    name: str
    email: str
    access_token: str
    password_hash: Optional[str] = None


@dataclass
class UserChanges:
    """Partial update: only fields that are not None get written"""
    name: Optional[str] = None
    email: Optional[str] = None
    password_hash: Optional[str] = None
    access_token: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """
        Changed fields keyed by their persisted field name

        Returns:
            Dictionary with only the supplied fields
        """
        field_names = {
            "name": UserFields.NAME,
            "email": UserFields.EMAIL,
            "password_hash": UserFields.PASSWORD_HASH,
            "access_token": UserFields.ACCESS_TOKEN,
        }
        return {
            field_names[field.name]: getattr(self, field.name)
            for field in fields(self)
            if getattr(self, field.name) is not None
        }

    def is_empty(self) -> bool:
        return not self.to_dict()
