from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from ...domain.models.user_record import UserRecord


class UserResponse(BaseModel):
    """DTO for user visible data (never includes the password hash)"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    name: str
    email: str
    access_token: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_record(cls, record: UserRecord) -> "UserResponse":
        return cls(
            id=record.id,
            name=record.name,
            email=record.email,
            access_token=record.access_token,
            created_at=record.created_at,
            updated_at=record.updated_at,
        )


class UserUpdateRequest(BaseModel):
    """DTO for partial profile update; omitted fields stay unchanged"""
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
