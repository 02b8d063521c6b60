"""
Shared pytest fixtures for user accounts tests.
"""
import os
from dataclasses import replace
from typing import Dict, List, Optional
from unittest.mock import MagicMock, patch

import pytest

from user_accounts.domain.models.user_record import NewUserRecord, UserChanges, UserRecord
from user_accounts.domain.ports import Encrypter, Hasher, IdGenerator
from user_accounts.domain.repositories.user_repository import UserRepository
from user_accounts.utils.datetime_utils import utc_now


class InMemoryUserRepository(UserRepository):
    """Dict-backed UserRepository keeping the same contract as the Mongo one."""

    def __init__(self) -> None:
        self.records: Dict[str, UserRecord] = {}
        self.add_calls: List[NewUserRecord] = []

    def seed(self, record: UserRecord) -> UserRecord:
        """Store a record directly, bypassing add()."""
        self.records[record.id] = record
        return record

    async def find_by_id(self, user_id: str) -> Optional[UserRecord]:
        return self.records.get(user_id)

    async def find_by_email(self, email: str) -> Optional[UserRecord]:
        return next((r for r in self.records.values() if r.email == email), None)

    async def find_all(self) -> List[UserRecord]:
        return list(self.records.values())

    async def add(self, record: NewUserRecord) -> UserRecord:
        self.add_calls.append(record)
        now = utc_now()
        stored = UserRecord(
            id=record.id,
            name=record.name,
            email=record.email,
            access_token=record.access_token,
            password_hash=record.password_hash,
            created_at=now,
            updated_at=now,
        )
        self.records[record.id] = stored
        return stored

    async def update_by_id(self, user_id: str, changes: UserChanges) -> Optional[UserRecord]:
        current = self.records.get(user_id)
        if current is None:
            return None
        values = {k: v for k, v in vars(changes).items() if v is not None}
        updated = replace(current, updated_at=utc_now(), **values)
        self.records[user_id] = updated
        return updated

    async def update_by_email(self, email: str, changes: UserChanges) -> Optional[UserRecord]:
        current = await self.find_by_email(email)
        if current is None:
            return None
        return await self.update_by_id(current.id, changes)


class FakeHasher(Hasher):
    async def hash(self, plaintext: str) -> str:
        return f"hashed:{plaintext}"

    async def compare(self, plaintext: str, hashed: str) -> bool:
        return hashed == f"hashed:{plaintext}"


class FakeEncrypter(Encrypter):
    """Issues ``token:<subject>:<n>`` with an increasing counter."""

    def __init__(self) -> None:
        self.issued = 0

    async def encrypt(self, subject: str) -> str:
        self.issued += 1
        return f"token:{subject}:{self.issued}"

    async def decrypt(self, token: str) -> Optional[str]:
        parts = (token or "").split(":")
        if len(parts) != 3 or parts[0] != "token":
            return None
        return parts[1]


class SequenceIdGenerator(IdGenerator):
    """Returns the given IDs in order, then ``id-<n>``."""

    def __init__(self, ids: Optional[List[str]] = None) -> None:
        self.ids = list(ids or [])
        self.calls = 0

    async def generate(self) -> str:
        self.calls += 1
        if self.ids:
            return self.ids.pop(0)
        return f"id-{self.calls}"


def make_record(
    user_id: str = "usr-1",
    name: str = "Test User",
    email: str = "test@example.com",
    access_token: str = "token:usr-1:0",
    password_hash: Optional[str] = "hashed:secret123",
) -> UserRecord:
    now = utc_now()
    return UserRecord(
        id=user_id,
        name=name,
        email=email,
        access_token=access_token,
        password_hash=password_hash,
        created_at=now,
        updated_at=now,
    )


@pytest.fixture
def user_repo():
    return InMemoryUserRepository()


@pytest.fixture
def hasher():
    return FakeHasher()


@pytest.fixture
def encrypter():
    return FakeEncrypter()


@pytest.fixture
def id_generator():
    return SequenceIdGenerator()


@pytest.fixture
def record_factory():
    """Build UserRecord instances with overridable fields."""
    return make_record


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_user_accounts",
        "JWT_SECRET_KEY": "test_secret_key_for_testing_only_0123456789",
        "BCRYPT_ROUNDS": "4",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def mock_settings():
    """Fixture to mock get_settings for tests. Patches all modules that use it."""
    mock = MagicMock()
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_db"
    mock.jwt_secret_key = "test_jwt_secret_key_for_unit_tests_only"
    mock.jwt_algorithm = "HS256"
    mock.access_token_expire_minutes = 60
    mock.bcrypt_rounds = 4
    mock.id_generation_max_attempts = 3
    mock.log_level = "INFO"
    mock.cors_origins = ["http://localhost:3000"]

    # Patch at source and at use sites (modules import get_settings at load time)
    with patch("user_accounts.core.config.get_settings", return_value=mock), patch(
        "user_accounts.core.security.get_settings", return_value=mock
    ):
        yield mock


@pytest.fixture
def id_sequence():
    """Build an IdGenerator returning the given IDs in order."""
    return SequenceIdGenerator
