"""
Unit tests for SignUpUseCase and the unique id helper.
"""
from unittest.mock import AsyncMock

import pytest

from user_accounts.application.dto.auth_dto import SignUpRequest
from user_accounts.application.dto.user_dto import UserResponse
from user_accounts.application.use_cases.user.sign_up import SignUpUseCase
from user_accounts.application.use_cases.user.util import generate_unique_id
from user_accounts.domain.exceptions import (
    ExistingUserError,
    IdGenerationError,
    InvalidEmailError,
    InvalidNameError,
    InvalidPasswordError,
    RepositoryError,
)
from user_accounts.domain.result import Err


def _request(**overrides) -> SignUpRequest:
    data = {"name": "Jo", "email": "jo@x.com", "password": "abc123"}
    data.update(overrides)
    return SignUpRequest(**data)


@pytest.fixture
def use_case(user_repo, hasher, encrypter, id_generator):
    return SignUpUseCase(user_repo, hasher, encrypter, id_generator, max_id_attempts=3)


class TestSignUpUseCase:
    """Tests for SignUpUseCase"""

    @pytest.mark.asyncio
    async def test_sign_up_success_returns_visible_data(self, use_case, user_repo):
        result = await use_case.execute(_request())

        assert result.is_success()
        user = result.value
        assert isinstance(user, UserResponse)
        assert user.name == "Jo"
        assert user.email == "jo@x.com"
        assert user.access_token == f"token:{user.id}:1"
        assert user.created_at is not None
        assert user.updated_at is not None
        assert "password_hash" not in user.model_dump()

        stored = user_repo.records[user.id]
        assert stored.password_hash == "hashed:abc123"

    @pytest.mark.asyncio
    async def test_sign_up_serializes_camel_case(self, use_case):
        result = await use_case.execute(_request())
        body = result.value.model_dump(by_alias=True)
        assert set(body) == {"id", "name", "email", "accessToken", "createdAt", "updatedAt"}

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "overrides, expected",
        [
            ({"name": ""}, InvalidNameError("")),
            ({"email": ""}, InvalidEmailError("")),
            ({"email": "test@example.com\n"}, InvalidEmailError("test@example.com\n")),
            ({"password": ""}, InvalidPasswordError("")),
        ],
    )
    async def test_invalid_input_returns_validation_error(self, use_case, user_repo, overrides, expected):
        result = await use_case.execute(_request(**overrides))
        assert result == Err(expected)
        assert user_repo.records == {}

    @pytest.mark.asyncio
    async def test_existing_email_skips_hasher_and_id_generator(self, user_repo, record_factory):
        user_repo.seed(record_factory(email="jo@x.com"))
        hasher = AsyncMock()
        encrypter = AsyncMock()
        id_generator = AsyncMock()

        use_case = SignUpUseCase(user_repo, hasher, encrypter, id_generator)
        result = await use_case.execute(_request())

        assert result == Err(ExistingUserError())
        hasher.hash.assert_not_called()
        id_generator.generate.assert_not_called()
        encrypter.encrypt.assert_not_called()

    @pytest.mark.asyncio
    async def test_calls_ports_with_correct_values(self, record_factory):
        repo = AsyncMock()
        repo.find_by_email.return_value = None
        repo.find_by_id.return_value = None
        hasher = AsyncMock()
        hasher.hash.return_value = "hashed_password"
        encrypter = AsyncMock()
        encrypter.encrypt.return_value = "any_token"
        id_generator = AsyncMock()
        id_generator.generate.return_value = "any_id"

        repo.add.return_value = record_factory(user_id="any_id", name="Jo", email="jo@x.com", access_token="any_token")

        use_case = SignUpUseCase(repo, hasher, encrypter, id_generator)
        await use_case.execute(_request())

        repo.find_by_email.assert_awaited_once_with("jo@x.com")
        hasher.hash.assert_awaited_once_with("abc123")
        encrypter.encrypt.assert_awaited_once_with("any_id")
        added = repo.add.await_args.args[0]
        assert added.id == "any_id"
        assert added.password_hash == "hashed_password"
        assert added.access_token == "any_token"

    @pytest.mark.asyncio
    async def test_repository_failure_propagates(self, hasher, encrypter, id_generator):
        repo = AsyncMock()
        repo.find_by_email.side_effect = RepositoryError("db down")
        use_case = SignUpUseCase(repo, hasher, encrypter, id_generator)
        with pytest.raises(RepositoryError):
            await use_case.execute(_request())

    @pytest.mark.asyncio
    async def test_skips_colliding_ids(self, user_repo, hasher, encrypter, record_factory, id_sequence):
        user_repo.seed(record_factory(user_id="taken", email="other@x.com"))
        id_generator = id_sequence(["taken", "fresh"])
        use_case = SignUpUseCase(user_repo, hasher, encrypter, id_generator)

        result = await use_case.execute(_request())

        assert result.value.id == "fresh"


class TestGenerateUniqueId:
    """Tests for generate_unique_id"""

    @pytest.mark.asyncio
    async def test_returns_first_unused_id(self, user_repo, id_sequence):
        generator = id_sequence(["a"])
        assert await generate_unique_id(user_repo, generator, 3) == "a"

    @pytest.mark.asyncio
    async def test_gives_up_after_max_attempts(self, user_repo, record_factory, id_sequence):
        user_repo.seed(record_factory(user_id="dup"))
        generator = id_sequence(["dup", "dup", "dup", "free"])

        with pytest.raises(IdGenerationError) as exc_info:
            await generate_unique_id(user_repo, generator, 3)

        assert exc_info.value.attempts == 3
        assert generator.calls == 3
