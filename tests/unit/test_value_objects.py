"""
Unit tests for the Name, Email and Password value objects.
"""
import pytest

from user_accounts.domain.exceptions import InvalidEmailError, InvalidNameError, InvalidPasswordError
from user_accounts.domain.result import Err, Ok
from user_accounts.domain.value_objects import Email, Name, Password


class TestName:
    """Tests for Name.create"""

    def test_valid_name(self):
        result = Name.create("any_name")
        assert result == Ok(Name("any_name"))

    def test_name_is_trimmed(self):
        result = Name.create("  Jo  ")
        assert result.is_success()
        assert result.value.value == "Jo"

    @pytest.mark.parametrize("raw", ["", "   ", "\t\n"])
    def test_blank_name_rejected_with_raw_value(self, raw):
        result = Name.create(raw)
        assert result.is_error()
        assert result.value == InvalidNameError(raw)
        assert result.value.value == raw


class TestEmail:
    """Tests for Email.create"""

    def test_valid_email(self):
        result = Email.create("any_email@test.com")
        assert result == Ok(Email("any_email@test.com"))

    @pytest.mark.parametrize(
        "raw",
        ["", "plainaddress", "missing@tld", "@test.com", "two@@test.com", "spa ce@test.com", "a@b.com\n"],
    )
    def test_invalid_email_rejected(self, raw):
        result = Email.create(raw)
        assert result == Err(InvalidEmailError(raw))

    def test_too_long_email_rejected(self):
        raw = "a" * 250 + "@test.com"
        assert Email.create(raw).is_error()


class TestPassword:
    """Tests for Password.create"""

    def test_valid_password(self):
        result = Password.create("any_password_1")
        assert result.is_success()
        assert result.value.value == "any_password_1"

    def test_empty_password_rejected(self):
        assert Password.create("") == Err(InvalidPasswordError(""))

    def test_password_without_digit_rejected(self):
        assert Password.create("any_password") == Err(InvalidPasswordError("any_password"))

    def test_short_password_rejected(self):
        assert Password.create("pas1") == Err(InvalidPasswordError("pas1"))

    def test_minimum_length_accepted(self):
        assert Password.create("abc123").is_success()

    def test_repr_hides_value(self):
        password = Password.create("secret123").value
        assert "secret123" not in repr(password)

    def test_validation_is_deterministic(self):
        assert Password.create("pas1") == Password.create("pas1")
        assert Password.create("abc123") == Password.create("abc123")
