"""
Error hierarchy for the user accounts core.

Expected business conditions (validation, conflict, not-found, bad
credentials) are returned inside ``Err`` by the use cases. Infrastructure
failures are raised and reach the API boundary untouched. Both kinds
derive from AccountError and carry a user-facing message.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from typing import Any, Dict, Optional


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class AccountError(Exception):
    """Base exception for all user account errors."""

    def __init__(
        self,
        message: str,
        user_message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.user_message = user_message or "An error occurred. Please try again."
        self.details = details or {}


# -----------------------------------------------------------------------------
# Validation
# -----------------------------------------------------------------------------


class ValidationError(AccountError):
    """Raw input rejected by a value object. Keeps the offending value."""

    field_name = "value"

    def __init__(self, value: Any):
        super().__init__(
            f"Invalid {self.field_name}: {value!r}",
            user_message=f"Invalid {self.field_name}.",
            details={"field": self.field_name, "value": value},
        )
        self.value = value

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and self.value == other.value

    def __hash__(self) -> int:
        return hash((type(self), self.value))


class InvalidNameError(ValidationError):
    field_name = "name"


class InvalidEmailError(ValidationError):
    field_name = "email"


class InvalidPasswordError(ValidationError):
    field_name = "password"


# -----------------------------------------------------------------------------
# Account state
# -----------------------------------------------------------------------------


class ExistingUserError(AccountError):
    """The email is already owned by an account."""

    def __init__(self):
        super().__init__("User already exists", user_message="User already exists.")

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash(type(self))


class NonExistingUserError(AccountError):
    """No account matches the requested id."""

    def __init__(self):
        super().__init__("User does not exist", user_message="User does not exist.")

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash(type(self))


# -----------------------------------------------------------------------------
# Authentication
# -----------------------------------------------------------------------------


class InvalidCredentialsError(AccountError):
    """Email/password pair does not match an account."""

    def __init__(self):
        super().__init__("Invalid email or password", user_message="Invalid email or password.")


class InvalidTokenError(AccountError):
    """Access token is malformed, expired, or no longer current."""

    def __init__(self, reason: str = "Invalid access token"):
        super().__init__(reason, user_message="Invalid or expired access token.")


# -----------------------------------------------------------------------------
# Infrastructure (raised, never returned)
# -----------------------------------------------------------------------------


class RepositoryError(AccountError):
    """Raised when the persistence layer fails."""

    def __init__(self, message: str, operation: Optional[str] = None, **kwargs):
        kwargs.setdefault("user_message", "Something went wrong. Please try again.")
        super().__init__(message, **kwargs)
        self.operation = operation


class DuplicateRecordError(RepositoryError):
    """Raised when a unique constraint (id or email) rejects a write."""

    def __init__(self, message: str, operation: Optional[str] = None):
        super().__init__(
            message,
            operation=operation,
            user_message="User already exists.",
        )


class IdGenerationError(AccountError):
    """Raised when no unused id could be produced within the attempt budget."""

    def __init__(self, attempts: int):
        super().__init__(
            f"Could not generate a unique user id after {attempts} attempts",
            user_message="Something went wrong. Please try again.",
            details={"attempts": attempts},
        )
        self.attempts = attempts


# -----------------------------------------------------------------------------
# Safe user-facing message
# -----------------------------------------------------------------------------

def get_user_message(exc: BaseException) -> str:
    """
    Return a safe, user-facing message for any exception.
    Use this at API boundaries so internal details are never exposed.
    """
    if isinstance(exc, AccountError) and getattr(exc, "user_message", None):
        return exc.user_message
    return "Something went wrong. Please try again."
