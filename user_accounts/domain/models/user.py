# Standard library imports
from dataclasses import dataclass
from typing import Optional

# Local application imports
from ..exceptions import ValidationError
from ..result import Err, Ok, Result
from ..value_objects import Email, Name, Password


@dataclass(frozen=True)
class User:
    """
    Pure domain model for a user account being created or changed.

    Transient: built per request from raw input and never persisted as is.
    The only construction path is ``User.create``, which validates every
    field or none.
    """
    name: Name
    email: Email
    password: Optional[Password] = None

    @classmethod
    def create(
        cls,
        name: str,
        email: str,
        password: Optional[str] = None,
    ) -> Result["User", ValidationError]:
        """
        Validate raw fields in the order name, email, password

        Args:
            name: Raw display name
            email: Raw e-mail address
            password: Raw password, omitted for externally authenticated users

        Returns:
            Ok(User) when every field is valid, otherwise Err with the first
            invalid field's error
        """
        name_or_error = Name.create(name)
        if name_or_error.is_error():
            return Err(name_or_error.value)

        email_or_error = Email.create(email)
        if email_or_error.is_error():
            return Err(email_or_error.value)

        password_value: Optional[Password] = None
        if password is not None:
            password_or_error = Password.create(password)
            if password_or_error.is_error():
                return Err(password_or_error.value)
            password_value = password_or_error.value

        return Ok(cls(name=name_or_error.value, email=email_or_error.value, password=password_value))
