"""
Two-branch outcome returned by value objects, the User entity and use cases.

``Result[T, E]`` is either ``Ok[T]`` or ``Err[E]``. Callers pattern-match::

    match result:
        case Ok(user):
            ...
        case Err(error):
            ...
"""

# Standard library imports
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome carrying the payload"""
    value: T

    def is_success(self) -> bool:
        return True

    def is_error(self) -> bool:
        return False


@dataclass(frozen=True)
class Err(Generic[E]):
    """Failed outcome carrying the domain error"""
    value: E

    def is_success(self) -> bool:
        return False

    def is_error(self) -> bool:
        return True


Result = Union[Ok[T], Err[E]]
