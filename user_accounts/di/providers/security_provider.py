from typing import TYPE_CHECKING
from ...domain.ports import Encrypter, Hasher, IdGenerator
from ...infrastructure.security import BcryptHasher, JwtEncrypter, ObjectIdGenerator

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class SecurityProvider:
    """Registers the hashing, token and ID generation capabilities"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_singleton(Hasher, BcryptHasher())
        container.register_singleton(Encrypter, JwtEncrypter())
        container.register_singleton(IdGenerator, ObjectIdGenerator())
