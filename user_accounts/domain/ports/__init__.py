from .hasher import Hasher
from .encrypter import Encrypter
from .id_generator import IdGenerator

__all__ = ["Hasher", "Encrypter", "IdGenerator"]
