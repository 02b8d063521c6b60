from .bcrypt_hasher import BcryptHasher
from .jwt_encrypter import JwtEncrypter
from .object_id_generator import ObjectIdGenerator

__all__ = ["BcryptHasher", "JwtEncrypter", "ObjectIdGenerator"]
