from .name import Name
from .email import Email, EMAIL_MAX_LENGTH
from .password import Password, PASSWORD_MIN_LENGTH

__all__ = ["Name", "Email", "Password", "EMAIL_MAX_LENGTH", "PASSWORD_MIN_LENGTH"]
