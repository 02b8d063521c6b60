from pydantic import BaseModel


# Field contents are validated by the domain value objects, not here,
# so that invalid input comes back as a domain error.

class SignUpRequest(BaseModel):
    """DTO for password sign-up request"""
    name: str
    email: str
    password: str


class SignInRequest(BaseModel):
    """DTO for password sign-in request"""
    email: str
    password: str


class ExternalSignInRequest(BaseModel):
    """DTO for sign-in vouched for by an external identity provider"""
    name: str
    email: str
