"""Auth Schemas: login request body."""

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    """Identifier is an email or a tax id; both values are compared verbatim."""
    identifier: str = Field(min_length=1, max_length=320)
    password: str = Field(min_length=1)
