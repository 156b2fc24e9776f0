from __future__ import annotations

from pydantic import BaseModel, Field


class RegisterRequestDTO(BaseModel):
    # values are stored as sent; blank ones are rejected by the use case
    username: str = Field(min_length=1, max_length=64)
    email: str = Field(min_length=1, max_length=255)
    password: str = Field(min_length=1, max_length=1024)


class LoginRequestDTO(BaseModel):
    # no upper bounds: an over-long username is just an unknown one
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)


class AuthResponseDTO(BaseModel):
    id: int
    username: str
    email: str
    token: str


class ProtectedDataDTO(BaseModel):
    data: str = "here is the protected data"
