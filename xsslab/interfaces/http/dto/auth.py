from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class UserDTO(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    uuid: str
    username: str
    name: str


class AuthSuccessDTO(BaseModel):
    success: bool = True
    user: UserDTO
    message: str


class MessageDTO(BaseModel):
    success: bool = True
    message: str


class RegisterRequestDTO(BaseModel):
    # Strict: a JSON number is not a username.
    model_config = ConfigDict(strict=True, extra="ignore")

    username: str
    password: str
    name: str


class LoginRequestDTO(BaseModel):
    model_config = ConfigDict(strict=True, extra="ignore")

    username: str
    password: str
