from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

_MAX_FIELD_LENGTH = 1024


class _FormDTO(BaseModel):
    model_config = ConfigDict(extra="ignore")


class AuthenticateFormDTO(_FormDTO):
    username: str = Field("", max_length=_MAX_FIELD_LENGTH)
    password: str = Field("", max_length=_MAX_FIELD_LENGTH)


class RegisterFormDTO(_FormDTO):
    username: str = Field("", max_length=_MAX_FIELD_LENGTH)
    password: str = Field("", max_length=_MAX_FIELD_LENGTH)
    email: str = Field("", max_length=_MAX_FIELD_LENGTH)


class AuthenticatedUserDTO(BaseModel):
    username: str
    email: str
    token: str
    expiry: datetime


class UserDTO(BaseModel):
    id: int
    username: str
    email: str


class MessageDTO(BaseModel):
    message: str
