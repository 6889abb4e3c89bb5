from uuid import UUID

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    username: str = Field(min_length=1, max_length=100)
    password: str = Field(min_length=1, max_length=200)


class AdminRead(BaseModel):
    id: UUID
    username: str

    model_config = {"from_attributes": True}


class AuthStatus(BaseModel):
    authenticated: bool
    username: str | None = None
