# hacklog/users/schemas.py
from datetime import datetime
from pydantic import BaseModel, Field

from hacklog.core.schemas import CamelModel

USERNAME_PATTERN = r"^[A-Za-z0-9_-]+$"


class UserUpsert(CamelModel):
    id: str = Field(..., min_length=1)
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    profile_image_url: str | None = None
    username: str | None = Field(
        default=None, min_length=3, max_length=30, pattern=USERNAME_PATTERN
    )
    bio: str | None = Field(default=None, max_length=500)


class PublicUserOut(CamelModel):
    """Lo que se expone en el portafolio público: sin email."""
    id: str
    first_name: str | None = None
    last_name: str | None = None
    profile_image_url: str | None = None
    username: str | None = None
    bio: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class UserOut(PublicUserOut):
    email: str | None = None


class LoginIn(CamelModel):
    id_token: str = Field(..., min_length=1)


class TokenOut(BaseModel):
    access_token: str
    token_type: str = "bearer"
