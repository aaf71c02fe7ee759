# hacklog/profile/schemas.py
from pydantic import Field

from hacklog.core.schemas import CamelModel
from hacklog.users.schemas import PublicUserOut, USERNAME_PATTERN
from hacklog.projects.schemas import ProjectOut


class UsernameUpdate(CamelModel):
    username: str = Field(..., min_length=3, max_length=30, pattern=USERNAME_PATTERN)


class ProfileUpdate(CamelModel):
    bio: str | None = Field(default=None, max_length=500)


class PublicProfileOut(CamelModel):
    user: PublicUserOut
    projects: list[ProjectOut]
