# hacklog/projects/schemas.py
import datetime as dt
import re
from typing import Annotated, Any

from pydantic import Field, field_validator, model_validator

from hacklog.core.schemas import CamelModel

# los pone el servidor; el cliente no puede mandarlos
SERVER_FIELDS = ("id", "userId", "user_id", "createdAt", "created_at", "updatedAt", "updated_at")

# columna Integer (int4 en postgres)
TeamSize = Annotated[int, Field(gt=0, le=2**31 - 1)]

ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _iso_date_only(v):
    # pydantic en modo lax acepta timestamps (0, "0"); solo queremos YYYY-MM-DD
    if isinstance(v, dt.date) and not isinstance(v, dt.datetime):
        return v
    if isinstance(v, str) and ISO_DATE.match(v):
        return v
    raise ValueError("date must be an ISO date (YYYY-MM-DD)")


class _ProjectIn(CamelModel):
    @model_validator(mode="before")
    @classmethod
    def _reject_server_fields(cls, data: Any):
        if isinstance(data, dict):
            blocked = [k for k in SERVER_FIELDS if k in data]
            if blocked:
                raise ValueError(f"server-controlled field(s) not allowed: {', '.join(blocked)}")
        return data


class ProjectCreate(_ProjectIn):
    hackathon_name: str = Field(..., min_length=1, max_length=255)
    project_title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    date: dt.date

    achievement: str | None = Field(default=None, max_length=255)
    team_size: TeamSize | None = None
    role: str | None = Field(default=None, max_length=255)
    demo_url: str | None = Field(default=None, max_length=1024)
    github_url: str | None = Field(default=None, max_length=1024)
    devpost_url: str | None = Field(default=None, max_length=1024)
    image_url: str | None = Field(default=None, max_length=1024)
    technologies: list[str] = Field(default_factory=list)

    @field_validator("date", mode="before")
    @classmethod
    def _date_format(cls, v):
        return _iso_date_only(v)

    @field_validator("technologies", mode="before")
    @classmethod
    def _null_technologies(cls, v):
        return [] if v is None else v


class ProjectUpdate(_ProjectIn):
    """
    Update parcial: todo es opcional, pero lo que venga debe cumplir
    las mismas reglas que en la creación.
    """
    hackathon_name: str | None = Field(default=None, min_length=1, max_length=255)
    project_title: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = Field(default=None, min_length=1)
    date: dt.date | None = None

    achievement: str | None = Field(default=None, max_length=255)
    team_size: TeamSize | None = None
    role: str | None = Field(default=None, max_length=255)
    demo_url: str | None = Field(default=None, max_length=1024)
    github_url: str | None = Field(default=None, max_length=1024)
    devpost_url: str | None = Field(default=None, max_length=1024)
    image_url: str | None = Field(default=None, max_length=1024)
    technologies: list[str] | None = None

    @field_validator("date", mode="before")
    @classmethod
    def _date_format(cls, v):
        return v if v is None else _iso_date_only(v)

    @field_validator("hackathon_name", "project_title", "description", "date")
    @classmethod
    def _required_not_null(cls, v):
        # solo corre si el campo vino en el payload
        if v is None:
            raise ValueError("required field cannot be null")
        return v

    @field_validator("technologies")
    @classmethod
    def _null_technologies(cls, v):
        return [] if v is None else v


class ProjectOut(CamelModel):
    id: int
    user_id: str
    hackathon_name: str
    project_title: str
    description: str
    date: dt.date
    achievement: str | None = None
    team_size: int | None = None
    role: str | None = None
    demo_url: str | None = None
    github_url: str | None = None
    devpost_url: str | None = None
    image_url: str | None = None
    technologies: list[str] = []
    created_at: dt.datetime | None = None
    updated_at: dt.datetime | None = None
