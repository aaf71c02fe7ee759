# hacklog/projects/service.py
from __future__ import annotations

import logging
from typing import Any

import pydantic
from sqlalchemy.ext.asyncio import AsyncSession

from hacklog.core.errors import ForbiddenError, NotFoundError, ValidationError, format_validation_errors
from hacklog.projects import repository as repo
from hacklog.projects.models import Project
from hacklog.projects.schemas import ProjectCreate, ProjectUpdate

log = logging.getLogger("uvicorn")


async def get_owned_project(db: AsyncSession, project_id: int, user_id: str) -> Project:
    """
    Carga el proyecto y verifica que sea del usuario.
    404 si no existe, 403 si es de otro.
    """
    project = await repo.get_project(db, project_id)
    if not project:
        raise NotFoundError("project not found")
    if project.user_id != user_id:
        raise ForbiddenError("not authorized to access this project")
    return project


def parse_update(raw: bytes) -> dict[str, Any]:
    """
    Valida el body crudo del PUT (JSON vacío o roto incluido). Se hace a
    mano, no en la firma del endpoint, para que la verificación de dueño
    vaya antes que la de formato.
    """
    try:
        data = ProjectUpdate.model_validate_json(raw)
    except pydantic.ValidationError as e:
        raise ValidationError(format_validation_errors(e.errors()))
    return data.model_dump(exclude_unset=True)


async def create_project(db: AsyncSession, user_id: str, payload: ProjectCreate) -> Project:
    project = await repo.create_project(db, user_id, payload.model_dump())
    log.info(f"📝 proyecto {project.id} creado por {user_id}")
    return project


async def update_project(db: AsyncSession, project_id: int, user_id: str, raw: bytes) -> Project:
    await get_owned_project(db, project_id, user_id)
    fields = parse_update(raw)
    project = await repo.update_project(db, project_id, fields)
    if not project:
        # borrado entre la carga y el update
        raise NotFoundError("project not found")
    return project


async def delete_project(db: AsyncSession, project_id: int, user_id: str) -> None:
    await get_owned_project(db, project_id, user_id)
    await repo.delete_project(db, project_id)
    log.info(f"🗑️ proyecto {project_id} borrado por {user_id}")
