# hacklog/projects/repository.py
from __future__ import annotations

from typing import Any, List

from sqlalchemy import select, desc, delete
from sqlalchemy.ext.asyncio import AsyncSession

from hacklog.db.base import touch
from hacklog.projects.models import Project


# columnas Integer: en postgres es int4
MAX_INT = 2**31 - 1


def _valid_id(project_id: int) -> bool:
    # un id fuera de rango no existe; ni se consulta (sqlite/asyncpg revientan)
    return 1 <= project_id <= MAX_INT


def _newest_first(q):
    # mismo día → el último creado primero
    return q.order_by(desc(Project.date), desc(Project.id))


async def get_project(db: AsyncSession, project_id: int) -> Project | None:
    if not _valid_id(project_id):
        return None
    res = await db.execute(select(Project).where(Project.id == project_id))
    return res.scalar_one_or_none()


async def list_projects_by_user(db: AsyncSession, user_id: str) -> List[Project]:
    res = await db.execute(_newest_first(select(Project).where(Project.user_id == user_id)))
    return list(res.scalars())


async def create_project(db: AsyncSession, user_id: str, data: dict[str, Any]) -> Project:
    project = Project(**data, user_id=user_id)
    db.add(project)
    await db.flush()
    await db.refresh(project)
    return project


async def update_project(db: AsyncSession, project_id: int, data: dict[str, Any]) -> Project | None:
    """
    `data` trae solo los campos presentes en el payload; el resto queda igual.
    """
    project = await get_project(db, project_id)
    if not project:
        return None
    for field, value in data.items():
        setattr(project, field, value)
    touch(project)
    await db.flush()
    await db.refresh(project)
    return project


async def delete_project(db: AsyncSession, project_id: int) -> bool:
    if not _valid_id(project_id):
        return False
    res = await db.execute(delete(Project).where(Project.id == project_id))
    return (res.rowcount or 0) > 0


async def search_projects(db: AsyncSession, user_id: str, query: str) -> List[Project]:
    """
    Proyectos del usuario cuyo título contiene `query` de forma literal
    (% y _ no son comodines). Query vacío → todos.
    """
    q = select(Project).where(Project.user_id == user_id)
    if query:
        q = q.where(Project.project_title.contains(query, autoescape=True))
    res = await db.execute(_newest_first(q))
    return list(res.scalars())
