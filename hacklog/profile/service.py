# hacklog/profile/service.py
from __future__ import annotations

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from hacklog.core.errors import ConflictError, NotFoundError
from hacklog.projects.repository import list_projects_by_user
from hacklog.users import repository as users_repo
from hacklog.users.models import User

log = logging.getLogger("uvicorn")


async def change_username(db: AsyncSession, user_id: str, username: str) -> User:
    # chequeo previo; el UNIQUE de users.username cubre la carrera entre requests
    existing = await users_repo.get_by_username(db, username)
    if existing and existing.id != user_id:
        log.info(f"⚠️ username '{username}' ya está tomado (pedido por {user_id})")
        raise ConflictError("username already taken")

    user = await users_repo.update_username(db, user_id, username)
    if not user:
        raise NotFoundError("user not found")
    return user


async def update_bio(db: AsyncSession, user_id: str, fields: dict) -> User:
    user = await users_repo.update_profile(db, user_id, fields)
    if not user:
        raise NotFoundError("user not found")
    return user


async def public_profile(db: AsyncSession, username: str) -> dict:
    """
    Portafolio público: el usuario (el schema de salida no lleva email)
    y todos sus proyectos, del más nuevo al más viejo.
    """
    user = await users_repo.get_by_username(db, username)
    if not user:
        raise NotFoundError("user not found")
    projects = await list_projects_by_user(db, user.id)
    return {"user": user, "projects": projects}
