# hacklog/users/repository.py
from __future__ import annotations

from typing import Any

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from hacklog.core.errors import ConflictError
from hacklog.db.base import touch
from hacklog.users.models import User


async def get_by_id(db: AsyncSession, user_id: str) -> User | None:
    res = await db.execute(select(User).where(User.id == user_id))
    return res.scalar_one_or_none()


async def get_by_username(db: AsyncSession, username: str) -> User | None:
    res = await db.execute(select(User).where(User.username == username))
    return res.scalar_one_or_none()


async def get_by_email(db: AsyncSession, email: str) -> User | None:
    res = await db.execute(select(User).where(User.email == email))
    return res.scalar_one_or_none()


async def _flush_unique(db: AsyncSession, what: str) -> None:
    # el UNIQUE de la tabla es la última palabra si dos requests compiten
    try:
        await db.flush()
    except IntegrityError:
        await db.rollback()
        raise ConflictError(f"{what} already taken")


async def upsert_user(db: AsyncSession, data: dict[str, Any]) -> User:
    """
    Inserta o mezcla un usuario por id. Solo se pisan los campos que vienen
    en `data`. No hace commit (lo hace el caller).
    """
    user_id = data["id"]

    email = data.get("email")
    if email:
        other = await get_by_email(db, email)
        if other and other.id != user_id:
            raise ConflictError("email already taken")
    username = data.get("username")
    if username:
        other = await get_by_username(db, username)
        if other and other.id != user_id:
            raise ConflictError("username already taken")

    user = await get_by_id(db, user_id)
    if user is None:
        user = User(**data)
        db.add(user)
    else:
        for field, value in data.items():
            if field != "id":
                setattr(user, field, value)
        touch(user)

    await _flush_unique(db, "email or username")
    await db.refresh(user)
    return user


async def update_username(db: AsyncSession, user_id: str, username: str) -> User | None:
    user = await get_by_id(db, user_id)
    if not user:
        return None
    user.username = username
    touch(user)
    await _flush_unique(db, "username")
    await db.refresh(user)
    return user


async def update_profile(db: AsyncSession, user_id: str, fields: dict[str, Any]) -> User | None:
    """Por ahora solo `bio`; si no viene, no se toca."""
    user = await get_by_id(db, user_id)
    if not user:
        return None
    if "bio" in fields:
        user.bio = fields["bio"]
    touch(user)
    await db.flush()
    await db.refresh(user)
    return user
