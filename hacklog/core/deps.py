# hacklog/core/deps.py
from fastapi import Depends, Header, Query
from jose import JWTError
from sqlalchemy.ext.asyncio import AsyncSession

from hacklog.core.errors import UnauthenticatedError
from hacklog.core.security import decode_access_token
from hacklog.db.session import get_session
from hacklog.users.models import User
from hacklog.users.repository import get_by_id


def _extract_token(token: str | None, authorization: str | None) -> str:
    # token por query (?token=) o Authorization: Bearer XXX
    if not token and authorization and authorization.lower().startswith("bearer "):
        token = authorization.split(" ", 1)[1]
    if not token:
        raise UnauthenticatedError("missing token")
    return token


def get_current_user_id(
    token: str | None = Query(None),
    authorization: str | None = Header(None),
) -> str:
    tok = _extract_token(token, authorization)
    try:
        return decode_access_token(tok)
    except JWTError:
        raise UnauthenticatedError("invalid token")


async def get_current_user(
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_session),
) -> User:
    # el token puede sobrevivir a la fila; sin usuario no hay sesión válida
    user = await get_by_id(db, user_id)
    if not user:
        raise UnauthenticatedError("unknown user")
    return user
