# hacklog/users/service.py
from __future__ import annotations

import logging

import pydantic
from jose import JWTError
from sqlalchemy.ext.asyncio import AsyncSession

from hacklog.core.errors import UnauthenticatedError, ValidationError, format_validation_errors
from hacklog.core.security import create_access_token, decode_identity_token
from hacklog.users.repository import upsert_user
from hacklog.users.schemas import UserUpsert

log = logging.getLogger("uvicorn")

# claims del proveedor que copiamos al usuario
CLAIM_FIELDS = ("email", "first_name", "last_name", "profile_image_url")


async def login_user(db: AsyncSession, id_token: str) -> str:
    """
    Verifica el token de identidad, hace upsert del usuario con sus claims
    y devuelve nuestro access token. El commit lo hace el router.
    """
    try:
        claims = decode_identity_token(id_token)
    except JWTError:
        raise UnauthenticatedError("invalid identity token")

    data = {"id": str(claims["sub"])}
    for field in CLAIM_FIELDS:
        if field in claims:
            data[field] = claims[field]

    try:
        payload = UserUpsert.model_validate(data)
    except pydantic.ValidationError as e:
        raise ValidationError(format_validation_errors(e.errors()))
    user = await upsert_user(db, payload.model_dump(exclude_unset=True))
    log.info(f"🔐 login de {user.id}")
    return create_access_token(sub=user.id)
