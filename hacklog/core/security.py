# hacklog/core/security.py
from datetime import datetime, timedelta, timezone
from jose import jwt, JWTError
from hacklog.core.config import settings


def create_access_token(sub: str, expires_minutes: int | None = None) -> str:
    expire = datetime.now(timezone.utc) + timedelta(
        minutes=expires_minutes or settings.ACCESS_TOKEN_EXPIRE_MIN
    )
    payload = {"sub": sub, "exp": expire}
    return jwt.encode(payload, settings.SECRET_KEY, algorithm="HS256")


def decode_access_token(token: str) -> str:
    payload = jwt.decode(token, settings.SECRET_KEY, algorithms=["HS256"])
    sub = payload.get("sub")
    if not sub:
        raise JWTError("missing sub")
    return sub


def decode_identity_token(token: str) -> dict:
    """
    Verifica el token de identidad del proveedor externo y devuelve sus
    claims (sub, email, first_name, last_name, profile_image_url).
    """
    claims = jwt.decode(
        token,
        settings.AUTH_PROVIDER_SECRET,
        algorithms=[settings.AUTH_PROVIDER_ALGORITHM],
        options={"verify_aud": False},
    )
    if not claims.get("sub"):
        raise JWTError("missing sub")
    return claims
