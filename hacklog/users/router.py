# hacklog/users/router.py
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from hacklog.core.deps import get_current_user
from hacklog.db.session import get_session
from hacklog.users import service as svc
from hacklog.users.models import User
from hacklog.users.schemas import LoginIn, TokenOut, UserOut

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/login", response_model=TokenOut)
async def login(payload: LoginIn, db: AsyncSession = Depends(get_session)):
    """
    Recibe el token de identidad del proveedor externo.
    Crea o actualiza el usuario y devuelve un bearer token.
    """
    token = await svc.login_user(db, payload.id_token)
    await db.commit()
    return {"access_token": token, "token_type": "bearer"}


@router.get("/user", response_model=UserOut)
async def current_user(user: User = Depends(get_current_user)):
    return user
