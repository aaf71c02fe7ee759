# hacklog/profile/router.py
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from hacklog.core.deps import get_current_user_id
from hacklog.db.session import get_session
from hacklog.profile import service as svc
from hacklog.profile.schemas import ProfileUpdate, PublicProfileOut, UsernameUpdate
from hacklog.users.schemas import UserOut

router = APIRouter(prefix="/api/profile", tags=["profile"])


# ---------------------------
# PUT /api/profile/username
# ---------------------------
@router.put("/username", response_model=UserOut)
async def update_username(
    payload: UsernameUpdate,
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_session),
):
    user = await svc.change_username(db, user_id, payload.username)
    await db.commit()
    return user


# ---------------------------
# PUT /api/profile  (bio)
# ---------------------------
@router.put("", response_model=UserOut)
async def update_profile(
    payload: ProfileUpdate,
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_session),
):
    user = await svc.update_bio(db, user_id, payload.model_dump(exclude_unset=True))
    await db.commit()
    return user


# ---------------------------
# GET /api/profile/{username}  (público, sin token)
# ---------------------------
@router.get("/{username}", response_model=PublicProfileOut)
async def public_profile(username: str, db: AsyncSession = Depends(get_session)):
    return await svc.public_profile(db, username)
