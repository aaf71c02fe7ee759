# hacklog/projects/router.py
from typing import List

from fastapi import APIRouter, Depends, Query, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from hacklog.core.deps import get_current_user
from hacklog.db.session import get_session
from hacklog.projects import repository as repo
from hacklog.projects import service as svc
from hacklog.projects.schemas import ProjectCreate, ProjectOut
from hacklog.users.models import User

router = APIRouter(prefix="/api/projects", tags=["projects"])
search_router = APIRouter(prefix="/api/search", tags=["projects"])


@router.get("", response_model=List[ProjectOut])
async def my_projects(
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_session),
):
    return await repo.list_projects_by_user(db, user.id)


@router.get("/{project_id}", response_model=ProjectOut)
async def get_project(
    project_id: int,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_session),
):
    return await svc.get_owned_project(db, project_id, user.id)


@router.post("", response_model=ProjectOut, status_code=status.HTTP_201_CREATED)
async def create_project(
    payload: ProjectCreate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_session),
):
    project = await svc.create_project(db, user.id, payload)
    await db.commit()
    return project


@router.put("/{project_id}", response_model=ProjectOut)
async def update_project(
    project_id: int,
    request: Request,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_session),
):
    # el body crudo se valida en el service, después de verificar el dueño
    raw = await request.body()
    project = await svc.update_project(db, project_id, user.id, raw)
    await db.commit()
    return project


@router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_project(
    project_id: int,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_session),
):
    await svc.delete_project(db, project_id, user.id)
    await db.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@search_router.get("", response_model=List[ProjectOut])
async def search_projects(
    q: str = Query(""),
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_session),
):
    return await repo.search_projects(db, user.id, q)
