from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.dependencies import require_roles
from app.models.administrator import Perfil
from app.schemas.auth import AdministratorResponse, LoginRequest, LoginResponse
from app.services import auth_service

router = APIRouter(prefix="/administradores", tags=["administradores"])

_adm_only = [Depends(require_roles(Perfil.ADM))]


@router.post("/login", response_model=LoginResponse)
async def login(request: LoginRequest, db: AsyncSession = Depends(get_db)):
    return await auth_service.login(db, request.email, request.senha)


@router.get("", response_model=list[AdministratorResponse], dependencies=_adm_only)
async def list_administrators(
    pagina: int | None = Query(default=None, ge=1),
    db: AsyncSession = Depends(get_db),
):
    return await auth_service.list_administrators(db, pagina)


@router.get("/{admin_id}", response_model=AdministratorResponse, dependencies=_adm_only)
async def get_administrator(admin_id: int, db: AsyncSession = Depends(get_db)):
    return await auth_service.get_administrator(db, admin_id)
