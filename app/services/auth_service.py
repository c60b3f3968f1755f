import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.database import page_offset
from app.models.administrator import Administrator
from app.schemas.auth import LoginResponse
from app.utils.exceptions import InvalidCredentialsException, NotFoundException
from app.utils.security import create_access_token, verify_password

logger = logging.getLogger(__name__)


async def login(db: AsyncSession, email: str, senha: str) -> LoginResponse:
    result = await db.execute(select(Administrator).where(Administrator.email == email))
    admin = result.scalars().first()

    if admin is None or not verify_password(senha, admin.senha_hash):
        logger.info("Failed login attempt")
        raise InvalidCredentialsException()

    token = create_access_token(admin.email, admin.perfil)
    return LoginResponse(email=admin.email, perfil=admin.perfil, token=token)


async def list_administrators(db: AsyncSession, page: int | None = None) -> list[Administrator]:
    query = select(Administrator).order_by(Administrator.id)
    if page is not None:
        offset = page_offset(page, settings.page_size)
        if offset is None:
            return []
        query = query.offset(offset).limit(settings.page_size)
    result = await db.execute(query)
    return list(result.scalars().all())


async def get_administrator(db: AsyncSession, admin_id: int) -> Administrator:
    admin = await db.get(Administrator, admin_id)
    if admin is None:
        raise NotFoundException("Administrador")
    return admin
