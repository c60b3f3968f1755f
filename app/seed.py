import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.models.administrator import Administrator
from app.schemas.auth import AdministratorCreate
from app.utils.security import hash_password

logger = logging.getLogger(__name__)


def default_administrator() -> AdministratorCreate:
    return AdministratorCreate(
        email=settings.admin_email,
        senha=settings.admin_password,
        perfil=settings.admin_perfil,
    )


async def seed_data(session: AsyncSession) -> None:
    result = await session.execute(select(Administrator).limit(1))
    if result.scalars().first() is not None:
        return

    admin = default_administrator()
    session.add(Administrator(
        email=admin.email,
        senha_hash=hash_password(admin.senha),
        perfil=admin.perfil,
    ))
    await session.commit()
    logger.info("Seeded default administrator %s", admin.email)
