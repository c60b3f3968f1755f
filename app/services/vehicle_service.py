from datetime import date

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.database import page_offset
from app.models.vehicle import Vehicle
from app.schemas.vehicle import VehicleRequest
from app.utils.exceptions import NotFoundException, ValidationException

MIN_YEAR = 1950
NOME_MAX_LENGTH = 150
MARCA_MAX_LENGTH = 100


def max_year() -> int:
    # model years run one ahead of the calendar
    return date.today().year + 1


def validate_vehicle(data: VehicleRequest) -> list[str]:
    """Return the list of validation messages for a vehicle payload (empty when valid)."""
    messages = []
    if not data.nome.strip():
        messages.append("O nome não pode ser vazio")
    if not data.marca.strip():
        messages.append("A marca não pode ficar em branco")
    if len(data.nome) > NOME_MAX_LENGTH:
        messages.append(f"O nome deve ter no máximo {NOME_MAX_LENGTH} caracteres")
    if len(data.marca) > MARCA_MAX_LENGTH:
        messages.append(f"A marca deve ter no máximo {MARCA_MAX_LENGTH} caracteres")
    if data.ano < MIN_YEAR:
        messages.append(f"Veículo muito antigo, aceito somente anos a partir de {MIN_YEAR}")
    elif data.ano > max_year():
        messages.append(f"Ano inválido, aceito somente anos até {max_year()}")
    return messages


def _check(data: VehicleRequest) -> None:
    messages = validate_vehicle(data)
    if messages:
        raise ValidationException(messages)


async def list_vehicles(db: AsyncSession, page: int | None = None) -> list[Vehicle]:
    """All vehicles in insertion order; only one page of them when ``page`` is given."""
    query = select(Vehicle).order_by(Vehicle.id)
    if page is not None:
        offset = page_offset(page, settings.page_size)
        if offset is None:
            return []
        query = query.offset(offset).limit(settings.page_size)
    result = await db.execute(query)
    return list(result.scalars().all())


async def get_vehicle(db: AsyncSession, vehicle_id: int) -> Vehicle:
    vehicle = await db.get(Vehicle, vehicle_id)
    if vehicle is None:
        raise NotFoundException("Veículo")
    return vehicle


async def create_vehicle(db: AsyncSession, data: VehicleRequest) -> Vehicle:
    _check(data)
    vehicle = Vehicle(nome=data.nome, marca=data.marca, ano=data.ano)
    db.add(vehicle)
    await db.commit()
    await db.refresh(vehicle)
    return vehicle


async def update_vehicle(db: AsyncSession, vehicle_id: int, data: VehicleRequest) -> Vehicle:
    vehicle = await get_vehicle(db, vehicle_id)
    _check(data)
    vehicle.nome = data.nome
    vehicle.marca = data.marca
    vehicle.ano = data.ano
    await db.commit()
    await db.refresh(vehicle)
    return vehicle


async def delete_vehicle(db: AsyncSession, vehicle_id: int) -> None:
    vehicle = await get_vehicle(db, vehicle_id)
    await db.delete(vehicle)
    await db.commit()
