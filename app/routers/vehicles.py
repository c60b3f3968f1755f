from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.dependencies import get_current_admin, require_roles
from app.models.administrator import Perfil
from app.schemas.vehicle import VehicleRequest, VehicleResponse
from app.services import vehicle_service

router = APIRouter(prefix="/veiculos", tags=["veiculos"])

_authenticated = [Depends(get_current_admin)]
_adm_or_editor = [Depends(require_roles(Perfil.ADM, Perfil.EDITOR))]
_adm_only = [Depends(require_roles(Perfil.ADM))]


@router.get("", response_model=list[VehicleResponse], dependencies=_authenticated)
async def list_vehicles(
    pagina: int | None = Query(default=None, ge=1),
    db: AsyncSession = Depends(get_db),
):
    return await vehicle_service.list_vehicles(db, pagina)


@router.get("/{vehicle_id}", response_model=VehicleResponse, dependencies=_authenticated)
async def get_vehicle(vehicle_id: int, db: AsyncSession = Depends(get_db)):
    return await vehicle_service.get_vehicle(db, vehicle_id)


@router.post(
    "",
    response_model=VehicleResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=_adm_or_editor,
)
async def create_vehicle(payload: VehicleRequest, response: Response, db: AsyncSession = Depends(get_db)):
    vehicle = await vehicle_service.create_vehicle(db, payload)
    response.headers["Location"] = f"/veiculos/{vehicle.id}"
    return vehicle


@router.put("/{vehicle_id}", response_model=VehicleResponse, dependencies=_adm_or_editor)
async def update_vehicle(vehicle_id: int, payload: VehicleRequest, db: AsyncSession = Depends(get_db)):
    return await vehicle_service.update_vehicle(db, vehicle_id, payload)


@router.delete("/{vehicle_id}", status_code=status.HTTP_204_NO_CONTENT, dependencies=_adm_only)
async def delete_vehicle(vehicle_id: int, db: AsyncSession = Depends(get_db)):
    await vehicle_service.delete_vehicle(db, vehicle_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
