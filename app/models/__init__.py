from app.models.vehicle import Vehicle
from app.models.administrator import Administrator, Perfil

__all__ = ["Vehicle", "Administrator", "Perfil"]
