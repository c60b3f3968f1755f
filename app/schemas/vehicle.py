from pydantic import BaseModel


class VehicleRequest(BaseModel):
    nome: str
    marca: str
    ano: int


class VehicleResponse(BaseModel):
    id: int
    nome: str
    marca: str
    ano: int

    model_config = {"from_attributes": True}
