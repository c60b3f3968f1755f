from pydantic import BaseModel, field_validator


class LoginRequest(BaseModel):
    email: str
    senha: str


class LoginResponse(BaseModel):
    email: str
    perfil: str
    token: str


class TokenClaims(BaseModel):
    email: str
    perfil: str


class AdministratorCreate(BaseModel):
    email: str
    senha: str
    perfil: str

    @field_validator("email")
    @classmethod
    def check_email(cls, v: str) -> str:
        if "@" not in v:
            raise ValueError("Email inválido")
        return v

    @field_validator("senha")
    @classmethod
    def check_senha(cls, v: str) -> str:
        if len(v) < 6:
            raise ValueError("A senha deve ter pelo menos 6 caracteres")
        if len(v) > 50:
            raise ValueError("A senha deve ter no máximo 50 caracteres")
        return v

    @field_validator("perfil")
    @classmethod
    def check_perfil(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("O perfil não pode ser vazio")
        return v.strip()


class AdministratorResponse(BaseModel):
    id: int
    email: str
    perfil: str

    model_config = {"from_attributes": True}
