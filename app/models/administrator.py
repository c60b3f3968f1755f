import enum

from sqlalchemy import Column, Integer, String

from app.database import Base


class Perfil(str, enum.Enum):
    ADM = "Adm"
    EDITOR = "Editor"


class Administrator(Base):
    __tablename__ = "Administradores"

    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(255), nullable=False, unique=True)
    senha_hash = Column(String, nullable=False)
    # free text; tags outside Perfil authenticate but pass no role guard
    perfil = Column(String(10), nullable=False)
