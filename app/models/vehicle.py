from sqlalchemy import Column, Integer, String

from app.database import Base


class Vehicle(Base):
    __tablename__ = "Veiculos"

    id = Column(Integer, primary_key=True, autoincrement=True)
    nome = Column(String(150), nullable=False)
    marca = Column(String(100), nullable=False)
    ano = Column(Integer, nullable=False)
