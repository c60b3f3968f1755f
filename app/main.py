from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.database import create_tables, async_session
from app.seed import seed_data
from app.routers.auth import router as auth_router
from app.routers.vehicles import router as vehicles_router
from app.utils.exceptions import register_exception_handlers
from app.utils.response import success_response


SERVICE_NAME = "veiculos-api"
VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    if not settings.secret_key:
        raise RuntimeError("SECRET_KEY não configurada: defina a variável de ambiente antes de iniciar")
    await create_tables()
    async with async_session() as session:
        await seed_data(session)
    yield


app = FastAPI(
    title="Veículos API",
    description="API de cadastro de veículos com login de administradores",
    version=VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(auth_router)
app.include_router(vehicles_router)


@app.get("/")
async def home():
    return {"mensagem": "Bem vindo a API de veículos", "doc": "/docs"}


@app.get("/health")
async def health_check():
    return success_response(data={"service": SERVICE_NAME, "version": VERSION})


def run():
    import uvicorn
    uvicorn.run("app.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
