from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str = "sqlite+aiosqlite:///./data/db.sqlite3"
    secret_key: str = ""
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60
    page_size: int = 10
    admin_email: str = "administrador@teste.com"
    admin_password: str = "123456"
    admin_perfil: str = "Adm"
    cors_origins: list[str] = ["http://localhost:8000"]
    host: str = "127.0.0.1"
    port: int = 8000

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
