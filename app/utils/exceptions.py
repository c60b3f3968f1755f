import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.utils.response import error_response

logger = logging.getLogger(__name__)


class AppException(Exception):
    def __init__(
        self,
        message: str,
        status_code: int = 400,
        messages: list[str] | None = None,
        headers: dict | None = None,
    ):
        self.message = message
        self.status_code = status_code
        self.messages = messages
        self.headers = headers


class ValidationException(AppException):
    def __init__(self, messages: list[str]):
        super().__init__("Dados inválidos", status.HTTP_400_BAD_REQUEST, messages=messages)


class InvalidCredentialsException(AppException):
    def __init__(self):
        super().__init__("Email ou senha inválidos", status.HTTP_401_UNAUTHORIZED)


class InvalidTokenException(AppException):
    def __init__(self, message: str = "Token inválido"):
        super().__init__(
            message,
            status.HTTP_401_UNAUTHORIZED,
            headers={"WWW-Authenticate": "Bearer"},
        )


class TokenExpiredException(AppException):
    def __init__(self):
        super().__init__(
            "Token expirado",
            status.HTTP_401_UNAUTHORIZED,
            headers={"WWW-Authenticate": "Bearer"},
        )


class ForbiddenException(AppException):
    def __init__(self, message: str = "Acesso negado"):
        super().__init__(message, status.HTTP_403_FORBIDDEN)


class NotFoundException(AppException):
    def __init__(self, resource: str = "Registro"):
        super().__init__(f"{resource} não encontrado", status.HTTP_404_NOT_FOUND)


def _format_validation_error(error: dict) -> str:
    loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
    field = ".".join(loc)
    msg = error.get("msg", "Valor inválido")
    return f"{field}: {msg}" if field else msg


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=error_response(exc.message, exc.messages),
            headers=exc.headers,
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        messages = [_format_validation_error(e) for e in exc.errors()]
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_response("Dados inválidos", messages),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content=error_response("Erro interno do servidor"),
        )
