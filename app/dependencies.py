from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.models.administrator import Perfil
from app.schemas.auth import TokenClaims
from app.utils.exceptions import ForbiddenException, InvalidTokenException
from app.utils.security import decode_access_token

bearer_scheme = HTTPBearer(auto_error=False)


def get_current_admin(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> TokenClaims:
    """Claims of the bearer token; 401 when it is missing, invalid or expired."""
    if credentials is None:
        raise InvalidTokenException("Token de autenticação não informado")
    return decode_access_token(credentials.credentials)


def require_roles(*roles: Perfil):
    """
    Dependency factory accepting only tokens whose role is one of ``roles``.

        @router.delete("/{id}")
        async def remove(claims: TokenClaims = Depends(require_roles(Perfil.ADM))):
            ...
    """
    def dependency(claims: TokenClaims = Depends(get_current_admin)) -> TokenClaims:
        try:
            perfil = Perfil(claims.perfil)
        except ValueError:
            raise ForbiddenException()
        if perfil not in roles:
            raise ForbiddenException()
        return claims
    return dependency
