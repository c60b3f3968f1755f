from datetime import datetime, timedelta, timezone

import bcrypt
from jose import ExpiredSignatureError, JWTError, jwt

from app.config import settings
from app.schemas.auth import TokenClaims
from app.utils.exceptions import InvalidTokenException, TokenExpiredException


def hash_password(plain_password: str) -> str:
    return bcrypt.hashpw(plain_password.encode(), bcrypt.gensalt()).decode()


def verify_password(plain_password: str, hashed_password: str) -> bool:
    try:
        return bcrypt.checkpw(plain_password.encode(), hashed_password.encode())
    except ValueError:
        # stored value is not a bcrypt hash
        return False


def create_access_token(email: str, perfil: str, expires_delta: timedelta | None = None) -> str:
    """Sign a token carrying the administrator's email (``sub``) and role (``perfil``)."""
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)
    payload = {
        "sub": email,
        "perfil": perfil,
        "exp": datetime.now(timezone.utc) + expires_delta,
    }
    return jwt.encode(payload, settings.secret_key, algorithm=settings.algorithm)


def decode_access_token(token: str) -> TokenClaims:
    """
    Verify signature and expiry and return the claims.
    Raises TokenExpiredException past expiry, InvalidTokenException otherwise.
    """
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except ExpiredSignatureError:
        raise TokenExpiredException()
    except JWTError:
        raise InvalidTokenException()

    email = payload.get("sub")
    perfil = payload.get("perfil")
    if not email or perfil is None:
        raise InvalidTokenException("Token sem as informações necessárias")
    return TokenClaims(email=email, perfil=perfil)
