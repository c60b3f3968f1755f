from datetime import timedelta

import pytest
from httpx import AsyncClient, ASGITransport
from pydantic import ValidationError

from app.main import app
from app.schemas.auth import AdministratorCreate
from app.utils.exceptions import InvalidTokenException, TokenExpiredException
from app.utils.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)


@pytest.mark.asyncio
async def test_login_valid_credentials():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.post(
            "/administradores/login",
            json={"email": "administrador@teste.com", "senha": "123456"},
        )

    assert response.status_code == 200
    data = response.json()
    assert data["email"] == "administrador@teste.com"
    assert data["perfil"] == "Adm"

    claims = decode_access_token(data["token"])
    assert claims.email == "administrador@teste.com"
    assert claims.perfil == "Adm"


@pytest.mark.asyncio
async def test_login_invalid_password():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.post(
            "/administradores/login",
            json={"email": "administrador@teste.com", "senha": "errada"},
        )

    assert response.status_code == 401
    data = response.json()
    assert data["status"] == "error"
    assert data["message"] == "Email ou senha inválidos"


@pytest.mark.asyncio
async def test_login_nonexistent_administrator():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.post(
            "/administradores/login",
            json={"email": "ninguem@teste.com", "senha": "123456"},
        )

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_login_missing_field_is_bad_request():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.post("/administradores/login", json={"email": "administrador@teste.com"})

    assert response.status_code == 400
    assert any("senha" in m for m in response.json()["data"])


@pytest.mark.asyncio
async def test_list_administrators_hides_password(adm_headers):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/administradores", headers=adm_headers)

    assert response.status_code == 200
    admins = response.json()
    assert any(a["email"] == "administrador@teste.com" for a in admins)
    for admin in admins:
        assert set(admin) == {"id", "email", "perfil"}


@pytest.mark.asyncio
async def test_get_administrator_by_id(adm_headers):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        admins = (await client.get("/administradores", headers=adm_headers)).json()
        response = await client.get(f"/administradores/{admins[0]['id']}", headers=adm_headers)
        missing = await client.get("/administradores/99999", headers=adm_headers)

    assert response.status_code == 200
    assert response.json()["email"] == admins[0]["email"]
    assert missing.status_code == 404


@pytest.mark.asyncio
async def test_administrators_require_adm_role(editor_headers):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        forbidden = await client.get("/administradores", headers=editor_headers)
        anonymous = await client.get("/administradores")

    assert forbidden.status_code == 403
    assert anonymous.status_code == 401


def test_token_round_trip():
    token = create_access_token("editor@teste.com", "Editor")
    claims = decode_access_token(token)
    assert claims.email == "editor@teste.com"
    assert claims.perfil == "Editor"


def test_expired_token_is_rejected():
    token = create_access_token("administrador@teste.com", "Adm", expires_delta=timedelta(minutes=-1))
    with pytest.raises(TokenExpiredException):
        decode_access_token(token)


def test_tampered_token_is_rejected():
    token = create_access_token("administrador@teste.com", "Editor")
    header, payload, signature = token.split(".")
    tampered = ".".join([header, payload, signature[::-1]])
    with pytest.raises(InvalidTokenException):
        decode_access_token(tampered)


def test_garbage_token_is_rejected():
    with pytest.raises(InvalidTokenException):
        decode_access_token("not-a-token")


def test_password_hash_is_salted():
    first = hash_password("123456")
    second = hash_password("123456")
    assert first != second
    assert verify_password("123456", first)
    assert not verify_password("654321", first)


def test_verify_password_with_non_bcrypt_value():
    assert not verify_password("123456", "123456")


def test_administrator_create_rules():
    with pytest.raises(ValidationError):
        AdministratorCreate(email="sem-arroba", senha="123456", perfil="Adm")
    with pytest.raises(ValidationError):
        AdministratorCreate(email="a@b.com", senha="12345", perfil="Adm")

    admin = AdministratorCreate(email="a@b.com", senha="123456", perfil=" Editor ")
    assert admin.perfil == "Editor"
