import os
import tempfile

import pytest

# Point the app at a throwaway database before anything imports app.database
_TEST_DB_DIR = tempfile.mkdtemp(prefix="veiculos-api-")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TEST_DB_DIR}/test.sqlite3"
os.environ["SECRET_KEY"] = "test-secret"


@pytest.fixture(autouse=True, scope="session")
def setup_test_db():
    import asyncio

    from app.database import create_tables, async_session, engine
    from app.seed import seed_data

    async def _setup():
        await create_tables()
        async with async_session() as session:
            await seed_data(session)
        await engine.dispose()

    asyncio.run(_setup())


@pytest.fixture
def adm_headers():
    from app.utils.security import create_access_token

    token = create_access_token("administrador@teste.com", "Adm")
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def editor_headers():
    from app.utils.security import create_access_token

    token = create_access_token("editor@teste.com", "Editor")
    return {"Authorization": f"Bearer {token}"}
