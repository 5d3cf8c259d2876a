import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.app import create_app
from src.app.use_cases.auth import BootstrapAdminUseCase
from src.depends import get_unit_of_work
from tests.fixtures.json_loader import TestDataLoader
from tests.utils.session import login


@pytest.fixture
def test_data():
    return TestDataLoader()


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    """Session for direct reads and setup outside the API"""
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(session_factory):
    app = create_app(ApplicationConfig)

    # One session per request, as in production
    async def override_get_unit_of_work():
        async with session_factory() as session:
            yield SqlAlchemyUnitOfWork(session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def admin_headers(client, db_session, test_data):
    """Bootstrapped admin, logged in (the test client does not run the lifespan)"""
    admin = test_data.credentials("admin")
    result = await BootstrapAdminUseCase(SqlAlchemyUnitOfWork(db_session)).execute(
        admin["email"], admin["password"]
    )
    assert result.is_ok()
    return await login(client, admin)


@pytest_asyncio.fixture
async def user_headers(client, test_data):
    """Self-registered user, logged in"""
    response = await client.post("/auth/register", json=test_data.get_copy("user"))
    assert response.status_code == 201, response.text
    return await login(client, test_data.credentials("user"))
