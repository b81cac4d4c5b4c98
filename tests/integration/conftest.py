import pytest_asyncio
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.use_cases.officials import BootstrapUseCase
from src.depends import get_unit_of_work
from tests.fixtures.officials import ADMIN_SECRET, bearer, login


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///./test.db")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
async def client(db_session):
    from httpx import ASGITransport
    from src.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def admin_secret(db_session):
    """Seed ranks, departments and ADMIN001; returns the one-time admin password"""
    result = await BootstrapUseCase(SqlAlchemyUnitOfWork(db_session)).execute()
    return result.value.generated_secret


@pytest_asyncio.fixture
async def admin_token(client, admin_secret):
    """ADMIN001 session after the first-login password change to ADMIN_SECRET"""
    first = await login(client, "ADMIN001", admin_secret)
    response = await client.post(
        "/auth/change-password",
        json={"current_secret": admin_secret, "new_secret": ADMIN_SECRET},
        headers=bearer(first),
    )
    assert response.status_code == 200
    return await login(client, "ADMIN001", ADMIN_SECRET)
