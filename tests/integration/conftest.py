import logging
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

import src.domain  # noqa: F401
from src.depends import get_session
from src.adapter.services.runtime_log_handler import RuntimeLogHandler


@pytest_asyncio.fixture(scope="function")
async def engine(tmp_path):
    """Create test database engine on a throwaway SQLite file"""
    test_db_url = f"sqlite+aiosqlite:///{tmp_path / 'erp_test.db'}"

    engine = create_async_engine(test_db_url, echo=False, future=True)

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    """Create a new database session for each test"""
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
async def runtime_log_file(tmp_path):
    return tmp_path / "logs" / ".runtime.logs"


@pytest_asyncio.fixture
async def client(db_session, runtime_log_file, tmp_path):
    """Create test client with database session override"""
    from src.api.app import create_app
    from config import ApplicationConfig

    class IntegrationConfig(ApplicationConfig):
        DB_URI = f"sqlite+aiosqlite:///{tmp_path / 'erp_test.db'}"
        RUNTIME_LOG_FILE = str(runtime_log_file)
        CORS_ORIGINS = []

    app = create_app(IntegrationConfig)

    # Override the session dependency to use test session
    async def override_get_session():
        yield db_session

    app.dependency_overrides[get_session] = override_get_session

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    root = logging.getLogger()
    for handler in list(root.handlers):
        if isinstance(handler, RuntimeLogHandler):
            root.removeHandler(handler)
