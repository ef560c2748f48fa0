from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.use_cases.runtime_logs.persist_log import PersistLog


def build_engine(db_uri: str) -> AsyncEngine:
    return create_async_engine(db_uri, echo=False, future=True)


def build_session_factory(engine: AsyncEngine) -> sessionmaker:
    return sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
    )


async def get_session(request: Request) -> AsyncSession:
    """Session bound to the engine create_app built from config.DB_URI"""
    async with request.app.state.session_factory() as session:
        yield session


def get_persist_log(request: Request) -> PersistLog:
    """PersistLog created by create_app for this application"""
    return request.app.state.persist_log


def get_config(request: Request):
    """ApplicationConfig the running app was created with"""
    return request.app.state.config
