import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlmodel import SQLModel

import src.domain  # noqa: F401  registers tables on SQLModel.metadata
from src.adapter.services.file_log_store import FileLogStore
from src.adapter.services.runtime_log_handler import RuntimeLogHandler
from src.app.use_cases.runtime_logs import PersistLog
from src.api.error import ClientError, client_error_handler
from src.api.routes import customers, sales, invoices, logs
from src.depends import build_engine, build_session_factory

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    engine = app.state.engine

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    logger.info(f"Database schema ready on {engine.url.render_as_string(hide_password=True)}")
    yield
    await engine.dispose()


def attach_runtime_log_handler(persist_log: PersistLog, level: str) -> RuntimeLogHandler:
    """Route WARNING+ server records to the runtime log, replacing any previous handler"""
    root = logging.getLogger()
    for handler in list(root.handlers):
        if isinstance(handler, RuntimeLogHandler):
            root.removeHandler(handler)

    handler = RuntimeLogHandler(persist_log, level=logging.getLevelName(level.upper()))
    root.addHandler(handler)
    return handler


def create_app(config) -> FastAPI:
    app = FastAPI(title="ERP Sales Service", version="0.1.0", lifespan=lifespan)
    app.state.config = config
    app.state.engine = build_engine(config.DB_URI)
    app.state.session_factory = build_session_factory(app.state.engine)

    if config.CORS_ORIGINS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=config.CORS_ORIGINS,
            allow_credentials=config.CORS_ALLOW_CREDENTIALS,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    app.state.persist_log = PersistLog(
        FileLogStore(config.RUNTIME_LOG_FILE, max_lines=config.RUNTIME_LOG_MAX_LINES)
    )
    attach_runtime_log_handler(app.state.persist_log, config.RUNTIME_LOG_LEVEL)

    app.add_exception_handler(ClientError, client_error_handler)

    app.include_router(customers.router, prefix=config.API_PREFIX)
    app.include_router(sales.router, prefix=config.API_PREFIX)
    app.include_router(invoices.router, prefix=config.API_PREFIX)
    app.include_router(logs.router, prefix=config.API_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health() -> dict:
        return {"status": "ok"}

    return app
