from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from sqlalchemy.exc import SQLAlchemyError

from app.core.config import AppSettings, settings as default_settings
from app.core.errors import DatabaseUnavailableError, register_exception_handlers
from app.core.logging import get_logger
from app.db.database import ConnectionProvider, create_db_and_tables
from app.routers import products

logger = get_logger(__name__)


def create_app(settings: Optional[AppSettings] = None) -> FastAPI:
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Connect once at startup; requests share the same in-flight attempt
        provider = ConnectionProvider(settings)
        app.state.connection_provider = provider
        provider.start()
        if settings.DB_CREATE_TABLES:
            try:
                await create_db_and_tables(await provider.get_connection())
            except (SQLAlchemyError, DatabaseUnavailableError) as e:
                logger.error("Could not create the Products table: %s", e)
        yield
        await provider.dispose()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        description="CRUD API for Products",
        version="1.0.0",
        docs_url="/api-docs",
        redoc_url=None,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    app.include_router(products.router, prefix="/api/products")

    @app.get("/", response_class=PlainTextResponse, include_in_schema=False)
    async def read_root():
        return "Products CRUD API is running!"

    return app


app = create_app()
