"""Wilaya Store FastAPI application.

Storefront and admin REST API over one relational database. ``create_app``
builds a fresh application around a ``Database``; the module-level ``app`` is
what uvicorn serves.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from bootstrap import prepare_database
from catalogue.api import admin_category_router, admin_product_router, product_router
from delivery.api import admin_wilaya_router, wilaya_router
from identity.api import router as identity_router
from ordering.api import admin_analytics_router, admin_order_router, order_router
from shared.api import register_exception_handlers
from shared.config import Settings
from shared.database import Database
from shared.logging import add_context, clear_context, configure_logging, get_logger

logger = get_logger(__name__)


def create_app(settings: Settings | None = None, database: Database | None = None) -> FastAPI:
    settings = settings or Settings.from_env()
    configure_logging(settings.environment, settings.log_level, settings.log_dir)
    database = database or Database(settings.database_url)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        prepare_database(database, settings)
        logger.info("application_started", environment=settings.environment)
        yield
        database.dispose()
        logger.info("application_stopped")

    app = FastAPI(
        title="Wilaya Store API",
        description="Storefront and admin API for an Algerian clothing shop",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = database

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def request_context_middleware(request: Request, call_next):
        """Tag every log line emitted while serving a request."""
        clear_context()
        add_context(request_id=str(uuid.uuid4()), method=request.method, path=request.url.path)
        return await call_next(request)

    register_exception_handlers(app)

    # -----------------------------------------------------------------------
    # Routers
    # -----------------------------------------------------------------------
    app.include_router(product_router)
    app.include_router(wilaya_router)
    app.include_router(order_router)
    app.include_router(identity_router)
    app.include_router(admin_analytics_router)
    app.include_router(admin_product_router)
    app.include_router(admin_order_router)
    app.include_router(admin_wilaya_router)
    app.include_router(admin_category_router)

    @app.get("/health")
    def health():
        try:
            database.ping()
        except SQLAlchemyError:
            logger.exception("health_check_failed")
            return JSONResponse(status_code=503, content={"status": "unavailable", "database": "unreachable"})
        return JSONResponse(content={"status": "ok", "database": "ok"})

    return app


app = create_app()
