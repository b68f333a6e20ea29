"""
Main - Factory FastAPI.

Responsabilite unique:
----------------------
Creer et configurer l'application FastAPI: logging, middlewares,
handlers d'erreurs, conteneur de dependances et routers.

Demarrage:
----------
Au lancement (lifespan), les tables sont creees si necessaire et
les donnees de demonstration inserees si SEED_DATA=true.

Usage:
------
    # Development
    uvicorn portal.presentation.api.main:app --reload

    # Production
    uvicorn portal.presentation.api.main:app --host 0.0.0.0 --port 8000
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

from portal.infrastructure.config import Settings, get_settings
from portal.infrastructure.container import Container
from portal.infrastructure.logging import RequestLogger, configure_logging, get_logger
from portal.infrastructure.persistence.database import DatabaseManager
from portal.infrastructure.persistence.seed import seed_database
from portal.presentation.api.contributors.router import router as contributors_router
from portal.presentation.api.errors import register_exception_handlers
from portal.presentation.api.products.router import router as products_router


def create_app(
    settings: Optional[Settings] = None,
    container: Optional[Container] = None,
) -> FastAPI:
    """
    Factory pour creer l'application FastAPI.

    Args:
        settings: Configuration (defaut: get_settings()).
        container: Conteneur pre-construit (defaut: SQLAlchemy sur
            settings.database_url).

    Returns:
        Application FastAPI configuree.
    """
    settings = settings or get_settings()

    configure_logging(json_logs=settings.json_logs, log_level=settings.log_level)
    logger = get_logger("portal.api")

    if container is None:
        container = Container.create(DatabaseManager(settings.database_url))

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if container.db_manager is not None:
            container.db_manager.create_tables()

        if settings.seed_data:
            seed_database(container.contributor_repository, container.product_repository)

        logger.info("app_started", version=settings.api_version)
        yield

        if container.db_manager is not None:
            container.db_manager.dispose()
        logger.info("app_stopped")

    app = FastAPI(
        title=settings.api_title,
        version=settings.api_version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.container = container
    app.state.settings = settings

    # Request logging middleware
    app.add_middleware(BaseHTTPMiddleware, dispatch=RequestLogger())

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Health check
    @app.get("/health", tags=["Health"])
    def health():
        """Endpoint de sante."""
        return {"status": "healthy"}

    # Routers
    app.include_router(contributors_router, prefix=settings.api_prefix)
    app.include_router(products_router, prefix=settings.api_prefix)

    return app


# Instance pour uvicorn
app = create_app()
