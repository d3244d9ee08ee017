import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cashcard import __version__
from cashcard.api import create_api_router
from cashcard.core.config import get_settings
from cashcard.core.logging import setup_logging
from cashcard.infrastructure.database import dispose_engine, init_db
from cashcard.interfaces.http.errors import register_exception_handlers

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    if settings.database.create_schema_on_startup:
        await init_db()
        logger.info("Database schema ready")
    yield
    await dispose_engine()


def create_app() -> FastAPI:
    settings = get_settings()
    setup_logging(settings)

    app = FastAPI(
        title=settings.project_name,
        description="Cash card REST service",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors.allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(create_api_router(settings.api_prefix))

    return app


app = create_app()
