import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import (
    APP_TITLE,
    APP_VERSION,
    APP_DESCRIPTION,
    CORS_ORIGINS,
    CORS_CREDENTIALS,
    CORS_METHODS,
    CORS_HEADERS,
    ENABLE_SEED_ROUTE,
)
from app.core.database import ensure_indexes, get_database
from app.core.logging_config import setup_logging
from app.api.errors import http_exception_handler, validation_exception_handler
from app.api.routes import (
    admin,
    cards,
    learnings,
    sets,
    usersets,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Resolve the database the same way requests do, so test overrides apply
    database_provider = app.dependency_overrides.get(get_database, get_database)
    await ensure_indexes(database_provider())
    yield


def create_app(enable_seed_route: bool = ENABLE_SEED_ROUTE) -> FastAPI:
    app = FastAPI(
        title=APP_TITLE,
        version=APP_VERSION,
        description=APP_DESCRIPTION,
        lifespan=lifespan,
    )

    # CORS setup
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=CORS_CREDENTIALS,
        allow_methods=CORS_METHODS,
        allow_headers=CORS_HEADERS,
    )

    # Every error leaves the API as {"error": <message>}
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    # Include routers
    app.include_router(sets.router)
    app.include_router(cards.router)
    app.include_router(usersets.router)
    app.include_router(learnings.router)

    if enable_seed_route:
        logger.warning("Seed route GET /init is enabled: it wipes the database")
        app.include_router(admin.router)

    @app.get("/")
    async def root():
        return {
            "success": True,
            "message": "Flashcards API is running!",
            "version": APP_VERSION,
            "endpoints": "/docs for API documentation"
        }

    return app


setup_logging()
app = create_app()

# Local development:
# uvicorn app.main:app --host 0.0.0.0 --port 8000 --reload
