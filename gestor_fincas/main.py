"""
Gestor Fincas IA — Application entry point.

This is the **only** file that assembles the app.  All business logic
lives in the `auth/`, `api/`, `models/`, and `core/` packages.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from gestor_fincas.api.api import api_router
from gestor_fincas.auth.middleware import JwtAuthMiddleware, create_auth_middleware
from gestor_fincas.core.config import settings
from gestor_fincas.core.exceptions import register_exception_handlers
from gestor_fincas.core.security import get_auth_service
from gestor_fincas.db.init_db import create_tables, seed_database
from gestor_fincas.db.session import async_session_factory, engine

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
)
logger = logging.getLogger(__name__)


# ── Lifespan ────────────────────────────────────────────────────────
@asynccontextmanager
async def lifespan(_app: FastAPI):
    await create_tables(engine)

    async with async_session_factory() as session:
        await seed_database(session)

    logger.info("%s v%s started", settings.PROJECT_NAME, settings.VERSION)
    yield
    await engine.dispose()
    logger.info("Shutdown complete")


# ── App factory ─────────────────────────────────────────────────────
def create_app() -> FastAPI:
    application = FastAPI(
        title=settings.PROJECT_NAME,
        description="Property management API",
        version=settings.VERSION,
        openapi_url=f"{settings.API_PREFIX}/openapi.json",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    # Derive request.state.auth on every request
    jwt_middleware = JwtAuthMiddleware(get_auth_service())
    application.middleware("http")(create_auth_middleware(jwt_middleware))

    # CORS (added last so it wraps the auth middleware)
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Global exception handlers (prevent stack-trace leakage)
    register_exception_handlers(application)

    application.include_router(api_router, prefix=settings.API_PREFIX)

    @application.get("/", response_class=PlainTextResponse, include_in_schema=False)
    async def root() -> str:
        return settings.PROJECT_NAME + " API"

    return application


app = create_app()
