"""FastAPI application."""

from dishka import AsyncContainer
from dishka.integrations.fastapi import setup_dishka
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from folio import __version__
from folio.config import Settings
from folio.interface.api.errors import register_exception_handlers
from folio.interface.api.routes import (
    admin,
    artists,
    health,
    invitations,
    me,
    signup,
    studio,
)
from folio.util.di.container import create_container
from folio.util.observability import instrument_fastapi


def allowed_origins(settings: Settings) -> list[str]:
    """Origins allowed to call the API with credentials."""
    origins = ["http://localhost:3000"]
    if settings.public_base_url or settings.platform_url or not settings.is_production:
        resolved = settings.resolve_base_url()
        if resolved not in origins:
            origins.insert(0, resolved)
    return origins


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Build the API around a DI container.

    Logfire is configured by the launcher (scripts/start_app.py) before this
    runs; uvicorn calls it as a factory.

    Args:
        container: DI container; the production container is built when omitted
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Folio API",
        description="Backend API for Folio - invitation-only artist portfolios and commissions",
        version=__version__,
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins(settings),
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept"],
        max_age=600,
    )

    if container is None:
        container = create_container()
    setup_dishka(container, app_instance)

    register_routes(app_instance)
    register_exception_handlers(app_instance)

    return app_instance


def register_routes(app_instance: FastAPI) -> None:
    """Attach every router."""
    app_instance.include_router(health.router)
    app_instance.include_router(me.router)
    app_instance.include_router(invitations.router)
    app_instance.include_router(signup.router)
    app_instance.include_router(admin.router)
    app_instance.include_router(studio.router)
    app_instance.include_router(artists.router)
