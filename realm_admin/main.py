"""ASGI entry point: ``uvicorn realm_admin.main:app``.

create_app() only wires things together (lifespan, error handlers, CORS,
the v1 router). Settings are read when it runs, not at import of the
modules it pulls in, so tests can prepare the environment first.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from realm_admin.api.v1 import api_router
from realm_admin.core.config import get_settings
from realm_admin.core.exception_handlers import register_exception_handlers
from realm_admin.core.lifespan import create_lifespan


def _origins(raw: str) -> list[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=create_lifespan,
    )
    register_exception_handlers(app)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=_origins(settings.allowed_origins),
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["Authorization", "Content-Type", settings.realm_header_name],
    )
    app.include_router(api_router, prefix="/api/v1")
    return app


app = create_app()
