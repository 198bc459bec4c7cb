"""FastAPI app bootstrap for brazilian_cardinality."""

from __future__ import annotations

from fastapi import FastAPI

from brazilian_cardinality.api.error_handlers import register_error_handlers
from brazilian_cardinality.api.routes import v1_router


def create_app() -> FastAPI:
    """Create and configure FastAPI application instance."""

    app = FastAPI(
        title="Brazilian Cardinality API",
        version="0.1.0",
    )

    @app.get("/health/live", include_in_schema=False)
    def health_live() -> dict[str, str]:
        return {"status": "alive"}

    register_error_handlers(app)
    app.include_router(v1_router)
    return app


app = create_app()
