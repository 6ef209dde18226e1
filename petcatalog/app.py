from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from petcatalog.core.config import get_settings
from petcatalog.core.log import configure_logging
from petcatalog.routers import pets as pets_router
from petcatalog.services.resolver import ContentResolver, get_resolver


def create_app(resolver: Optional[ContentResolver] = None) -> FastAPI:
    """Factory compatible with uvicorn/gunicorn (``--factory``)."""
    configure_logging()
    settings = get_settings()

    app = FastAPI(title="Pet Catalog API")
    app.state.resolver = resolver or get_resolver()

    if settings.app_env != "prod":
        app.add_middleware(
            CORSMiddleware,
            allow_origins=[
                "http://localhost:8000",
                "http://127.0.0.1:8000",
                "http://localhost:5173",
                "http://127.0.0.1:5173",
            ],
            allow_credentials=True,
            allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
            allow_headers=["*"],
        )

    app.include_router(pets_router.router)

    @app.get("/health")
    def health():
        return {"ok": True}

    return app
