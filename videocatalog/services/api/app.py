from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from videocatalog.common.logging import get_logger
from videocatalog.common.settings import get_settings
from videocatalog.services.api.routers import categories, genres, cast_members, videos, health

cfg = get_settings()
dev = cfg.app_env.lower() == "development"
logger = get_logger(__name__)


def create_app() -> FastAPI:
    app = FastAPI(
        title="Video Catalog API",
        version="0.1.0",
        docs_url=f"{cfg.api.prefix}/docs",
        openapi_url=f"{cfg.api.prefix}/openapi.json",
    )

    allow_origins = ["*"] if dev else cfg.api.cors_allow_origins
    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins,
        allow_methods=cfg.api.cors_allow_methods,
        allow_headers=cfg.api.cors_allow_headers,
        allow_credentials=cfg.api.cors_allow_credentials,
    )

    # Routers
    app.include_router(health.router)
    app.include_router(categories.router)
    app.include_router(genres.router)
    app.include_router(cast_members.router)
    app.include_router(videos.router)

    logger.info("%s API ready (env=%s, prefix=%s)", cfg.app_name, cfg.app_env, cfg.api.prefix)
    return app

app = create_app()
