from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.engine import Engine

from cinecatalog.common.logging import get_logger
from cinecatalog.common.settings import Settings, get_settings
from cinecatalog.database.core.main import build_engine, build_session_factory
from cinecatalog.services.api.errors import install_error_handlers
from cinecatalog.services.api.routers import health, movies, movie_collections


def create_app(settings: Optional[Settings] = None, engine: Optional[Engine] = None) -> FastAPI:
    """
    Build the API. Pass `engine` to share an existing pool (tests do); otherwise
    one is created from settings and disposed on shutdown.
    """
    cfg = settings or get_settings()
    dev = cfg.is_development
    logger = get_logger(level=cfg.log_level)

    owns_engine = engine is None
    engine = engine or build_engine(cfg)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("%s starting (env=%s, api prefix=%s)", cfg.app_name, cfg.app_env, cfg.api.prefix)
        yield
        if owns_engine:
            engine.dispose()

    app = FastAPI(
        title="Cinecatalog API",
        version="0.1.0",
        docs_url=f"{cfg.api.prefix}/docs",
        openapi_url=f"{cfg.api.prefix}/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = cfg
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)

    allow_origins = ["*"] if dev else cfg.api.cors_allow_origins
    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins,
        allow_methods=cfg.api.cors_allow_methods,
        allow_headers=cfg.api.cors_allow_headers,
        allow_credentials=cfg.api.cors_allow_credentials,
        max_age=cfg.api.cors_max_age,
    )

    install_error_handlers(app)

    # Routers
    app.include_router(health.router)
    app.include_router(movies.router, prefix=cfg.api.prefix)
    app.include_router(movie_collections.router, prefix=cfg.api.prefix)

    # Built frontend; mounted last so API routes win
    if cfg.static_dir.is_dir():
        app.mount("/", StaticFiles(directory=str(cfg.static_dir), html=True), name="frontend")
    else:
        logger.warning("Static directory %s not found; frontend is not served", cfg.static_dir)
    return app
