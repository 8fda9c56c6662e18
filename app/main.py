from typing import Optional
import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from app.core.config import Settings
from app.core.database import build_engine, build_session_factory, init_schema
from app.core.errors import register_error_handlers
from app.routes import anomalies, fabrics, health

logger = logging.getLogger("inspection.main")
logger.setLevel(logging.INFO)

STATIC_DIR = os.path.join(os.path.dirname(__file__), "static")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings.from_env()

    app = FastAPI(title="Fabric Inspection")

    # The app owns its store handle; requests get a session from it
    engine = build_engine(settings)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=settings.allowed_origins != ["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)

    # Routers
    app.include_router(fabrics.router)
    app.include_router(anomalies.router)
    app.include_router(health.router)

    # Static files (serve /static/*)
    app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

    @app.on_event("startup")
    def on_startup():
        init_schema(engine)
        logger.info(f"Environment: {settings.environment_name}")

    @app.on_event("shutdown")
    def on_shutdown():
        engine.dispose()

    return app


app = create_app()
