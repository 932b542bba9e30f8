import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config.settings import Settings
from app.database import Base, build_engine, build_session_factory
from app.routers import tasks, users
from app.utils.exceptions import register_exception_handlers
from app.models import Task, User  # noqa: F401  registers the mapped tables on Base.metadata

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the API around one Settings object.

    With no argument the settings come from the environment; uvicorn calls it
    that way through start_server.py.
    """
    if settings is None:
        settings = Settings.from_env()

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    engine = build_engine(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting To-do API...")
        # no-op for tables that already exist (e.g. created by alembic)
        Base.metadata.create_all(bind=engine)
        yield
        logger.info("Shutting down To-do API...")
        engine.dispose()

    app = FastAPI(
        title="To-do API",
        description="User accounts and per-user task lists.",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)

    if not settings.jwt_secret:
        logger.warning("JWT_SECRET is not set; registration and login will fail")

    # CORS configuration
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials="*" not in settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["Authorization"],
    )

    register_exception_handlers(app)

    # Route registration
    app.include_router(users.router, prefix="/users", tags=["Users"])
    app.include_router(tasks.router, prefix="/tasks", tags=["Tasks"])

    # Root route
    @app.get("/")
    def read_root():
        return {"message": "To-do API"}

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app
