import logging
from collections.abc import AsyncGenerator, Callable
from contextlib import asynccontextmanager
from typing import cast

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.deps import get_context, get_rules, get_settings
from src.api.errors import register_error_handlers
from src.api.routes import bookmarks, sections, settings, tabs
from src.app_shell.context import ServiceContext
from src.shell.http.health import (
    HealthCheckRegistry,
    StartupCheck,
    StartupTracker,
    StoreCheck,
    create_health_router,
)

__version__ = "0.1.0"

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _context_for(app: FastAPI) -> ServiceContext:
    """Resolve the service context, honouring dependency overrides."""
    provider = cast(
        Callable[[], ServiceContext],
        app.dependency_overrides.get(get_context, get_context),
    )
    return provider()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    if get_context not in app.dependency_overrides:
        # Load rules on startup (fail-fast)
        try:
            get_rules()
        except (FileNotFoundError, ValueError) as e:
            logger.critical("Rules load failed: %s", e)
            raise
        logger.info("Rules loaded from %s", get_settings().rules_path)

    ctx = _context_for(app)
    logger.info("Serving %s", ctx.store.counts())
    StartupTracker.mark_started()

    yield

    logger.info("Shutting down; in-memory data is discarded")


def create_app() -> FastAPI:
    app = FastAPI(
        title="Bookmark Tabs API",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    register_error_handlers(app)

    # --- Routers ---
    app.include_router(tabs.router, prefix="/api/tabs", tags=["Tabs"])
    app.include_router(bookmarks.router, prefix="/api/bookmarks", tags=["Bookmarks"])
    app.include_router(sections.router, prefix="/api/sections", tags=["Sections"])
    app.include_router(settings.router, prefix="/api/settings", tags=["Settings"])

    registry = HealthCheckRegistry()
    registry.register(StartupCheck())
    registry.register(StoreCheck(lambda: _context_for(app).store.counts()))
    app.include_router(create_health_router(version=__version__, registry=registry))

    # CORS (Allow Frontend)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=get_settings().cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    return app


configure_logging(get_settings().log_level)
app = create_app()
