import logging
import os
from functools import lru_cache
from pathlib import Path

from fastapi import Depends

from src.app_shell.bootstrap import seed_store
from src.app_shell.context import ServiceContext
from src.components.bookmarks import BookmarkService
from src.components.sections import SectionService
from src.components.settings import SettingsService
from src.components.tabs import TabService
from src.rules.loader import load_rules
from src.rules.models import Rules

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parents[2]

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _env_flag(name: str) -> bool | None:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return None
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"{name} must be one of {sorted(_TRUE | _FALSE)}, got {raw!r}")


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.rules_path = Path(
            os.environ.get("BOOKMARK_TABS_RULES_PATH", str(PROJECT_ROOT / "organizer.yaml"))
        )
        self.seed_override = _env_flag("BOOKMARK_TABS_SEED")
        self.log_level = os.environ.get("BOOKMARK_TABS_LOG_LEVEL", "INFO").upper()
        origins = os.environ.get(
            "BOOKMARK_TABS_CORS_ORIGINS", "http://localhost:5173,http://127.0.0.1:5173"
        )
        self.cors_origins = [o.strip() for o in origins.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Rules ---
@lru_cache
def get_rules() -> Rules:
    return load_rules(get_settings().rules_path)


# --- Service context (one store per process) ---
_context_instance: ServiceContext | None = None


def build_context(rules: Rules, seed: bool | None = None) -> ServiceContext:
    """Create a context over a fresh store, seeded unless disabled."""
    ctx = ServiceContext.create(rules)
    if rules.seed.enabled if seed is None else seed:
        seed_store(ctx)
    return ctx


def get_context() -> ServiceContext:
    """Get service context singleton."""
    global _context_instance
    if _context_instance is None:
        _context_instance = build_context(get_rules(), get_settings().seed_override)
        logger.info("Store initialized: %s", _context_instance.store.counts())
    return _context_instance


def reset_context() -> None:
    """Drop the context so the next request starts from a fresh store (for testing)."""
    global _context_instance
    _context_instance = None


# --- Component Services ---
def get_tab_service(ctx: ServiceContext = Depends(get_context)) -> TabService:
    return ctx.tab_service


def get_section_service(ctx: ServiceContext = Depends(get_context)) -> SectionService:
    return ctx.section_service


def get_bookmark_service(ctx: ServiceContext = Depends(get_context)) -> BookmarkService:
    return ctx.bookmark_service


def get_settings_service(ctx: ServiceContext = Depends(get_context)) -> SettingsService:
    return ctx.settings_service
