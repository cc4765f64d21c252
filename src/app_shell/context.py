from __future__ import annotations

from dataclasses import dataclass

from src.adapters.memory.repos import (
    InMemoryBookmarkRepo,
    InMemorySectionRepo,
    InMemorySettingsRepo,
    InMemoryTabRepo,
)
from src.adapters.memory.store import InMemoryStore
from src.components.bookmarks import BookmarkService
from src.components.sections import SectionService
from src.components.settings import SettingsService
from src.components.tabs import TabService
from src.rules.models import Rules


@dataclass
class ServiceContext:
    """All services of one application, sharing a single store."""

    store: InMemoryStore
    rules: Rules
    tab_service: TabService
    section_service: SectionService
    bookmark_service: BookmarkService
    settings_service: SettingsService

    @classmethod
    def create(cls, rules: Rules, store: InMemoryStore | None = None) -> ServiceContext:
        if store is None:
            store = InMemoryStore()

        # Adapters
        tab_repo = InMemoryTabRepo(store)
        section_repo = InMemorySectionRepo(store)
        bookmark_repo = InMemoryBookmarkRepo(store)
        settings_repo = InMemorySettingsRepo(store)

        return cls(
            store=store,
            rules=rules,
            tab_service=TabService(
                repo=tab_repo,
                section_repo=section_repo,
                bookmark_repo=bookmark_repo,
                limits=rules.limits,
            ),
            section_service=SectionService(
                repo=section_repo, limits=rules.limits, defaults=rules.defaults
            ),
            bookmark_service=BookmarkService(repo=bookmark_repo, limits=rules.limits),
            settings_service=SettingsService(repo=settings_repo, defaults=rules.defaults),
        )
