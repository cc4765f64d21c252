"""
Seed a fresh store with the starter tabs, sections and bookmarks.

Seeding goes through the services, so seeded records get ids 1..n and are
validated like API input.
"""

from __future__ import annotations

import logging

from src.app_shell.context import ServiceContext
from src.rules.models import SeedRules

logger = logging.getLogger(__name__)


class SeedError(ValueError):
    """A seed entry failed validation."""


def seed_store(ctx: ServiceContext, seed: SeedRules | None = None) -> dict[str, int]:
    """
    Populate the store from the seed rules.

    Skipped when the store already holds tabs. Returns record counts created.
    """
    seed = seed or ctx.rules.seed
    created = {"tabs": 0, "sections": 0, "bookmarks": 0}

    if ctx.store.tabs:
        logger.info("Store already populated, skipping seed")
        return created

    for position, seed_tab in enumerate(seed.tabs, start=1):
        tab, errors = ctx.tab_service.create(name=seed_tab.name, order=position)
        if tab is None:
            raise SeedError(f"Invalid seed tab {seed_tab.name!r}: {errors}")
        created["tabs"] += 1

        for order, seed_section in enumerate(seed_tab.sections, start=1):
            section, errors = ctx.section_service.create(
                tab_id=tab.id,
                name=seed_section.name,
                color=seed_section.color,
                order=order,
            )
            if section is None:
                raise SeedError(f"Invalid seed section {seed_section.name!r}: {errors}")
            created["sections"] += 1

        for order, seed_bookmark in enumerate(seed_tab.bookmarks, start=1):
            bookmark, errors = ctx.bookmark_service.create(
                tab_id=tab.id,
                url=seed_bookmark.url,
                section_name=seed_bookmark.section,
                title=seed_bookmark.title,
                favicon=seed_bookmark.favicon,
                order=order,
            )
            if bookmark is None:
                raise SeedError(f"Invalid seed bookmark {seed_bookmark.url!r}: {errors}")
            created["bookmarks"] += 1

    logger.info(
        "Seeded %d tabs, %d sections, %d bookmarks",
        created["tabs"],
        created["sections"],
        created["bookmarks"],
    )
    return created
