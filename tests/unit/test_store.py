"""
Tests for the in-memory store and its repositories.
"""

from __future__ import annotations

import sys
import threading

from src.adapters.memory.repos import (
    InMemoryBookmarkRepo,
    InMemorySectionRepo,
    InMemorySettingsRepo,
    InMemoryTabRepo,
)
from src.adapters.memory.store import InMemoryStore
from src.app_shell.context import ServiceContext
from src.domain.entities import AppSettings, Bookmark, Section, Tab
from src.rules.models import DefaultsRules, Rules


class TestCounters:
    def test_tables_count_independently(self) -> None:
        store = InMemoryStore()

        assert store.next_id("tabs") == 1
        assert store.next_id("tabs") == 2
        assert store.next_id("sections") == 1
        assert store.next_id("bookmarks") == 1

    def test_concurrent_allocation_is_unique(self) -> None:
        store = InMemoryStore()
        ids: list[int] = []
        lock = threading.Lock()

        def allocate() -> None:
            for _ in range(200):
                value = store.next_id("bookmarks")
                with lock:
                    ids.append(value)

        threads = [threading.Thread(target=allocate) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert sorted(ids) == list(range(1, 1601))

    def test_clear_resets(self) -> None:
        store = InMemoryStore()
        repo = InMemoryTabRepo(store)
        repo.save(Tab(id=repo.next_id(), name="T", order=1))

        store.clear()

        assert store.counts() == {"tabs": 0, "sections": 0, "bookmarks": 0}
        assert store.next_id("tabs") == 1

    def test_clear_drops_settings(self) -> None:
        store = InMemoryStore(settings=AppSettings(theme="dark"))

        store.clear()

        assert store.settings is None


def _bookmark(bookmark_id: int, tab_id: int) -> Bookmark:
    return Bookmark(
        id=bookmark_id,
        tab_id=tab_id,
        url="https://a.com",
        title="A",
        section_name="S",
        order=1,
    )


class TestConcurrentAccess:
    def test_listing_while_writing(self) -> None:
        store = InMemoryStore()
        bookmarks = InMemoryBookmarkRepo(store)
        sections = InMemorySectionRepo(store)
        errors: list[Exception] = []
        done = threading.Event()

        def write() -> None:
            try:
                for _ in range(3000):
                    saved = bookmarks.save(_bookmark(bookmarks.next_id(), tab_id=1))
                    sections.save(
                        Section(id=sections.next_id(), tab_id=1, name="S", color="#fff", order=1)
                    )
                    bookmarks.delete(saved.id)
            except Exception as e:
                errors.append(e)
            finally:
                done.set()

        def read() -> None:
            try:
                while not done.is_set():
                    bookmarks.list_by_tab(1)
                    bookmarks.delete_by_tab(2)
                    sections.list_by_tab(1)
                    store.counts()
            except Exception as e:
                errors.append(e)

        previous = sys.getswitchinterval()
        sys.setswitchinterval(1e-6)
        try:
            threads = [threading.Thread(target=write)]
            threads += [threading.Thread(target=read) for _ in range(3)]
            for t in threads:
                t.start()
            for t in threads:
                t.join()
        finally:
            sys.setswitchinterval(previous)

        assert errors == []
        assert store.counts() == {"tabs": 0, "sections": 3000, "bookmarks": 0}


class TestRepos:
    def test_tab_repo(self) -> None:
        repo = InMemoryTabRepo(InMemoryStore())
        tab = repo.save(Tab(id=repo.next_id(), name="T", order=1))

        assert repo.get_by_id(tab.id) == tab
        assert repo.get_all() == [tab]
        assert repo.delete(tab.id) is True
        assert repo.delete(tab.id) is False
        assert repo.get_by_id(tab.id) is None

    def test_delete_by_tab(self) -> None:
        store = InMemoryStore()
        sections = InMemorySectionRepo(store)
        bookmarks = InMemoryBookmarkRepo(store)
        for tab_id in (1, 1, 2):
            sections.save(
                Section(id=sections.next_id(), tab_id=tab_id, name="S", color="#fff", order=1)
            )
            bookmarks.save(
                Bookmark(
                    id=bookmarks.next_id(),
                    tab_id=tab_id,
                    url="https://a.com",
                    title="A",
                    section_name="S",
                    order=1,
                )
            )

        assert sections.delete_by_tab(1) == 2
        assert bookmarks.delete_by_tab(1) == 2
        assert [s.tab_id for s in sections.get_all()] == [2]
        assert [b.tab_id for b in bookmarks.list_by_tab(2)] == [2]
        assert bookmarks.delete_by_tab(99) == 0

    def test_settings_repo(self) -> None:
        store = InMemoryStore(settings=AppSettings(theme="dark"))
        repo = InMemorySettingsRepo(store)

        assert repo.get().theme == "dark"

        repo.save(AppSettings(theme="light", auto_run=True))

        assert store.settings.auto_run is True

    def test_settings_repo_starts_empty(self) -> None:
        assert InMemorySettingsRepo(InMemoryStore()).get() is None

    def test_service_falls_back_to_rules_defaults(self, rules: Rules) -> None:
        custom = rules.model_copy(update={"defaults": DefaultsRules(theme="dark", auto_run=True)})
        ctx = ServiceContext.create(custom)

        settings = ctx.settings_service.get()

        assert (settings.id, settings.theme, settings.auto_run) == (1, "dark", True)
        assert ctx.store.settings is None
