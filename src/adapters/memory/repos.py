from src.adapters.memory.store import InMemoryStore
from src.domain.entities import AppSettings, Bookmark, Section, Tab


class InMemoryTabRepo:
    def __init__(self, store: InMemoryStore):
        self.store = store

    def next_id(self) -> int:
        return self.store.next_id("tabs")

    def get_all(self) -> list[Tab]:
        with self.store.lock:
            return list(self.store.tabs.values())

    def get_by_id(self, tab_id: int) -> Tab | None:
        return self.store.tabs.get(tab_id)

    def save(self, tab: Tab) -> Tab:
        with self.store.lock:
            self.store.tabs[tab.id] = tab
        return tab

    def delete(self, tab_id: int) -> bool:
        with self.store.lock:
            return self.store.tabs.pop(tab_id, None) is not None


class InMemorySectionRepo:
    def __init__(self, store: InMemoryStore):
        self.store = store

    def next_id(self) -> int:
        return self.store.next_id("sections")

    def get_all(self) -> list[Section]:
        with self.store.lock:
            return list(self.store.sections.values())

    def list_by_tab(self, tab_id: int) -> list[Section]:
        with self.store.lock:
            return [s for s in self.store.sections.values() if s.tab_id == tab_id]

    def get_by_id(self, section_id: int) -> Section | None:
        return self.store.sections.get(section_id)

    def save(self, section: Section) -> Section:
        with self.store.lock:
            self.store.sections[section.id] = section
        return section

    def delete(self, section_id: int) -> bool:
        with self.store.lock:
            return self.store.sections.pop(section_id, None) is not None

    def delete_by_tab(self, tab_id: int) -> int:
        """Delete all sections of a tab. Returns count deleted."""
        with self.store.lock:
            ids = [s.id for s in self.store.sections.values() if s.tab_id == tab_id]
            for section_id in ids:
                del self.store.sections[section_id]
        return len(ids)


class InMemoryBookmarkRepo:
    def __init__(self, store: InMemoryStore):
        self.store = store

    def next_id(self) -> int:
        return self.store.next_id("bookmarks")

    def get_all(self) -> list[Bookmark]:
        with self.store.lock:
            return list(self.store.bookmarks.values())

    def list_by_tab(self, tab_id: int) -> list[Bookmark]:
        with self.store.lock:
            return [b for b in self.store.bookmarks.values() if b.tab_id == tab_id]

    def get_by_id(self, bookmark_id: int) -> Bookmark | None:
        return self.store.bookmarks.get(bookmark_id)

    def save(self, bookmark: Bookmark) -> Bookmark:
        with self.store.lock:
            self.store.bookmarks[bookmark.id] = bookmark
        return bookmark

    def delete(self, bookmark_id: int) -> bool:
        with self.store.lock:
            return self.store.bookmarks.pop(bookmark_id, None) is not None

    def delete_by_tab(self, tab_id: int) -> int:
        """Delete all bookmarks of a tab. Returns count deleted."""
        with self.store.lock:
            ids = [b.id for b in self.store.bookmarks.values() if b.tab_id == tab_id]
            for bookmark_id in ids:
                del self.store.bookmarks[bookmark_id]
        return len(ids)


class InMemorySettingsRepo:
    def __init__(self, store: InMemoryStore):
        self.store = store

    def get(self) -> AppSettings | None:
        return self.store.settings

    def save(self, settings: AppSettings) -> AppSettings:
        with self.store.lock:
            self.store.settings = settings
        return settings
