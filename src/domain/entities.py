from typing import Literal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

# --- Enums / Literals ---
ThemeType = Literal["light", "dark", "system"]

SETTINGS_ID = 1


class Record(BaseModel):
    """Base for stored records; serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# --- Tabs ---

class Tab(Record):
    id: int
    name: str
    order: int
    background_image: str | None = None
    auto_switch: bool | None = False


# --- Sections ---

class Section(Record):
    id: int
    tab_id: int
    name: str
    color: str
    order: int


# --- Bookmarks ---

class Bookmark(Record):
    id: int
    tab_id: int
    url: str
    title: str
    favicon: str | None = None
    # Linked to Section.name, not Section.id
    section_name: str
    order: int


# --- Settings ---

class AppSettings(Record):
    id: int = SETTINGS_ID
    theme: ThemeType = "system"
    auto_run: bool = False
