from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from src.domain.entities import ThemeType


class RequestModel(BaseModel):
    """Write payloads: camelCase keys, strict types, unknown keys dropped."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        strict=True,
        extra="ignore",
    )


class ErrorItem(BaseModel):
    code: str
    message: str
    field: str | None = None


class ErrorResponse(BaseModel):
    message: str
    errors: list[ErrorItem] | None = None


# --- Tabs ---
class TabCreateRequest(RequestModel):
    name: str
    order: int | None = None
    background_image: str | None = None
    auto_switch: bool | None = False


class TabUpdateRequest(RequestModel):
    name: str | None = None
    order: int | None = None
    background_image: str | None = None
    auto_switch: bool | None = None


# --- Sections ---
class SectionCreateRequest(RequestModel):
    tab_id: int
    name: str
    color: str | None = None
    order: int | None = None


class SectionUpdateRequest(RequestModel):
    tab_id: int | None = None
    name: str | None = None
    color: str | None = None
    order: int | None = None


# --- Bookmarks ---
class BookmarkCreateRequest(RequestModel):
    tab_id: int
    url: str
    section_name: str
    title: str | None = None
    favicon: str | None = None
    order: int | None = None


class BookmarkUpdateRequest(RequestModel):
    tab_id: int | None = None
    url: str | None = None
    title: str | None = None
    favicon: str | None = None
    section_name: str | None = None
    order: int | None = None


# --- Settings ---
class SettingsUpdateRequest(RequestModel):
    theme: ThemeType | None = None
    auto_run: bool | None = None
