from pydantic import BaseModel, Field

from src.domain.entities import ThemeType


class ProjectRules(BaseModel):
    slug: str
    rules_version: str

class LimitsRules(BaseModel):
    name_max_length: int = Field(100, gt=0)
    title_max_length: int = Field(200, gt=0)
    url_max_length: int = Field(2048, gt=0)
    color_pattern: str = r"^#(?:[0-9a-fA-F]{3}){1,2}$"
    allowed_url_schemes: list[str] = ["http", "https"]

class DefaultsRules(BaseModel):
    section_color: str = "#FF6B35"
    theme: ThemeType = "system"
    auto_run: bool = False

class SeedSection(BaseModel):
    name: str
    color: str

class SeedBookmark(BaseModel):
    title: str
    url: str
    section: str
    favicon: str | None = None

class SeedTab(BaseModel):
    name: str
    sections: list[SeedSection] = []
    bookmarks: list[SeedBookmark] = []

class SeedRules(BaseModel):
    enabled: bool = False
    tabs: list[SeedTab] = []

class Rules(BaseModel):
    project: ProjectRules
    limits: LimitsRules = LimitsRules()
    defaults: DefaultsRules = DefaultsRules()
    seed: SeedRules = SeedRules()
