"""Journal entry API schemas."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from zenly.schemas.mood import MoodKind


def _clean_tags(value: Any) -> Any:
    if not isinstance(value, list):
        return value
    return [tag.strip() for tag in value if isinstance(tag, str) and tag.strip()]


class CreateJournalRequest(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(min_length=1, max_length=100)
    content: str = Field(min_length=1)
    mood: MoodKind | None = None
    tags: list[str] = Field(default_factory=list)
    is_private: bool = True

    @field_validator("tags", mode="before")
    @classmethod
    def clean_tags(cls, value: Any) -> Any:
        return _clean_tags(value)


class UpdateJournalRequest(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    title: str | None = Field(default=None, min_length=1, max_length=100)
    content: str | None = Field(default=None, min_length=1)
    mood: MoodKind | None = None
    tags: list[str] | None = None
    is_private: bool | None = None

    @field_validator("tags", mode="before")
    @classmethod
    def clean_tags(cls, value: Any) -> Any:
        return _clean_tags(value)


class JournalEntry(BaseModel):
    id: str
    title: str
    content: str
    mood: MoodKind | None = None
    tags: list[str]
    is_private: bool
    created_at: datetime


class JournalPage(BaseModel):
    count: int
    total: int
    total_pages: int
    current_page: int
    data: list[JournalEntry]
