"""Typed representations of frontpress content items."""

from __future__ import annotations

import io
from datetime import date as date_type
from datetime import datetime
from typing import Any, Optional

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field, field_validator


class ContentMeta(BaseModel):
    """Validated front-matter metadata for a content item."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    title: str = Field(description="Display title.")
    date: AwareDatetime = Field(description="Publication timestamp with explicit UTC offset.")
    draft: bool = Field(default=False, description="Whether the item is still unpublished.")
    summary: Optional[str] = Field(default=None, description="Short summary.")
    slug: str = Field(default="", description="URL-friendly identifier.")
    tags: list[str] = Field(default_factory=list, description="Free-form tags.")
    params: dict[str, Any] = Field(
        default_factory=dict,
        description="Remaining front-matter keys, passed through for the renderer.",
    )

    @field_validator("title")
    def _require_title_text(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("title cannot be empty")
        return value

    @field_validator("date", mode="before")
    def _parse_timestamp(cls, value: Any) -> Any:
        if isinstance(value, str):
            try:
                return datetime.fromisoformat(value.strip())
            except ValueError:
                raise ValueError(f"'{value}' is not an ISO 8601 date-time") from None
        # A bare date carries no time or offset; it does not name a single instant.
        if isinstance(value, date_type) and not isinstance(value, datetime):
            raise ValueError("a calendar date without time and UTC offset is ambiguous")
        return value

    @field_validator("slug")
    def _normalize_slug(cls, value: str) -> str:
        return value.strip()


class ContentItem(BaseModel):
    """Full representation of one parsed content file."""

    model_config = ConfigDict(frozen=True)

    meta: ContentMeta = Field(description="Front-matter metadata.")
    body: str = Field(default="", description="Raw markdown body, verbatim.")
    source_path: Optional[str] = Field(default=None, description="Path to the source file.")

    @property
    def title(self) -> str:
        return self.meta.title

    @property
    def date(self) -> datetime:
        return self.meta.date

    @property
    def draft(self) -> bool:
        return self.meta.draft

    @property
    def summary(self) -> Optional[str]:
        return self.meta.summary

    @property
    def slug(self) -> str:
        return self.meta.slug

    @property
    def body_lines(self) -> tuple[str, ...]:
        return tuple(line.rstrip("\r\n") for line in io.StringIO(self.body, newline="").readlines())
