"""
Pydantic schemas for article endpoints.

`ArticleDTO` is the client-facing payload and carries all input validation.
`Article` is the stored record (DTO fields plus the assigned `id`). The
conversion helpers at the bottom are the only way between the two.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

TITLE_MAX_LENGTH = 255
SOURCE_MAX_LENGTH = 255


def _require_text(value: str, *, label: str, max_length: int | None = None) -> str:
    if not value or not value.strip():
        raise ValueError(f"{label} is mandatory")
    if max_length is not None and len(value) > max_length:
        raise ValueError(f"{label} must be less than {max_length} characters")
    return value


class ArticleDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str
    content: str
    source: str
    published_at: datetime = Field(..., alias="publishedAt")

    @field_validator("title")
    @classmethod
    def _title(cls, value: str) -> str:
        return _require_text(value, label="Title", max_length=TITLE_MAX_LENGTH)

    @field_validator("content")
    @classmethod
    def _content(cls, value: str) -> str:
        return _require_text(value, label="Content")

    @field_validator("source")
    @classmethod
    def _source(cls, value: str) -> str:
        return _require_text(value, label="Source", max_length=SOURCE_MAX_LENGTH)

    @field_validator("published_at", mode="before")
    @classmethod
    def _published_at(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("Published date and time is mandatory")
        return value


class Article(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int | None = None
    title: str
    content: str
    source: str
    published_at: datetime = Field(..., alias="publishedAt")


def to_entity(dto: ArticleDTO) -> Article:
    # Identity is assigned by the database on insert.
    return Article(
        title=dto.title,
        content=dto.content,
        source=dto.source,
        published_at=dto.published_at,
    )


def to_dto(article: Article) -> ArticleDTO:
    return ArticleDTO(
        title=article.title,
        content=article.content,
        source=article.source,
        published_at=article.published_at,
    )


def from_row(row: dict) -> Article:
    return Article(
        id=int(row["id"]),
        title=str(row["title"]),
        content=str(row["content"]),
        source=str(row["source"]),
        published_at=row["published_at"],
    )
