"""
Pydantic schemas for source endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, field_validator

NAME_MAX_LENGTH = 255
URL_MAX_LENGTH = 255


def _require_text(value: str, *, label: str, max_length: int) -> str:
    if not value or not value.strip():
        raise ValueError(f"{label} is mandatory")
    if len(value) > max_length:
        raise ValueError(f"{label} must be less than {max_length} characters")
    return value


class SourceDTO(BaseModel):
    name: str
    url: str

    @field_validator("name")
    @classmethod
    def _name(cls, value: str) -> str:
        return _require_text(value, label="Name", max_length=NAME_MAX_LENGTH)

    @field_validator("url")
    @classmethod
    def _url(cls, value: str) -> str:
        return _require_text(value, label="URL", max_length=URL_MAX_LENGTH)


class Source(BaseModel):
    id: int | None = None
    name: str
    url: str


class SourcePage(BaseModel):
    items: list[Source]
    page: int
    size: int
    total: int
    total_pages: int


def to_entity(dto: SourceDTO) -> Source:
    return Source(name=dto.name, url=dto.url)


def to_dto(source: Source) -> SourceDTO:
    return SourceDTO(name=source.name, url=source.url)


def from_row(row: dict) -> Source:
    return Source(id=int(row["id"]), name=str(row["name"]), url=str(row["url"]))
