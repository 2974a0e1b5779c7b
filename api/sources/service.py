"""
Source business logic.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

import pydantic

from core.db import fits_bigint
from core.errors import NotFoundError, ValidationFailed
from core.paging import Page, PageRequest, parse_sort

from . import schemas
from .repository import SORT_COLUMNS, SourceRepository

logger = logging.getLogger(__name__)

ENTITY = "Source"


def validate_payload(payload: schemas.SourceDTO | Mapping[str, Any]) -> schemas.SourceDTO:
    if isinstance(payload, schemas.SourceDTO):
        return payload
    try:
        return schemas.SourceDTO.model_validate(payload)
    except pydantic.ValidationError as exc:
        raise ValidationFailed.from_pydantic(exc) from exc


class SourceService:
    def __init__(self, repository: SourceRepository) -> None:
        self._repository = repository

    async def create_source(self, payload: schemas.SourceDTO | Mapping[str, Any]) -> schemas.Source:
        entity = schemas.to_entity(validate_payload(payload))
        row = await self._repository.insert(name=entity.name, url=entity.url)
        source = schemas.from_row(row)
        logger.info("source_created id=%s", source.id)
        return source

    async def update_source(
        self,
        source_id: int,
        payload: schemas.SourceDTO | Mapping[str, Any],
    ) -> schemas.Source:
        dto = validate_payload(payload)
        if not fits_bigint(source_id):
            raise NotFoundError(ENTITY, source_id)
        row = await self._repository.update(source_id, name=dto.name, url=dto.url)
        if row is None:
            raise NotFoundError(ENTITY, source_id)
        logger.info("source_updated id=%s", source_id)
        return schemas.from_row(row)

    async def delete_source(self, source_id: int) -> schemas.Source | None:
        if not fits_bigint(source_id):
            return None
        row = await self._repository.delete(source_id)
        if row is None:
            return None
        logger.info("source_deleted id=%s", source_id)
        return schemas.from_row(row)

    async def get_source_by_id(self, source_id: int) -> schemas.Source:
        if not fits_bigint(source_id):
            raise NotFoundError(ENTITY, source_id)
        row = await self._repository.get(source_id)
        if row is None:
            raise NotFoundError(ENTITY, source_id)
        return schemas.from_row(row)

    async def get_all_sources(self) -> list[schemas.Source]:
        return [schemas.from_row(row) for row in await self._repository.list_all()]

    async def get_sources(
        self,
        page: int = 0,
        size: int = 10,
        sort: Sequence[str] | None = None,
    ) -> Page[schemas.Source]:
        request = PageRequest(page=page, size=size, sort=parse_sort(sort, allowed=SORT_COLUMNS))
        rows = await self._repository.list(request)
        total = await self._repository.count()
        return Page(
            items=[schemas.from_row(row) for row in rows],
            page=request.page,
            size=request.size,
            total=total,
        )
