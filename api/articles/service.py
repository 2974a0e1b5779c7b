"""
Article business logic.

Every write validates its payload before touching the repository, so a
rejected payload never reaches the database.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

import pydantic

from core import settings
from core.db import fits_bigint
from core.errors import NotFoundError, ValidationFailed
from core.paging import PageRequest, parse_sort

from . import schemas
from .repository import SORT_COLUMNS, ArticleRepository

logger = logging.getLogger(__name__)

ENTITY = "Article"


def validate_payload(payload: schemas.ArticleDTO | Mapping[str, Any]) -> schemas.ArticleDTO:
    if isinstance(payload, schemas.ArticleDTO):
        return payload
    try:
        return schemas.ArticleDTO.model_validate(payload)
    except pydantic.ValidationError as exc:
        raise ValidationFailed.from_pydantic(exc) from exc


class ArticleService:
    def __init__(self, repository: ArticleRepository) -> None:
        self._repository = repository

    async def create_article(self, payload: schemas.ArticleDTO | Mapping[str, Any]) -> schemas.Article:
        dto = validate_payload(payload)
        entity = schemas.to_entity(dto)
        row = await self._repository.insert(
            title=entity.title,
            content=entity.content,
            source=entity.source,
            published_at=entity.published_at,
        )
        article = schemas.from_row(row)
        logger.info("article_created id=%s", article.id)
        return article

    async def update_article(
        self,
        article_id: int,
        payload: schemas.ArticleDTO | Mapping[str, Any],
    ) -> schemas.Article:
        dto = validate_payload(payload)
        if not fits_bigint(article_id):
            raise NotFoundError(ENTITY, article_id)
        row = await self._repository.update(
            article_id,
            title=dto.title,
            content=dto.content,
            source=dto.source,
            published_at=dto.published_at,
        )
        if row is None:
            raise NotFoundError(ENTITY, article_id)
        logger.info("article_updated id=%s", article_id)
        return schemas.from_row(row)

    async def delete_article(self, article_id: int) -> schemas.Article | None:
        if not fits_bigint(article_id):
            return None
        row = await self._repository.delete(article_id)
        if row is None:
            return None
        logger.info("article_deleted id=%s", article_id)
        return schemas.from_row(row)

    async def get_article_by_id(self, article_id: int) -> schemas.Article:
        if not fits_bigint(article_id):
            raise NotFoundError(ENTITY, article_id)
        row = await self._repository.get(article_id)
        if row is None:
            raise NotFoundError(ENTITY, article_id)
        return schemas.from_row(row)

    async def get_all_articles(
        self,
        page: int = 0,
        size: int = 10,
        sort: Sequence[str] | None = None,
    ) -> list[schemas.Article]:
        request = PageRequest(page=page, size=size, sort=parse_sort(sort, allowed=SORT_COLUMNS))
        rows = await self._repository.list(request)
        return [schemas.from_row(row) for row in rows]

    async def get_latest_articles(self, limit: int | None = None) -> list[schemas.ArticleDTO]:
        rows = await self._repository.latest(limit=limit or settings.latest_articles_limit())
        return [schemas.to_dto(schemas.from_row(row)) for row in rows]
