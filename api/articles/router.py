"""
Article API endpoints.

Handlers stay thin: decode, call the service, pick the status code.
`NotFoundError` / `ValidationFailed` / unexpected errors are translated by the
handlers installed in `core.errors`.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Query, Response, status

from core import settings

from . import schemas
from .dependencies import get_article_service
from .service import ArticleService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/articles")


@router.post("/create", status_code=status.HTTP_201_CREATED, response_model=schemas.Article)
async def create_article(
    payload: schemas.ArticleDTO,
    service: ArticleService = Depends(get_article_service),
) -> schemas.Article:
    logger.info("create_article title=%r", payload.title)
    return await service.create_article(payload)


@router.put("/update/{article_id}", response_model=schemas.Article)
async def update_article(
    article_id: int,
    payload: schemas.ArticleDTO,
    service: ArticleService = Depends(get_article_service),
) -> schemas.Article:
    logger.info("update_article id=%s", article_id)
    return await service.update_article(article_id, payload)


@router.delete(
    "/delete/{article_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def delete_article(
    article_id: int,
    service: ArticleService = Depends(get_article_service),
) -> Response:
    logger.info("delete_article id=%s", article_id)
    deleted = await service.delete_article(article_id)
    if deleted is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/fetch/{article_id}", response_model=schemas.Article)
async def get_article_by_id(
    article_id: int,
    service: ArticleService = Depends(get_article_service),
) -> schemas.Article:
    logger.info("fetch_article id=%s", article_id)
    return await service.get_article_by_id(article_id)


@router.get("/fetchAll", response_model=list[schemas.Article])
async def get_all_articles(
    page: int = Query(0, ge=0),
    size: int = Query(10, ge=1),
    sort: list[str] = Query(default=["id,asc"]),
    service: ArticleService = Depends(get_article_service),
) -> list[schemas.Article]:
    """
    Page through articles, e.g. `?page=0&size=10&sort=publishedAt,desc&sort=id,asc`.
    """
    size = min(size, settings.max_page_size())
    logger.info("fetch_all_articles page=%s size=%s sort=%s", page, size, sort)
    return await service.get_all_articles(page=page, size=size, sort=sort)


@router.get("/latest", response_model=list[schemas.ArticleDTO])
async def get_latest_articles(
    limit: int | None = Query(default=None, ge=1, le=100),
    service: ArticleService = Depends(get_article_service),
) -> list[schemas.ArticleDTO]:
    logger.info("fetch_latest_articles limit=%s", limit)
    return await service.get_latest_articles(limit)
