"""
Source API endpoints.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Query, Response, status

from core import settings

from . import schemas
from .dependencies import get_source_service
from .service import SourceService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sources")


@router.post("/create", status_code=status.HTTP_201_CREATED, response_model=schemas.Source)
async def create_source(
    payload: schemas.SourceDTO,
    service: SourceService = Depends(get_source_service),
) -> schemas.Source:
    logger.info("create_source name=%r", payload.name)
    return await service.create_source(payload)


@router.put("/update/{source_id}", response_model=schemas.Source)
async def update_source(
    source_id: int,
    payload: schemas.SourceDTO,
    service: SourceService = Depends(get_source_service),
) -> schemas.Source:
    logger.info("update_source id=%s", source_id)
    return await service.update_source(source_id, payload)


@router.delete(
    "/delete/{source_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def delete_source(
    source_id: int,
    service: SourceService = Depends(get_source_service),
) -> Response:
    logger.info("delete_source id=%s", source_id)
    deleted = await service.delete_source(source_id)
    if deleted is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/fetch/{source_id}", response_model=schemas.Source)
async def get_source_by_id(
    source_id: int,
    service: SourceService = Depends(get_source_service),
) -> schemas.Source:
    logger.info("fetch_source id=%s", source_id)
    return await service.get_source_by_id(source_id)


@router.get("/fetchAll", response_model=list[schemas.Source])
async def get_all_sources(
    service: SourceService = Depends(get_source_service),
) -> list[schemas.Source]:
    logger.info("fetch_all_sources")
    return await service.get_all_sources()


@router.get("/page", response_model=schemas.SourcePage)
async def get_sources(
    page: int = Query(0, ge=0),
    size: int = Query(10, ge=1),
    sort: list[str] = Query(default=["id,asc"]),
    service: SourceService = Depends(get_source_service),
) -> schemas.SourcePage:
    size = min(size, settings.max_page_size())
    logger.info("fetch_sources_page page=%s size=%s sort=%s", page, size, sort)
    result = await service.get_sources(page=page, size=size, sort=sort)
    return schemas.SourcePage(
        items=result.items,
        page=result.page,
        size=result.size,
        total=result.total,
        total_pages=result.total_pages,
    )
