"""
Dependency providers wiring the article router to its service.
"""

from __future__ import annotations

from fastapi import Depends

from core.db import Database
from core.dependencies import get_database

from .repository import ArticleRepository
from .service import ArticleService


def get_article_repository(database: Database = Depends(get_database)) -> ArticleRepository:
    return ArticleRepository(database)


def get_article_service(
    repository: ArticleRepository = Depends(get_article_repository),
) -> ArticleService:
    return ArticleService(repository)
