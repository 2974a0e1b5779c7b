"""
Dependency providers wiring the source router to its service.
"""

from __future__ import annotations

from fastapi import Depends

from core.db import Database
from core.dependencies import get_database

from .repository import SourceRepository
from .service import SourceService


def get_source_repository(database: Database = Depends(get_database)) -> SourceRepository:
    return SourceRepository(database)


def get_source_service(
    repository: SourceRepository = Depends(get_source_repository),
) -> SourceService:
    return SourceService(repository)
