from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from articles.dependencies import get_article_repository
from main import app
from sources.dependencies import get_source_repository

from tests.fakes import InMemoryArticleRepository, InMemorySourceRepository


@pytest.fixture
def article_repository() -> InMemoryArticleRepository:
    return InMemoryArticleRepository()


@pytest.fixture
def source_repository() -> InMemorySourceRepository:
    return InMemorySourceRepository()


@pytest.fixture
def client(article_repository, source_repository):
    # No lifespan: the DB pool is never opened, repositories are swapped for fakes.
    app.dependency_overrides[get_article_repository] = lambda: article_repository
    app.dependency_overrides[get_source_repository] = lambda: source_repository
    try:
        yield TestClient(app, raise_server_exceptions=False)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def article_payload() -> dict:
    return {
        "title": "Rates held steady",
        "content": "The central bank left rates unchanged on Tuesday.",
        "source": "Reuters",
        "publishedAt": "2024-05-01T10:00:00Z",
    }
