"""
Article persistence (raw SQL).
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from core.db import Database
from core.paging import PageRequest, order_by_clause

# API sort field -> column. Nothing outside this map is ever interpolated into SQL.
SORT_COLUMNS = {
    "id": "id",
    "title": "title",
    "content": "content",
    "source": "source",
    "publishedAt": "published_at",
}

_COLUMNS = "id, title, content, source, published_at"


def _utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class ArticleRepository:
    def __init__(self, database: Database) -> None:
        self._db = database

    async def insert(
        self,
        *,
        title: str,
        content: str,
        source: str,
        published_at: datetime,
    ) -> dict[str, Any]:
        row = await self._db.fetch_one(
            f"""
            INSERT INTO articles (title, content, source, published_at)
            VALUES ($1, $2, $3, $4)
            RETURNING {_COLUMNS}
            """,
            title,
            content,
            source,
            _utc(published_at),
        )
        if row is None:
            raise RuntimeError("Failed to insert article.")
        return row

    async def update(
        self,
        article_id: int,
        *,
        title: str,
        content: str,
        source: str,
        published_at: datetime,
    ) -> dict[str, Any] | None:
        """
        Overwrite every mutable field. Returns None when the id does not exist.
        """
        return await self._db.fetch_one(
            f"""
            UPDATE articles
            SET title = $2,
                content = $3,
                source = $4,
                published_at = $5
            WHERE id = $1
            RETURNING {_COLUMNS}
            """,
            article_id,
            title,
            content,
            source,
            _utc(published_at),
        )

    async def delete(self, article_id: int) -> dict[str, Any] | None:
        """
        Delete an article and return the row as it was, or None when absent.
        """
        return await self._db.fetch_one(
            f"""
            DELETE FROM articles
            WHERE id = $1
            RETURNING {_COLUMNS}
            """,
            article_id,
        )

    async def get(self, article_id: int) -> dict[str, Any] | None:
        return await self._db.fetch_one(
            f"""
            SELECT {_COLUMNS}
            FROM articles
            WHERE id = $1
            """,
            article_id,
        )

    async def list(self, request: PageRequest) -> list[dict[str, Any]]:
        return await self._db.fetch_all(
            f"""
            SELECT {_COLUMNS}
            FROM articles
            ORDER BY {order_by_clause(request.sort, SORT_COLUMNS)}
            LIMIT $1
            OFFSET $2
            """,
            request.size,
            request.offset,
        )

    async def latest(self, *, limit: int) -> list[dict[str, Any]]:
        return await self._db.fetch_all(
            f"""
            SELECT {_COLUMNS}
            FROM articles
            ORDER BY published_at DESC, id DESC
            LIMIT $1
            """,
            limit,
        )
