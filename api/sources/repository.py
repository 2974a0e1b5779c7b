"""
Source persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core.db import Database
from core.paging import PageRequest, order_by_clause

SORT_COLUMNS = {
    "id": "id",
    "name": "name",
    "url": "url",
}

_COLUMNS = "id, name, url"


class SourceRepository:
    def __init__(self, database: Database) -> None:
        self._db = database

    async def insert(self, *, name: str, url: str) -> dict[str, Any]:
        row = await self._db.fetch_one(
            f"""
            INSERT INTO sources (name, url)
            VALUES ($1, $2)
            RETURNING {_COLUMNS}
            """,
            name,
            url,
        )
        if row is None:
            raise RuntimeError("Failed to insert source.")
        return row

    async def update(self, source_id: int, *, name: str, url: str) -> dict[str, Any] | None:
        return await self._db.fetch_one(
            f"""
            UPDATE sources
            SET name = $2,
                url = $3
            WHERE id = $1
            RETURNING {_COLUMNS}
            """,
            source_id,
            name,
            url,
        )

    async def delete(self, source_id: int) -> dict[str, Any] | None:
        return await self._db.fetch_one(
            f"DELETE FROM sources WHERE id = $1 RETURNING {_COLUMNS}",
            source_id,
        )

    async def get(self, source_id: int) -> dict[str, Any] | None:
        return await self._db.fetch_one(
            f"SELECT {_COLUMNS} FROM sources WHERE id = $1",
            source_id,
        )

    async def list_all(self) -> list[dict[str, Any]]:
        return await self._db.fetch_all(f"SELECT {_COLUMNS} FROM sources ORDER BY id ASC")

    async def list(self, request: PageRequest) -> list[dict[str, Any]]:
        return await self._db.fetch_all(
            f"""
            SELECT {_COLUMNS}
            FROM sources
            ORDER BY {order_by_clause(request.sort, SORT_COLUMNS)}
            LIMIT $1
            OFFSET $2
            """,
            request.size,
            request.offset,
        )

    async def count(self) -> int:
        value = await self._db.fetch_value("SELECT count(*) FROM sources")
        return int(value or 0)
