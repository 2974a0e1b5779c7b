from __future__ import annotations

from datetime import datetime, timezone

from articles.repository import ArticleRepository
from core.paging import PageRequest, SortOrder
from sources.repository import SourceRepository


class RecordingDatabase:
    """Captures SQL and arguments instead of talking to Postgres."""

    def __init__(self, row=None, rows=None, value=None) -> None:
        self.row = row
        self.rows = rows or []
        self.value = value
        self.statements: list[tuple[str, tuple]] = []

    async def fetch_one(self, sql, *args):
        self.statements.append((sql, args))
        return self.row

    async def fetch_all(self, sql, *args):
        self.statements.append((sql, args))
        return self.rows

    async def fetch_value(self, sql, *args):
        self.statements.append((sql, args))
        return self.value


ROW = {
    "id": 1,
    "title": "T",
    "content": "C",
    "source": "S",
    "published_at": datetime(2024, 5, 1, tzinfo=timezone.utc),
}


async def test_insert_treats_naive_timestamps_as_utc():
    database = RecordingDatabase(row=ROW)
    repository = ArticleRepository(database)

    await repository.insert(title="T", content="C", source="S", published_at=datetime(2024, 5, 1, 10))

    sql, args = database.statements[0]
    assert "INSERT INTO articles" in sql
    assert args[3] == datetime(2024, 5, 1, 10, tzinfo=timezone.utc)


async def test_update_returns_none_for_missing_row():
    repository = ArticleRepository(RecordingDatabase(row=None))
    result = await repository.update(
        5,
        title="T",
        content="C",
        source="S",
        published_at=datetime(2024, 5, 1, tzinfo=timezone.utc),
    )
    assert result is None


async def test_list_renders_whitelisted_order_and_paging_args():
    database = RecordingDatabase(rows=[ROW])
    repository = ArticleRepository(database)

    request = PageRequest(page=2, size=5, sort=(SortOrder("publishedAt", "desc"),))
    assert await repository.list(request) == [ROW]

    sql, args = database.statements[0]
    assert "ORDER BY published_at DESC, id ASC" in sql
    assert args == (5, 10)


async def test_source_count_defaults_to_zero():
    repository = SourceRepository(RecordingDatabase(value=None))
    assert await repository.count() == 0
