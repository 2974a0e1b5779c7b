from __future__ import annotations

import pytest

from articles.repository import SORT_COLUMNS
from core.errors import ValidationFailed
from core.paging import DEFAULT_SORT, Page, PageRequest, SortOrder, order_by_clause, parse_sort


@pytest.mark.parametrize("tokens", [None, [], [""], ["  "]])
def test_parse_sort_defaults_to_id_ascending(tokens):
    assert parse_sort(tokens, allowed=SORT_COLUMNS) == DEFAULT_SORT


def test_parse_sort_single_token():
    assert parse_sort(["title,desc"], allowed=SORT_COLUMNS) == (SortOrder("title", "desc"),)


def test_parse_sort_keeps_input_order_for_multiple_tokens():
    orders = parse_sort(["publishedAt,desc", "title,asc", "id,DESC"], allowed=SORT_COLUMNS)
    assert orders == (
        SortOrder("publishedAt", "desc"),
        SortOrder("title", "asc"),
        SortOrder("id", "desc"),
    )


def test_parse_sort_split_form():
    # `?sort=title&sort=desc` arrives as two bare tokens.
    assert parse_sort(["title", "desc"], allowed=SORT_COLUMNS) == (SortOrder("title", "desc"),)


def test_parse_sort_lone_field_sorts_ascending():
    assert parse_sort(["source"], allowed=SORT_COLUMNS) == (SortOrder("source", "asc"),)
    assert parse_sort(["source,"], allowed=SORT_COLUMNS) == (SortOrder("source", "asc"),)


def test_parse_sort_rejects_unknown_direction():
    with pytest.raises(ValidationFailed) as excinfo:
        parse_sort(["title,sideways"], allowed=SORT_COLUMNS)
    assert excinfo.value.errors[0]["loc"] == ["query", "sort"]
    assert "sideways" in excinfo.value.errors[0]["msg"]


def test_parse_sort_rejects_unknown_field():
    with pytest.raises(ValidationFailed):
        parse_sort(["password,asc"], allowed=SORT_COLUMNS)


def test_order_by_clause_maps_fields_to_columns():
    orders = (SortOrder("publishedAt", "desc"), SortOrder("title", "asc"))
    assert order_by_clause(orders, SORT_COLUMNS) == "published_at DESC, title ASC, id ASC"


def test_order_by_clause_does_not_duplicate_id():
    assert order_by_clause((SortOrder("id", "desc"),), SORT_COLUMNS) == "id DESC"
    assert order_by_clause((), SORT_COLUMNS) == "id ASC"


def test_page_request_offset_and_bounds():
    assert PageRequest(page=3, size=20).offset == 60
    with pytest.raises(ValidationFailed):
        PageRequest(page=-1, size=10)
    with pytest.raises(ValidationFailed):
        PageRequest(page=0, size=0)


def test_page_total_pages():
    assert Page(items=[], page=0, size=10, total=0).total_pages == 0
    assert Page(items=[], page=0, size=10, total=10).total_pages == 1
    assert Page(items=[], page=0, size=10, total=11).total_pages == 2
