from __future__ import annotations

from datetime import datetime, timezone

import pydantic
import pytest

from articles import schemas


def _payload(**overrides):
    payload = {
        "title": "Rates held steady",
        "content": "Body",
        "source": "Reuters",
        "publishedAt": "2024-05-01T10:00:00",
    }
    payload.update(overrides)
    return payload


def test_valid_payload_parses_camel_case_timestamp():
    dto = schemas.ArticleDTO.model_validate(_payload())
    assert dto.published_at == datetime(2024, 5, 1, 10, 0, 0)


@pytest.mark.parametrize("field", ["title", "content", "source"])
@pytest.mark.parametrize("value", ["", "   ", None])
def test_blank_or_null_text_is_rejected(field, value):
    with pytest.raises(pydantic.ValidationError) as excinfo:
        schemas.ArticleDTO.model_validate(_payload(**{field: value}))
    assert excinfo.value.errors()[0]["loc"] == (field,)


def test_blank_title_message():
    with pytest.raises(pydantic.ValidationError) as excinfo:
        schemas.ArticleDTO.model_validate(_payload(title=" "))
    assert "Title is mandatory" in excinfo.value.errors()[0]["msg"]


def test_title_length_limit():
    schemas.ArticleDTO.model_validate(_payload(title="t" * 255))
    with pytest.raises(pydantic.ValidationError) as excinfo:
        schemas.ArticleDTO.model_validate(_payload(title="t" * 256))
    assert "less than 255 characters" in excinfo.value.errors()[0]["msg"]


def test_source_length_limit():
    with pytest.raises(pydantic.ValidationError):
        schemas.ArticleDTO.model_validate(_payload(source="s" * 256))


def test_content_is_unbounded():
    dto = schemas.ArticleDTO.model_validate(_payload(content="c" * 100_000))
    assert len(dto.content) == 100_000


def test_missing_or_null_published_at_is_rejected():
    payload = _payload()
    del payload["publishedAt"]
    with pytest.raises(pydantic.ValidationError):
        schemas.ArticleDTO.model_validate(payload)
    with pytest.raises(pydantic.ValidationError) as excinfo:
        schemas.ArticleDTO.model_validate(_payload(publishedAt=None))
    assert "Published date and time is mandatory" in excinfo.value.errors()[0]["msg"]


def test_conversions_between_dto_and_entity():
    dto = schemas.ArticleDTO.model_validate(_payload())
    entity = schemas.to_entity(dto)
    assert entity.id is None
    assert schemas.to_dto(entity) == dto


def test_article_serializes_with_published_at_alias():
    article = schemas.from_row(
        {
            "id": 7,
            "title": "T",
            "content": "C",
            "source": "S",
            "published_at": datetime(2024, 5, 1, tzinfo=timezone.utc),
        }
    )
    data = article.model_dump(by_alias=True)
    assert data["id"] == 7
    assert "publishedAt" in data
