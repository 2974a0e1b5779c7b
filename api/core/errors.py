"""
Error taxonomy shared by the services, and its translation to HTTP.

Services raise these and never build HTTP responses themselves:
- `NotFoundError`    -> 404, empty body
- `ValidationFailed` -> 422, `{"detail": [{"loc", "msg", "type"}, ...]}`
- anything else      -> logged with traceback, 500, empty body
"""

from __future__ import annotations

import logging
from typing import Any

import pydantic
from fastapi import FastAPI, Request, Response, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class NotFoundError(LookupError):
    def __init__(self, entity: str, entity_id: int) -> None:
        super().__init__(f"{entity} not found with id {entity_id}")
        self.entity = entity
        self.entity_id = entity_id


class ValidationFailed(ValueError):
    def __init__(self, errors: list[dict[str, Any]]) -> None:
        super().__init__("; ".join(str(e.get("msg", "")) for e in errors) or "Validation failed.")
        self.errors = errors

    @classmethod
    def single(cls, loc: tuple[str, ...], msg: str, error_type: str = "value_error") -> ValidationFailed:
        return cls([{"loc": list(loc), "msg": msg, "type": error_type}])

    @classmethod
    def from_pydantic(cls, exc: pydantic.ValidationError, *, prefix: tuple[str, ...] = ("body",)) -> ValidationFailed:
        errors = [
            {
                "loc": [*prefix, *(str(part) for part in err["loc"])],
                "msg": err["msg"],
                "type": err["type"],
            }
            for err in exc.errors(include_url=False, include_context=False, include_input=False)
        ]
        return cls(errors)


async def _not_found_handler(request: Request, exc: NotFoundError) -> Response:
    logger.info("not_found entity=%s id=%s path=%s", exc.entity, exc.entity_id, request.url.path)
    return Response(status_code=status.HTTP_404_NOT_FOUND)


async def _validation_failed_handler(request: Request, exc: ValidationFailed) -> JSONResponse:
    logger.info("validation_failed path=%s errors=%s", request.url.path, len(exc.errors))
    return JSONResponse(
        status_code=422,
        content={"detail": exc.errors},
    )


async def _unexpected_error_handler(request: Request, exc: Exception) -> Response:
    # Full detail stays in the server log; the caller only sees the status.
    logger.exception("unexpected_error method=%s path=%s", request.method, request.url.path)
    return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


def install_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(NotFoundError, _not_found_handler)
    app.add_exception_handler(ValidationFailed, _validation_failed_handler)
    app.add_exception_handler(Exception, _unexpected_error_handler)
