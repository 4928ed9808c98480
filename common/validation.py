"""Request validation primitives for plugin APIs."""

from __future__ import annotations

from typing import Any, Mapping, TypeVar

import pydantic
from pydantic import BaseModel


class ValidationError(ValueError):
    """Raised when a request payload fails validation."""

    def __init__(self, message: str, *, details: Any | None = None):
        super().__init__(message)
        self.details = details


class SchemaModel(BaseModel):
    """Strict base model for request/response validation."""

    model_config = pydantic.ConfigDict(extra="forbid", str_strip_whitespace=True)


class VerbatimSchemaModel(SchemaModel):
    """Strict model that keeps string fields exactly as sent."""

    model_config = pydantic.ConfigDict(extra="forbid", str_strip_whitespace=False)


TModel = TypeVar("TModel", bound=SchemaModel)


def _error_details(exc: pydantic.ValidationError) -> list[dict[str, Any]]:
    return [
        {
            "field": ".".join(str(part) for part in error.get("loc", ())),
            "message": error.get("msg", ""),
            "type": error.get("type", ""),
        }
        for error in exc.errors()
    ]


def parse_model(model: type[TModel], payload: Mapping[str, Any] | None) -> TModel:
    if payload is not None and not isinstance(payload, Mapping):
        raise ValidationError("Request body must be a JSON object")
    try:
        return model.model_validate(dict(payload or {}))
    except pydantic.ValidationError as exc:
        raise ValidationError(
            "Invalid request payload", details={"errors": _error_details(exc)}
        ) from exc


__all__ = [
    "ValidationError",
    "SchemaModel",
    "VerbatimSchemaModel",
    "parse_model",
]
