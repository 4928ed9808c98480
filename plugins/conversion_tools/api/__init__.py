"""Conversion tools API with standardized responses."""

from __future__ import annotations

from typing import Any, Literal

from flask import Blueprint, Response, current_app, request
from pydantic import Field, field_validator

from common.errors import NotFoundAppError, UnprocessableAppError, ValidationAppError
from common.logging import get_logger
from common.responses import fail, ok
from common.validation import ValidationError, VerbatimSchemaModel, parse_model

from ..core import (
    BadInputError,
    UnknownDimensionError,
    catalogue,
    convert,
    describe,
    list_units,
)

logger = get_logger(__name__)


class ConvertPayload(VerbatimSchemaModel):
    dimension: str
    from_unit: str
    to_unit: str
    value: float = Field(allow_inf_nan=False)
    constants: Literal["legacy", "reference"] | None = None
    sig_figs: int | None = Field(default=None, ge=1, le=17)
    decimals: int | None = Field(default=None, ge=0, le=20)

    @field_validator("value", mode="before")
    @classmethod
    def _fits_in_float(cls, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return float(value)
            except OverflowError as exc:
                raise ValueError("value does not fit in a float") from exc
        return value


api_bp = Blueprint("conversion_tools_api", __name__, url_prefix="/api/conversion_tools")


def _settings() -> dict[str, Any]:
    settings = current_app.config.get("PLUGIN_SETTINGS", {}) or {}
    return dict(settings.get("conversion_tools", {}) or {})


def _unknown_dimension(exc: UnknownDimensionError) -> Response:
    return fail(NotFoundAppError(message=str(exc), code="conversion.unknown_dimension"))


@api_bp.get("/dimensions")
def dimensions() -> Response:
    return ok(catalogue())


@api_bp.get("/dimensions/<dimension>/units")
def units_endpoint(dimension: str) -> Response:
    try:
        units = list_units(dimension)
    except UnknownDimensionError as exc:
        return _unknown_dimension(exc)
    return ok({"dimension": dimension, "units": units})


@api_bp.post("/convert")
def convert_endpoint() -> Response:
    raw_payload = request.get_json(silent=True)
    try:
        payload = parse_model(ConvertPayload, raw_payload)
    except ValidationError as exc:
        return fail(
            ValidationAppError(
                message=str(exc),
                code="conversion.invalid_request",
                details=getattr(exc, "details", None),
            )
        )

    settings = _settings()
    if payload.from_unit == payload.to_unit and not settings.get("allow_identical_units", False):
        logger.info("rejected identical units %r for %s", payload.from_unit, payload.dimension)
        return fail(
            ValidationAppError(
                message="Inputs should not be same. Please provide different units.",
                code="conversion.identical_units",
            )
        )

    constants = payload.constants or settings.get("constants", "legacy")
    try:
        outcome = convert(
            payload.dimension,
            payload.from_unit,
            payload.to_unit,
            payload.value,
            constants=constants,
        )
    except UnknownDimensionError as exc:
        return _unknown_dimension(exc)
    except BadInputError as exc:
        return fail(ValidationAppError(message=str(exc), code="conversion.invalid_request"))

    if not outcome.ok:
        logger.info("unrecognized units %s for %s", outcome.units, outcome.dimension.value)
        return fail(
            UnprocessableAppError(
                message=outcome.message,
                code="conversion.unrecognized_unit",
                details={"units": list(outcome.units)},
            )
        )
    try:
        result = describe(outcome, sig_figs=payload.sig_figs, decimals=payload.decimals)
    except BadInputError as exc:
        return fail(ValidationAppError(message=str(exc), code="conversion.invalid_precision"))
    return ok(result)


blueprints = [api_bp]


__all__ = [
    "blueprints",
    "dimensions",
    "units_endpoint",
    "convert_endpoint",
]
