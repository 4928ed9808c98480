"""JSON envelopes returned by every API route."""

from __future__ import annotations

from typing import Any, Mapping

from flask import Response, jsonify

from .errors import AppError, ensure_app_error


def ok(data: Any, *, status: int = 200, meta: Mapping[str, Any] | None = None) -> Response:
    """Return ``{"success": true, "data": ...}``."""

    payload: dict[str, Any] = {"success": True, "data": data}
    if meta:
        payload["meta"] = dict(meta)
    response = jsonify(payload)
    response.status_code = status
    return response


def fail(
    error: AppError | Exception,
    *,
    status: int | None = None,
    fallback_code: str = "internal_error",
) -> Response:
    """Return ``{"success": false, "error": {...}}`` for ``error``.

    Exceptions that are not :class:`AppError` are reported as internal errors
    without their message.
    """

    app_error = ensure_app_error(error, fallback_code=fallback_code)
    response = jsonify({"success": False, "error": app_error.to_dict()})
    response.status_code = status or app_error.status_code
    return response


__all__ = ["ok", "fail"]
