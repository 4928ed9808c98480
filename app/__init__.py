"""Application factory for the FixTools conversion server."""

from __future__ import annotations

import importlib
import os
import pkgutil
from pathlib import Path
from typing import Iterable

import yaml
from flask import Flask, Response
from werkzeug.exceptions import HTTPException

from common.errors import AppError, NotFoundAppError, ValidationAppError
from common.logging import get_logger, install_request_logging, set_level
from common.responses import fail, ok

from . import config as config_module
from .blueprints import register_plugin_blueprints

CONFIG_PATH = Path(__file__).resolve().parent.parent / "config.yml"

logger = get_logger("app")


def _config_path() -> Path:
    override = os.environ.get("FIXTOOLS_CONFIG")
    return Path(override) if override else CONFIG_PATH


def _load_yaml_config(path: Path | None = None) -> dict:
    path = path or _config_path()
    if not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a mapping at the top level")
    return data


def _discover_plugins(package: str = "plugins") -> Iterable[str]:
    """Yield import paths for all plugin packages."""

    package_path = Path(__file__).resolve().parent.parent / package
    if not package_path.exists():
        return []
    for module_info in pkgutil.iter_modules([str(package_path)]):
        if module_info.ispkg:
            yield f"{package}.{module_info.name}"


def _load_manifests(plugin_settings: dict) -> list[dict[str, str]]:
    manifests: list[dict[str, str]] = []
    for dotted in _discover_plugins():
        module = importlib.import_module(dotted)
        manifest = getattr(module, "manifest", None)
        if not manifest:
            continue
        entry = dict(manifest)
        blueprint = entry.get("blueprint")
        plugin_config = plugin_settings.get(blueprint, {}) if blueprint else {}
        for key in ("docs", "summary"):
            if plugin_config.get(key):
                entry[key] = plugin_config[key]
        manifests.append(entry)
    manifests.sort(key=lambda item: item["title"].lower())
    return manifests


def _max_content_length(site_settings: dict, default: int) -> int:
    raw = site_settings.get("max_content_length_mb")
    if raw is None:
        return default
    try:
        return int(float(raw) * 1024 * 1024)
    except (TypeError, ValueError):
        logger.warning("ignoring invalid max_content_length_mb=%r", raw)
        return default


def create_app(config_name: str | None = None) -> Flask:
    """Create and configure the Flask application instance."""

    app = Flask(__name__)
    app.config.from_object(config_module.BaseConfig)
    if config_name:
        config_obj = getattr(config_module, config_name, None)
        if config_obj is None:
            raise ValueError(f"Unknown configuration '{config_name}'")
        app.config.from_object(config_obj)

    yaml_config = _load_yaml_config()
    site_settings = yaml_config.get("site", {}) or {}
    plugin_settings = yaml_config.get("plugins", {}) or {}
    app.config["SITE_SETTINGS"] = site_settings
    app.config["PLUGIN_SETTINGS"] = plugin_settings
    app.config["MAX_CONTENT_LENGTH"] = _max_content_length(
        site_settings, app.config["MAX_CONTENT_LENGTH"]
    )
    if site_settings.get("log_level"):
        set_level(site_settings["log_level"])

    install_request_logging(app)
    register_plugin_blueprints(app)
    app.config["PLUGIN_MANIFESTS"] = _load_manifests(plugin_settings)

    @app.after_request
    def apply_response_headers(response):
        """Attach strict security headers to every outgoing response."""

        configured = app.config.get("RESPONSE_HEADERS", {})
        for header, value in configured.items():
            if header not in response.headers:
                response.headers[header] = value
        return response

    @app.route("/")
    def home() -> Response:
        return ok(
            {
                "site": app.config.get("SITE_SETTINGS", {}).get("title", "FixTools"),
                "plugins": app.config.get("PLUGIN_MANIFESTS", []),
            }
        )

    @app.errorhandler(AppError)
    def app_error(error: AppError):
        return fail(error)

    @app.errorhandler(HTTPException)
    def http_error(error: HTTPException):
        if error.code == 404:
            return fail(NotFoundAppError(message="Resource not found."))
        return fail(
            ValidationAppError(
                message=error.description or error.name,
                code=error.name.lower().replace(" ", "_"),
                status_code=error.code or 400,
            )
        )

    @app.errorhandler(Exception)
    def unhandled_error(error: Exception):
        logger.exception("unhandled error")
        return fail(error, fallback_code="internal_error")

    return app


__all__ = ["create_app"]
