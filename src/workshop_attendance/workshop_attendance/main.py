from __future__ import annotations

import importlib
import logging
from typing import Any, Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from .config import get_settings_module
from .container import build_container
from .core.exceptions import RemoteError
from .attendance.controller import register as register_attendance
from .members.controller import register as register_members
from .reports.controller import register as register_reports
from .sessions.controller import register as register_sessions

logger = logging.getLogger(__name__)

SETTING_NAMES = (
    "SECRET_KEY",
    "DEBUG",
    "TESTING",
    "API_BASE_URL",
    "API_TIMEOUT_SECONDS",
    "USE_REMOTE_SOURCE",
    "SEED_MOCK_DATA",
    "LOG_LEVEL",
)


def load_settings(overrides: Optional[dict[str, Any]] = None) -> dict[str, Any]:
    settings_module = get_settings_module()
    module = importlib.import_module(settings_module)
    settings = {name: getattr(module, name) for name in SETTING_NAMES if hasattr(module, name)}
    settings["SETTINGS_MODULE"] = settings_module
    settings.update(overrides or {})
    return settings


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(overrides: Optional[dict[str, Any]] = None) -> Flask:
    load_dotenv(override=False)
    settings = load_settings(overrides)
    configure_logging(settings.get("LOG_LEVEL", "INFO"))

    app = Flask(__name__)
    app.secret_key = settings.get("SECRET_KEY")
    app.config["DEBUG"] = bool(settings.get("DEBUG", False))
    app.config["TESTING"] = bool(settings.get("TESTING", False))
    app.config["LOAD_ERROR"] = None

    logger.debug("settings=%s api=%s", settings["SETTINGS_MODULE"], settings.get("API_BASE_URL"))

    container = build_container(settings=settings)
    app.extensions["workshop_attendance"] = container

    if container.use_remote_source:
        try:
            container.member_service.load_from(container.api_client)
        except RemoteError:
            # App still starts on whatever is in memory; the client sees the banner.
            app.config["LOAD_ERROR"] = "Failed to load members. Make sure the server is running."

    register_members(app, container)
    register_sessions(app, container)
    register_attendance(app, container)
    register_reports(app, container)

    @app.route("/api/status", methods=["GET"], endpoint="status")
    def status():
        error = app.config.get("LOAD_ERROR")
        return jsonify({"ok": error is None, "error": error, "retryable": error is not None})

    return app


def run() -> None:
    create_app().run()
