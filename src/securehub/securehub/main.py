from __future__ import annotations

import importlib
import logging
from datetime import timedelta
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask
from werkzeug.middleware.proxy_fix import ProxyFix

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .container import Container, build_container_from_settings
from .core.constants import DEFAULT_NETWORK_RECHECK_SECONDS, DEFAULT_SESSION_DAYS
from .database.bootstrap import apply_schema, ensure_admin_account, list_tables
from .network.controller import register as register_network
from .users.controller import register as register_users

logger = logging.getLogger(__name__)


def _configure_logging(level_name: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level_name).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(container: Optional[Container] = None) -> Flask:
    """App factory. Pass a prebuilt container to skip store wiring (tests)."""

    load_dotenv(override=False)
    app = Flask(__name__, template_folder="../../../templates")

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    _configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["NETWORK_RECHECK_SECONDS"] = int(getattr(settings, "NETWORK_RECHECK_SECONDS", DEFAULT_NETWORK_RECHECK_SECONDS))
    app.permanent_session_lifetime = timedelta(days=int(getattr(settings, "SESSION_DAYS", DEFAULT_SESSION_DAYS)))

    trusted_proxies = int(getattr(settings, "TRUSTED_PROXIES", 0))
    if trusted_proxies > 0:
        app.wsgi_app = ProxyFix(app.wsgi_app, x_for=trusted_proxies)

    if container is None:
        container = build_container_from_settings(settings)
        logger.info("settings=%s store=%s", settings_module, type(container.store).__name__)

        if container.conn is not None and bool(getattr(settings, "AUTO_INIT_DB", False)):
            schema_path = Path(__file__).resolve().parents[3] / "database" / "schema.sql"
            apply_schema(container.conn, schema_path=schema_path)
            logger.info("schema ready (tables=%d)", len(list_tables(container.conn)))
        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            ensure_admin_account(container.store, password=str(getattr(settings, "ADMIN_BOOTSTRAP_PASSWORD")))

    register_users(app, container)
    register_network(app, container)
    register_attendance(app, container)

    return app
