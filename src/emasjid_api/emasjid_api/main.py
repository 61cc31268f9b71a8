from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .database.bootstrap import apply_schema, list_tables

from .container import Container, build_container
from .cadangan.controller import register as register_cadangan
from .dependents.controller import register as register_dependents
from .members.controller import register as register_members
from .payments.controller import register as register_payments
from .tabung.controller import register as register_tabung
from .tags.controller import register as register_tags
from .tetapan.controller import register as register_tetapan


def _configure_logging(app: Flask, level_name: str) -> None:
    level = getattr(logging, str(level_name).upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    app.logger.setLevel(level)


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    db_config = getattr(settings, "DB_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["DEPLOY_URL"] = getattr(settings, "DEPLOY_URL", "/")
    app.config["ALLOW_ORIGINS"] = list(getattr(settings, "ALLOW_ORIGINS", []))

    _configure_logging(app, getattr(settings, "LOG_LEVEL", "DEBUG" if app.config["DEBUG"] else "INFO"))
    app.logger.info(
        "settings=%s db=%s@%s:%s/%s",
        settings_module,
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
    )

    if container is None:
        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            schema_path = Path(__file__).resolve().parents[3] / "database" / "schema.sql"
            apply_schema(db_config, schema_path=schema_path)
            app.logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
        container = build_container(db_config=db_config)

    register_members(app, container)
    register_tags(app, container)
    register_dependents(app, container)
    register_payments(app, container)
    register_cadangan(app, container)
    register_tetapan(app, container)
    register_tabung(app, container)

    return app
