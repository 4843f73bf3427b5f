from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import Container, build_container
from .database.bootstrap import DEFAULT_SCHEMA_PATH, apply_schema, list_tables
from .departments.controller import register as register_departments
from .employees.controller import register as register_employees
from .entries.controller import register as register_entries
from .holidays.controller import register as register_holidays
from .logging_config import configure_logging

logger = logging.getLogger(__name__)


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    db_config = getattr(settings, "DB_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    logger.info(
        "settings=%s db=%s@%s:%s/%s",
        settings_module,
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
    )

    if container is None:
        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config, schema_path=DEFAULT_SCHEMA_PATH)
            logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
        container = build_container(db_config=db_config)

    register_departments(app, container)
    register_employees(app, container)
    register_holidays(app, container)
    register_entries(app, container)

    return app
