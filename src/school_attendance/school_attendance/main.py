from __future__ import annotations

import logging
from types import ModuleType
from typing import Optional

from dotenv import load_dotenv
from flask import Flask
from flask_cors import CORS

from config import load_settings

from .attendance.controller import register as register_attendance
from .classes.controller import register as register_classes
from .common.http import register_error_handlers
from .container import Container, build_container
from .core.constants import IDENTITY_HEADER
from .dashboard.controller import register as register_dashboard
from .database.bootstrap import ensure_indexes
from .identities.controller import register as register_identities
from .students.controller import register as register_students
from .teachers.controller import register as register_teachers


def create_app(settings: Optional[ModuleType] = None, container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    if settings is None:
        settings = load_settings()
    settings_module = settings.__name__

    logging.basicConfig(level=getattr(settings, "LOG_LEVEL", "INFO"))

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.json.sort_keys = False

    CORS(
        app,
        origins=list(getattr(settings, "CORS_ORIGINS", ["http://localhost:3000"])),
        methods=["GET", "POST", "DELETE"],
        allow_headers=["Content-Type", IDENTITY_HEADER],
        supports_credentials=True,
    )

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        app.logger.info("settings=%s database=%s", settings_module, db_config.get("database"))
        container = build_container(db_config=db_config)

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            ensure_indexes(container.conn.database())

    register_error_handlers(app)
    register_identities(app, container)
    register_classes(app, container)
    register_teachers(app, container)
    register_students(app, container)
    register_attendance(app, container)
    register_dashboard(app, container)

    app.extensions["school_attendance"] = container
    return app
