from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .container import Container, build_container
from .database.bootstrap import apply_schema, list_tables
from .dashboard.controller import register as register_dashboard
from .students.controller import register as register_students
from .students.demo import seed_demo_students
from .users.controller import register as register_users

SCHEMA_PATH = Path(__file__).resolve().parents[3] / "database" / "schema.sql"


def create_app(container: Optional[Container] = None, settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    db_config = getattr(settings, "DB_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["API_PREFIX"] = getattr(settings, "API_PREFIX", "/api")
    app.config["AUTH_REQUIRED"] = bool(getattr(settings, "AUTH_REQUIRED", False))
    app.config["MAX_CONTENT_LENGTH"] = getattr(settings, "MAX_CONTENT_LENGTH", None)
    app.logger.setLevel(getattr(settings, "LOG_LEVEL", logging.INFO))

    if container is None:
        # Helpful startup info to avoid "connected but no tables" confusion.
        app.logger.info(
            "settings=%s db=%s@%s:%s/%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config, schema_path=SCHEMA_PATH)
            app.logger.info("schema ready (tables=%d)", len(list_tables(db_config)))

        container = build_container(
            db_config=db_config,
            default_total_amount_due=float(getattr(settings, "DEFAULT_TOTAL_AMOUNT_DUE", 15000)),
        )

        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            created = seed_demo_students(container.student_service)
            app.logger.info("demo seed ready (created=%d)", created)

    register_users(app, container)
    register_students(app, container)
    register_dashboard(app, container)

    @app.errorhandler(404)
    def not_found(_e):
        return jsonify({"message": "Ressource introuvable"}), 404

    @app.errorhandler(413)
    def too_large(_e):
        return jsonify({"message": "Requête trop volumineuse"}), 413

    @app.errorhandler(500)
    def internal_error(_e):
        return jsonify({"message": "Erreur interne du serveur"}), 500

    return app
