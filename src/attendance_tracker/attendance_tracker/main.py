from __future__ import annotations

import importlib
import logging
from pathlib import Path

from dotenv import load_dotenv
from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from config import get_settings_module

from .common.validators import require_threshold
from .core.constants import ATTENDANCE_THRESHOLD
from .core.exceptions import DomainError, NotFoundError, ValidationError
from .database.bootstrap import apply_schema, apply_seed_sql, list_tables

from .container import Container, build_container
from .blackouts.controller import register as register_holidays
from .eligibility.controller import register as register_eligibility
from .leave.controller import register as register_leave
from .ledger.controller import register as register_attendance
from .semester.controller import register as register_semester
from .subjects.controller import register as register_subjects

logger = logging.getLogger(__name__)

_ROOT = Path(__file__).resolve().parents[3]


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def domain_error(e: DomainError):
        status = 404 if isinstance(e, NotFoundError) else 400
        return jsonify({"error": str(e)}), status

    @app.errorhandler(Exception)
    def unexpected_error(e: Exception):
        if isinstance(e, HTTPException):
            return jsonify({"error": e.description}), e.code
        logger.exception("Unhandled error")
        return jsonify({"error": "Internal server error"}), 500


def resolve_threshold(settings) -> float:
    value = getattr(settings, "ATTENDANCE_THRESHOLD", None)
    if value is None or str(value).strip() == "":
        return ATTENDANCE_THRESHOLD
    try:
        return require_threshold(float(value))
    except ValueError:
        raise ValidationError(f"ATTENDANCE_THRESHOLD must be a number, got {value!r}")


def register_routes(app: Flask, container: Container) -> None:
    register_eligibility(app, container)
    register_attendance(app, container)
    register_holidays(app, container)
    register_semester(app, container)
    register_subjects(app, container)
    register_leave(app, container)
    _register_error_handlers(app)


def create_app() -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    db_config = getattr(settings, "DB_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    threshold = resolve_threshold(settings)

    logging.basicConfig(
        level=logging.DEBUG if app.config["DEBUG"] else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info(
        "settings=%s db=%s@%s:%s/%s threshold=%.1f",
        settings_module,
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
        threshold,
    )

    if bool(getattr(settings, "AUTO_INIT_DB", False)):
        apply_schema(db_config, schema_path=_ROOT / "database" / "schema.sql")
        logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
    if bool(getattr(settings, "AUTO_SEED_DB", False)):
        apply_seed_sql(db_config, seed_path=_ROOT / "database" / "seed.sql")

    container = build_container(db_config=db_config, threshold=threshold)
    register_routes(app, container)

    return app
