"""Database and service wiring for the Flask application."""

from __future__ import annotations

from flask import Flask, current_app
from sqlalchemy.engine import Engine

from .config import BaseConfig
from .infra.database import bootstrap_database
from .infra.repositories import SQLModelOTPSettingRepository
from .services.otp_settings import OTPSettingsService

EXTENSION_KEY = "otpsettings"


def init_db(app: Flask) -> None:
    """Create the engine and schema using configuration from the app."""

    config: BaseConfig = app.config["OTPSETTINGS_CONFIG"]
    engine, session_factory = bootstrap_database(config)
    app.extensions[EXTENSION_KEY] = {
        "engine": engine,
        "session_factory": session_factory,
    }
    # TODO(@db-team): replace create_all with Alembic migrations once a second schema revision lands.


def _state(app: Flask | None = None) -> dict:
    target = app or current_app
    state = target.extensions.get(EXTENSION_KEY)
    if state is None:  # pragma: no cover - misconfigured app
        raise RuntimeError("Database engine not initialized")
    return state


def get_engine(app: Flask | None = None) -> Engine:
    """Return the engine bound to the application."""

    return _state(app)["engine"]


def get_settings_service(app: Flask | None = None) -> OTPSettingsService:
    """Build the settings service over the application's store."""

    state = _state(app)
    repository = SQLModelOTPSettingRepository(state["session_factory"], state["engine"])
    return OTPSettingsService(repository)
