"""Pytest configuration and shared fixtures for OTP settings tests.

Provides an isolated SQLite database per test, the repository and service
built on top of it, and a Flask app/client pair pointed at a temporary data
directory.
"""

from __future__ import annotations

import tempfile
from pathlib import Path

import pytest
from sqlmodel import SQLModel, create_engine

from otpsettings import create_app
from otpsettings.extensions import get_engine
from otpsettings.infra.database import create_session_factory
from otpsettings.infra.repositories import SQLModelOTPSettingRepository
from otpsettings.models import OTPSetting  # noqa: F401  # register table metadata
from otpsettings.services.otp_settings import OTPSettingsService

FAILURE_TRIGGER = "fail_otp_setting_update"


def install_failure_trigger(engine, action: str) -> None:
    """Make every UPDATE of the setting for ``action`` abort inside SQLite."""

    with engine.begin() as connection:
        connection.exec_driver_sql(
            f"CREATE TRIGGER {FAILURE_TRIGGER} BEFORE UPDATE ON otp_setting "
            f"WHEN OLD.action = '{action}' "
            "BEGIN SELECT RAISE(ABORT, 'simulated store failure'); END"
        )


# =============================================================================
# Database Fixtures
# =============================================================================


@pytest.fixture(scope="function")
def db_engine():
    """Create an isolated SQLite database file for each test.

    Yields:
        Engine: SQLModel engine with all tables created
    """
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        db_path = Path(f.name)

    engine = create_engine(f"sqlite:///{db_path}", echo=False)
    SQLModel.metadata.create_all(engine)

    yield engine

    engine.dispose()
    db_path.unlink(missing_ok=True)


@pytest.fixture(scope="function")
def session_factory(db_engine):
    """Session factory committing on success and rolling back on error."""

    return create_session_factory(db_engine)


@pytest.fixture
def repository(session_factory, db_engine) -> SQLModelOTPSettingRepository:
    return SQLModelOTPSettingRepository(session_factory, db_engine)


@pytest.fixture
def service(repository) -> OTPSettingsService:
    return OTPSettingsService(repository)


@pytest.fixture
def seeded(service) -> list[OTPSetting]:
    """Default settings in canonical order."""

    return service.get_settings()


# =============================================================================
# Flask Fixtures
# =============================================================================


@pytest.fixture()
def app(tmp_path, monkeypatch: pytest.MonkeyPatch):
    db_path = tmp_path / "otpsettings.db"
    monkeypatch.setenv("OTPSETTINGS_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("OTPSETTINGS_DATABASE_URL", f"sqlite:///{db_path}")
    app = create_app("testing")
    yield app
    get_engine(app).dispose()


@pytest.fixture()
def client(app):
    with app.test_client() as client:
        yield client


@pytest.fixture
def failure_trigger():
    """Return a helper installing a SQLite trigger that aborts updates for one action."""

    return install_failure_trigger
