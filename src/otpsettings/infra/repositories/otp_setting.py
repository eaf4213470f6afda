"""SQLModel implementation of the OTP setting store."""

from __future__ import annotations

import uuid
from typing import Iterable, Optional

from sqlalchemy import Boolean, bindparam, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import select

from ...constants.actions import action_sort_key
from ...errors import StoreError
from ...logging_config import get_logger
from ...models.otp_setting import OTPSetting, SettingUpdate
from ..database import SessionFactory

logger = get_logger(__name__)

_UPDATE_FLAGS_SQL = text(
    "UPDATE otp_setting "
    "SET email_enabled = :email_enabled, whatsapp_enabled = :whatsapp_enabled "
    "WHERE id = :id"
).bindparams(
    bindparam("email_enabled", type_=Boolean()),
    bindparam("whatsapp_enabled", type_=Boolean()),
    # Reuse the mapped column type so ids bind exactly as the ORM stores them
    bindparam("id", type_=OTPSetting.__table__.c.id.type),  # type: ignore[attr-defined]
)


class SQLModelOTPSettingRepository:
    """SQLModel-based OTP setting repository."""

    def __init__(self, session_factory: SessionFactory, engine: Engine):
        """Initialize with a session factory and the engine used for direct statements."""
        self.session_factory = session_factory
        self.engine = engine

    def list_all(self) -> list[OTPSetting]:
        """List all settings, canonical actions first."""
        try:
            with self.session_factory() as session:
                rows = list(session.exec(select(OTPSetting)).all())
                session.expunge_all()
        except SQLAlchemyError as exc:
            raise StoreError("Failed to list OTP settings", exc) from exc
        return sorted(rows, key=lambda row: action_sort_key(row.action))

    def get_by_id(self, setting_id: uuid.UUID) -> Optional[OTPSetting]:
        """Retrieve a setting by ID."""
        try:
            with self.session_factory() as session:
                obj = session.get(OTPSetting, setting_id)
                if obj:
                    session.expunge(obj)
                return obj
        except SQLAlchemyError as exc:
            raise StoreError(f"Failed to load OTP setting {setting_id}", exc) from exc

    def insert_many(self, settings: Iterable[OTPSetting]) -> None:
        """Insert a batch of new settings in one transaction."""
        try:
            with self.session_factory() as session:
                session.add_all(list(settings))
                session.commit()
        except SQLAlchemyError as exc:
            raise StoreError("Failed to insert OTP settings", exc) from exc

    def update_flags(
        self, setting_id: uuid.UUID, email_enabled: bool, whatsapp_enabled: bool
    ) -> bool:
        """Overwrite the channel flags of one setting.

        Missing ids are a no-op and return ``False``.
        """
        return (
            self.update_flags_many(
                [SettingUpdate(setting_id, email_enabled, whatsapp_enabled)]
            )
            == 1
        )

    def update_flags_many(self, updates: Iterable[SettingUpdate]) -> int:
        """Read-modify-write each matching setting inside one session.

        The batch commits once; any failure rolls back every change.
        Returns the number of settings that matched an existing id.
        """
        applied = 0
        try:
            with self.session_factory() as session:
                try:
                    for update in updates:
                        existing = session.get(OTPSetting, update.id)
                        if existing is None:
                            logger.debug("Skipping unknown OTP setting %s", update.id)
                            continue
                        existing.email_enabled = update.email_enabled
                        existing.whatsapp_enabled = update.whatsapp_enabled
                        session.add(existing)
                        applied += 1
                    session.commit()
                except SQLAlchemyError:
                    session.rollback()
                    raise
        except SQLAlchemyError as exc:
            raise StoreError("Failed to update OTP settings", exc) from exc
        return applied

    def execute_flag_statements(self, updates: Iterable[SettingUpdate]) -> int:
        """Run one parameterized UPDATE per entry on a single transactional connection.

        Commits once after every statement succeeded; the first failure rolls
        back the whole batch and is re-raised as ``StoreError``.
        Returns the number of rows the statements touched.
        """
        touched = 0
        try:
            with self.engine.connect() as connection:
                transaction = connection.begin()
                try:
                    for update in updates:
                        result = connection.execute(
                            _UPDATE_FLAGS_SQL,
                            {
                                "email_enabled": update.email_enabled,
                                "whatsapp_enabled": update.whatsapp_enabled,
                                "id": update.id,
                            },
                        )
                        touched += result.rowcount
                    transaction.commit()
                except Exception:
                    transaction.rollback()
                    raise
        except SQLAlchemyError as exc:
            raise StoreError("Failed to update OTP settings with SQL", exc) from exc
        return touched


__all__ = ["SQLModelOTPSettingRepository"]
