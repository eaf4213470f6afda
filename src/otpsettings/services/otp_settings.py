"""Read, seed, and update workflow for OTP settings."""

from __future__ import annotations

import uuid
from dataclasses import asdict, dataclass, replace
from typing import Iterable

from ..domain.repositories import OTPSettingStore
from ..errors import RetrievalError, StoreError, ValidationError
from ..logging_config import get_logger
from ..models import OTPSetting, SettingUpdate
from .seeding import ensure_seeded

logger = get_logger(__name__)

UPDATE_SUCCESS_MESSAGE = "OTP settings updated successfully!"
UPDATE_FAILURE_MESSAGE = "Error updating OTP settings. Please try again."
DIRECT_UPDATE_SUCCESS_MESSAGE = "OTP settings updated successfully using SQL!"
DIRECT_UPDATE_FAILURE_MESSAGE = "Error updating OTP settings with SQL. Please try again."
LOAD_FAILURE_MESSAGE = "Error loading OTP settings. Please try again."
RETRIEVE_FAILURE_MESSAGE = "Error retrieving OTP settings"


@dataclass(frozen=True)
class OperationResult:
    """Outcome of an update, rendered by the presentation layer."""

    success: bool
    message: str
    applied: int = 0

    def to_dict(self) -> dict[str, object]:
        return asdict(self)


def _coerce_id(raw: object) -> uuid.UUID | None:
    """Return ``raw`` as a UUID, or ``None`` when it is absent or blank."""

    if isinstance(raw, uuid.UUID):
        return raw
    if raw is None or not str(raw).strip():
        return None
    return uuid.UUID(str(raw).strip())


def validate_updates(updates: Iterable[SettingUpdate]) -> list[SettingUpdate]:
    """Return ``updates`` with UUID ids, raising ``ValidationError`` on a missing or bad id."""

    batch: list[SettingUpdate] = []
    errors: list[str] = []
    for position, update in enumerate(updates, start=1):
        try:
            setting_id = _coerce_id(update.id)
        except ValueError:
            errors.append(f"Setting #{position} has an invalid id.")
            continue
        if setting_id is None:
            errors.append(f"Setting #{position} is missing an id.")
            continue
        batch.append(replace(update, id=setting_id))
    if errors:
        raise ValidationError(errors)
    return batch


class OTPSettingsService:
    """Orchestrates reads, seeding, and both update strategies over a store."""

    def __init__(self, store: OTPSettingStore):
        self.store = store

    def get_settings(self) -> list[OTPSetting]:
        """Return every setting, seeding the defaults into an empty store first."""

        try:
            return ensure_seeded(self.store)
        except StoreError as exc:
            logger.exception("Error loading OTP settings")
            raise RetrievalError(LOAD_FAILURE_MESSAGE, exc) from exc

    def list_settings(self) -> list[OTPSetting]:
        """Return the stored settings as-is, without seeding."""

        try:
            return self.store.list_all()
        except StoreError as exc:
            logger.exception("Error retrieving OTP settings")
            raise RetrievalError(RETRIEVE_FAILURE_MESSAGE, exc) from exc

    def update_via_record_semantics(self, updates: Iterable[SettingUpdate]) -> OperationResult:
        """Load each setting by id and overwrite its flags in one transaction.

        Unknown ids are skipped. Raises ``ValidationError`` before touching the
        store when any update lacks a valid id.
        """

        batch = validate_updates(updates)
        try:
            applied = self.store.update_flags_many(batch)
        except StoreError:
            logger.exception("Error updating OTP settings")
            return OperationResult(success=False, message=UPDATE_FAILURE_MESSAGE)

        logger.info(
            "OTP settings updated successfully using record semantics",
            extra={"requested": len(batch), "applied": applied},
        )
        return OperationResult(success=True, message=UPDATE_SUCCESS_MESSAGE, applied=applied)

    def update_via_direct_statement(self, updates: Iterable[SettingUpdate]) -> OperationResult:
        """Apply the flags with parameterized UPDATE statements in one transaction.

        The store rolls the whole batch back on the first failure. Raises
        ``ValidationError`` before touching the store when any update lacks a valid id.
        """

        batch = validate_updates(updates)
        try:
            applied = self.store.execute_flag_statements(batch)
        except StoreError:
            logger.exception("Error updating OTP settings with SQL")
            return OperationResult(success=False, message=DIRECT_UPDATE_FAILURE_MESSAGE)

        logger.info(
            "OTP settings updated successfully using direct SQL",
            extra={"requested": len(batch), "applied": applied},
        )
        return OperationResult(
            success=True, message=DIRECT_UPDATE_SUCCESS_MESSAGE, applied=applied
        )


__all__ = [
    "OTPSettingsService",
    "OperationResult",
    "validate_updates",
]
