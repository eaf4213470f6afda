"""Default-seeding policy for OTP settings.

Seeding happens once: when the store is observed empty, one setting per
canonical action is inserted with both channels disabled. A store holding any
record at all is left alone, even if it no longer matches ``DEFAULT_ACTIONS``.
"""

from __future__ import annotations

import uuid
from typing import Sequence

from ..constants.actions import DEFAULT_ACTIONS
from ..domain.repositories import OTPSettingStore
from ..logging_config import get_logger
from ..models import OTPSetting

logger = get_logger(__name__)


def build_default_settings(actions: Sequence[str] = DEFAULT_ACTIONS) -> list[OTPSetting]:
    """Return fresh settings for ``actions`` with both channels disabled."""

    return [
        OTPSetting(id=uuid.uuid4(), action=action, email_enabled=False, whatsapp_enabled=False)
        for action in actions
    ]


def ensure_seeded(store: OTPSettingStore) -> list[OTPSetting]:
    """Seed the canonical actions into an empty store and return every setting."""

    settings = store.list_all()
    if settings:
        return settings

    defaults = build_default_settings()
    store.insert_many(defaults)
    logger.info("Default OTP settings created", extra={"count": len(defaults)})
    return store.list_all()


__all__ = ["build_default_settings", "ensure_seeded"]
