"""OTP setting store protocol."""

from __future__ import annotations

import uuid
from typing import Iterable, Optional, Protocol

from ...models.otp_setting import OTPSetting, SettingUpdate


class OTPSettingStore(Protocol):
    """Durable storage for OTP settings keyed by id.

    Implementations raise ``StoreError`` for any persistence failure.
    """

    def list_all(self) -> list[OTPSetting]:
        """List all settings."""
        ...

    def get_by_id(self, setting_id: uuid.UUID) -> Optional[OTPSetting]:
        """Retrieve a setting by ID."""
        ...

    def insert_many(self, settings: Iterable[OTPSetting]) -> None:
        """Insert a batch of new settings in one transaction."""
        ...

    def update_flags(
        self, setting_id: uuid.UUID, email_enabled: bool, whatsapp_enabled: bool
    ) -> bool:
        """Overwrite the channel flags of one setting; missing ids are a no-op."""
        ...

    def update_flags_many(self, updates: Iterable[SettingUpdate]) -> int:
        """Read-modify-write a batch of settings atomically; return matches applied."""
        ...

    def execute_flag_statements(self, updates: Iterable[SettingUpdate]) -> int:
        """Run one parameterized UPDATE per entry inside a single transaction."""
        ...
