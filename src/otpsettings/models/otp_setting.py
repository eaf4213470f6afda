"""Per-action OTP delivery channel preferences."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import Any, ClassVar, Optional

from sqlmodel import Field, SQLModel

ACTION_MAX_LENGTH = 100


class OTPSetting(SQLModel, table=True):
    """Whether a one-time password for an action goes out by Email and/or Whatsapp."""

    __tablename__: ClassVar[str] = "otp_setting"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    action: Optional[str] = Field(default=None, max_length=ACTION_MAX_LENGTH, unique=True)
    email_enabled: bool = Field(default=False, nullable=False)
    whatsapp_enabled: bool = Field(default=False, nullable=False)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-friendly representation used by the raw endpoint."""

        return {
            "id": str(self.id),
            "action": self.action,
            "email_enabled": self.email_enabled,
            "whatsapp_enabled": self.whatsapp_enabled,
        }


@dataclass(frozen=True)
class SettingUpdate:
    """Desired channel flags for one existing setting."""

    id: Optional[uuid.UUID]
    email_enabled: bool = False
    whatsapp_enabled: bool = False
