"""OTP settings form parsing helpers."""

from __future__ import annotations

import re
import uuid
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Optional

from ...models import SettingUpdate

_FIELD_PATTERN = re.compile(r"^settings-(\d+)-(id|email_enabled|whatsapp_enabled)$")
_TRUTHY = {"1", "true", "yes", "on"}

# JSON clients may send camelCase keys.
_JSON_ALIASES = {
    "id": ("id",),
    "email_enabled": ("email_enabled", "emailEnabled"),
    "whatsapp_enabled": ("whatsapp_enabled", "whatsappEnabled"),
}


def _coerce_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value).strip().lower() in _TRUTHY


@dataclass(slots=True)
class OTPSettingsForm:
    """Represents a batch of submitted setting flags prior to validation.

    Entries are kept as raw mappings until ``validate`` turns them into
    ``SettingUpdate`` values. An entry with a blank id yields an update whose id
    is ``None`` so the service can reject it.
    """

    entries: list[dict[str, Any]] = field(default_factory=list)
    updates: list[SettingUpdate] = field(default_factory=list, init=False)
    errors: dict[str, list[str]] = field(default_factory=dict, init=False)

    @classmethod
    def from_form(cls, data: Mapping[str, Any]) -> OTPSettingsForm:
        """Create a form from ``settings-<n>-<field>`` form fields.

        Unchecked checkboxes are absent from the submission and read as ``False``.
        """

        indexed: dict[int, dict[str, Any]] = {}
        for key in data:
            match = _FIELD_PATTERN.match(key)
            if match is None:
                continue
            index, name = int(match.group(1)), match.group(2)
            indexed.setdefault(index, {})[name] = data.get(key)
        return cls(entries=[indexed[index] for index in sorted(indexed)])

    @classmethod
    def from_json(cls, payload: Any) -> OTPSettingsForm:
        """Create a form from a JSON list or a ``{"settings": [...]}`` object."""

        if isinstance(payload, Mapping):
            payload = payload.get("settings")
        form = cls()
        if not isinstance(payload, list):
            form._add_error("settings", "Expected a list of settings.")
            return form
        for item in payload:
            if not isinstance(item, Mapping):
                form.entries.append({})
                continue
            entry: dict[str, Any] = {}
            for name, aliases in _JSON_ALIASES.items():
                for alias in aliases:
                    if alias in item:
                        entry[name] = item[alias]
                        break
            form.entries.append(entry)
        return form

    def validate(self) -> bool:
        """Validate the bound entries and populate ``updates``."""

        if "settings" in self.errors:
            return False

        self.errors.pop("id", None)
        self.updates = []
        for position, entry in enumerate(self.entries, start=1):
            setting_id = self._parse_id(entry.get("id"), position)
            self.updates.append(
                SettingUpdate(
                    id=setting_id,
                    email_enabled=_coerce_bool(entry.get("email_enabled")),
                    whatsapp_enabled=_coerce_bool(entry.get("whatsapp_enabled")),
                )
            )
        return not self.errors

    def _parse_id(self, raw: Any, position: int) -> Optional[uuid.UUID]:
        if raw is None or (isinstance(raw, str) and not raw.strip()):
            return None
        if isinstance(raw, uuid.UUID):
            return raw
        try:
            return uuid.UUID(str(raw).strip())
        except ValueError:
            self._add_error("id", f"Setting #{position} has an invalid id.")
            return None

    def _add_error(self, field_name: str, message: str) -> None:
        self.errors.setdefault(field_name, []).append(message)

    def error_messages(self) -> list[str]:
        """Flatten all errors into a single list."""

        return [message for messages in self.errors.values() for message in messages]
