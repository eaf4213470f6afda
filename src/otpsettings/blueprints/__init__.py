"""Blueprint exports."""

from . import otp_settings

__all__ = [
    "otp_settings",
]
