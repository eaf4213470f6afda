"""Service module exports."""

from . import otp_settings, seeding

__all__ = [
    "otp_settings",
    "seeding",
]
