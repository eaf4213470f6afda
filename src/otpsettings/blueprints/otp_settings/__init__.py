"""OTP settings blueprint package."""

from __future__ import annotations

from flask import Blueprint

bp = Blueprint(
    "otp_settings",
    __name__,
    url_prefix="/otp-settings",
)

from . import routes  # noqa: E402,F401 - ensure routes get registered

__all__ = ["bp"]
