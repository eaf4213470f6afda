"""Concrete repository implementations using SQLModel."""

from .otp_setting import SQLModelOTPSettingRepository

__all__ = [
    "SQLModelOTPSettingRepository",
]
