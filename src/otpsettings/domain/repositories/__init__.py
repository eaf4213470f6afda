"""Repository protocol definitions for domain layer."""

from .otp_setting import OTPSettingStore

__all__ = [
    "OTPSettingStore",
]
