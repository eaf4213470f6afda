"""SQLModel table exports."""

from .otp_setting import ACTION_MAX_LENGTH, OTPSetting, SettingUpdate

__all__ = [
    "ACTION_MAX_LENGTH",
    "OTPSetting",
    "SettingUpdate",
]
