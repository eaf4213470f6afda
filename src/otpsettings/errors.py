"""Exception classes for OTP settings operations.

Persistence failures surface as ``StoreError`` from the repository layer. The
service converts them into failed results for updates and ``RetrievalError``
for reads, so callers only ever handle the three types defined here.
"""

from __future__ import annotations

from typing import Optional, Sequence


class OTPSettingsError(Exception):
    """Base class for all OTP settings errors."""


class StoreError(OTPSettingsError):
    """Raised when the settings store cannot complete an operation.

    Covers connectivity problems and constraint violations reported by the
    database driver.
    """

    def __init__(self, message: str, original_error: Optional[Exception] = None) -> None:
        """Initialize with store error details.

        Args:
            message: Description of the failed operation
            original_error: The database exception that was caught
        """
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(OTPSettingsError):
    """Raised when update input is malformed."""

    def __init__(self, errors: Sequence[str]) -> None:
        self.errors: list[str] = list(errors)
        super().__init__("; ".join(self.errors) or "Invalid OTP settings input")


class RetrievalError(OTPSettingsError):
    """Raised when settings cannot be read for presentation."""

    def __init__(self, message: str, original_error: Optional[Exception] = None) -> None:
        super().__init__(message)
        self.message = message
        self.original_error = original_error
