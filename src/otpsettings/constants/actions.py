"""
Canonical OTP actions.
The seeding policy creates exactly one setting per entry, in this order.
"""

from __future__ import annotations

DEFAULT_ACTIONS = (
    "Checklist All",
    "Withdrawal",
    "Forgot Password",
    "Reset Password",
)


def action_sort_key(action: str | None) -> tuple[int, str]:
    """Order canonical actions first, then anything else alphabetically."""

    if action in DEFAULT_ACTIONS:
        return (DEFAULT_ACTIONS.index(action), "")
    return (len(DEFAULT_ACTIONS), action or "")
