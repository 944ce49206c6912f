"""Exception hierarchy for NotiScope."""

from __future__ import annotations


class NotiScopeError(Exception):
    """Base class for collector errors."""


class UnrenderableNotificationError(NotiScopeError):
    """Raised when a notification cannot describe itself for any channel."""

    def __init__(self, notification_type: str) -> None:
        self.notification_type = notification_type
        super().__init__(
            f"Notification {notification_type} exposes no channel renderer "
            f"and no generic payload"
        )


__all__ = ["NotiScopeError", "UnrenderableNotificationError"]
