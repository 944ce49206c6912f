"""Common configuration, constants and schemas for NotiScope."""

from notiscope.common.config import NotiScopeConfig, configure_logging
from notiscope.common.constants import NotificationType, RenderKind
from notiscope.common.errors import NotiScopeError, UnrenderableNotificationError
from notiscope.common.schemas import CollectedRequest, NotificationRecord

__all__ = [
    "NotiScopeConfig",
    "configure_logging",
    "NotificationType",
    "RenderKind",
    "NotiScopeError",
    "UnrenderableNotificationError",
    "CollectedRequest",
    "NotificationRecord",
]
