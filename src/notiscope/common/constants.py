"""Constants and enums for NotiScope."""

from enum import StrEnum
from typing import Final


class NotificationType(StrEnum):
    """Record type tags produced by the built-in channel renderers."""

    MAIL = "mail"
    SLACK = "slack"
    NEXMO = "nexmo"


class RenderKind(StrEnum):
    """Tags of the rendered notification variants."""

    MAIL = "mail"
    CHAT = "chat"
    TELEPHONY = "telephony"
    BROADCAST = "broadcast"
    GENERIC = "generic"


# Serializer markers
RECURSION_MARKER: Final[str] = "*RECURSION*"
DEPTH_MARKER: Final[str] = "*DEPTH*"
REDACTED_MARKER: Final[str] = "*REMOVED*"
ERROR_KEY: Final[str] = "__error__"
CLASS_KEY: Final[str] = "__class__"

DEFAULT_REDACT_KEYS: Final[tuple[str, ...]] = (
    "password",
    "secret",
    "token",
    "api_key",
    "authorization",
)

__all__ = [
    "NotificationType",
    "RenderKind",
    "RECURSION_MARKER",
    "DEPTH_MARKER",
    "REDACTED_MARKER",
    "ERROR_KEY",
    "CLASS_KEY",
    "DEFAULT_REDACT_KEYS",
]
