"""Send events observed by the collector."""

from __future__ import annotations

from dataclasses import dataclass, field
from email.message import EmailMessage
from typing import Any


@dataclass(frozen=True)
class MessageSent:
    """A raw email message handed to the mail transport."""

    message: EmailMessage
    data: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class NotificationSent:
    """A notification delivered to a notifiable through one channel."""

    channel: str
    notification: Any
    notifiable: Any
    response: Any = None


__all__ = ["MessageSent", "NotificationSent"]
