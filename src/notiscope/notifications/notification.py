"""Notification, notifiable and mailable contracts."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from notiscope.common.errors import UnrenderableNotificationError
from notiscope.notifications.messages import (
    BroadcastMessage,
    ChatMessage,
    GenericPayload,
    MailMessage,
    RenderedNotification,
    TelephonyMessage,
)


class Notification:
    """Base class for notifications.

    Subclasses override the hooks for the channels they support. ``render``
    picks one variant in the fixed priority order mail, chat, telephony,
    broadcast, then the generic array form.
    """

    def to_mail(self, notifiable: Any) -> MailMessage | None:
        return None

    def to_slack(self, notifiable: Any) -> ChatMessage | None:
        return None

    def to_nexmo(self, notifiable: Any) -> TelephonyMessage | None:
        return None

    def to_broadcast(self, notifiable: Any) -> BroadcastMessage | None:
        return None

    def to_array(self, notifiable: Any) -> dict[str, Any] | None:
        return None

    def render(self, notifiable: Any) -> RenderedNotification:
        """Render this notification into a single channel variant."""
        for hook in (self.to_mail, self.to_slack, self.to_nexmo, self.to_broadcast):
            rendered = hook(notifiable)
            if rendered is not None:
                return rendered

        payload = self.to_array(notifiable)
        if payload is None:
            raise UnrenderableNotificationError(type(self).__qualname__)
        return GenericPayload(data=dict(payload))


class RoutesNotifications:
    """Mixin for notifiables that know their address on each channel."""

    def route_notification_for(self, channel: str, notification: Any = None) -> Any:
        """Return the address to deliver ``notification`` to on ``channel``."""
        method = getattr(self, f"route_notification_for_{channel}", None)
        if method is not None:
            return method(notification)
        if channel == "mail":
            return getattr(self, "email", None)
        if channel == "nexmo":
            return getattr(self, "phone_number", None)
        return None


@runtime_checkable
class Mailable(Protocol):
    """A self-describing message builder that can send itself."""

    def build(self) -> Any: ...

    def send(self, *args: Any, **kwargs: Any) -> Any: ...


def is_mailable(value: Any) -> bool:
    """Default check for the receiver of a mail-building frame."""
    return value is not None and not isinstance(value, type) and isinstance(value, Mailable)


__all__ = ["Notification", "RoutesNotifications", "Mailable", "is_mailable"]
