"""Channel-specific normalization of send events into records."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass, field
from email.message import EmailMessage
from typing import Any

from notiscope.common.constants import NotificationType, RenderKind
from notiscope.common.errors import UnrenderableNotificationError
from notiscope.common.schemas import NotificationRecord
from notiscope.events.events import MessageSent, NotificationSent
from notiscope.helpers.serializer import Serializer
from notiscope.helpers.stack_trace import StackTrace
from notiscope.notifications.addresses import (
    format_message_addresses,
    format_notification_addresses,
    message_address_map,
)
from notiscope.notifications.messages import (
    RENDERED_TYPES,
    ChatMessage,
    MailMessage,
    RenderedNotification,
    TelephonyMessage,
)
from notiscope.notifications.notification import is_mailable


@dataclass(frozen=True)
class ChannelFields:
    """The channel-specific part of a record."""

    subject: str | None = None
    from_: Any = None
    to: Any = None
    content: str | None = None
    data: dict[str, Any] = field(default_factory=dict)


class ChannelNormalizer:
    """Builds records from raw mail and notification send events."""

    def __init__(
        self,
        serializer: Serializer | None = None,
        mailable_predicate: Callable[[Any], bool] = is_mailable,
    ) -> None:
        self._serializer = serializer or Serializer()
        self._is_mailable = mailable_predicate
        self._resolvers: dict[RenderKind, Callable[[NotificationSent, Any], ChannelFields]] = {
            RenderKind.MAIL: self._resolve_mail,
            RenderKind.CHAT: self._resolve_chat,
            RenderKind.TELEPHONY: self._resolve_telephony,
            RenderKind.BROADCAST: self._resolve_payload,
            RenderKind.GENERIC: self._resolve_payload,
        }

    # --- Mail Path ---

    def normalize_message(
        self,
        event: MessageSent,
        trace: StackTrace,
        captured_at: float | None = None,
    ) -> NotificationRecord:
        """Build a ``mail`` record from a raw message-sent event."""
        message = event.message
        mailable = self.find_mailable(trace)

        return NotificationRecord(
            subject=_header(message, "Subject"),
            from_=format_message_addresses(message_address_map(message, "From")),
            to=format_message_addresses(message_address_map(message, "To")),
            content=_message_body(message),
            type=NotificationType.MAIL,
            data=self._serializer.normalize_each({
                "cc": format_message_addresses(message_address_map(message, "Cc")),
                "bcc": format_message_addresses(message_address_map(message, "Bcc")),
                "replyTo": format_message_addresses(message_address_map(message, "Reply-To")),
                "mailable": mailable,
            }),
            time=captured_at if captured_at is not None else time.time(),
            trace=self._serializer.shorten_trace(trace),
        )

    def find_mailable(self, trace: StackTrace) -> Any:
        """Receiver of the innermost frame that is building a mailable."""
        frame = trace.first(lambda frame: self._is_mailable(frame.object))
        return frame.object if frame is not None else None

    # --- Notification Path ---

    def normalize_notification(
        self,
        event: NotificationSent,
        trace: StackTrace,
        captured_at: float | None = None,
    ) -> NotificationRecord:
        """Build a record typed by the event channel from a notification event."""
        fields = self.resolve_channel_specific(event)
        data = self._serializer.normalize_each({
            **fields.data,
            "notification": event.notification,
            "notifiable": event.notifiable,
            "response": event.response,
        })

        return NotificationRecord(
            subject=fields.subject,
            from_=fields.from_,
            to=fields.to,
            content=fields.content,
            type=event.channel,
            data=data,
            time=captured_at if captured_at is not None else time.time(),
            trace=self._serializer.shorten_trace(trace),
        )

    def resolve_channel_specific(self, event: NotificationSent) -> ChannelFields:
        """Render the notification and extract its channel fields."""
        rendered = self.render(event)
        return self._resolvers[rendered.kind](event, rendered)

    def render(self, event: NotificationSent) -> RenderedNotification:
        notification = event.notification
        render = getattr(notification, "render", None)
        if render is None:
            raise UnrenderableNotificationError(type(notification).__qualname__)

        rendered = render(event.notifiable)
        if not isinstance(rendered, RENDERED_TYPES):
            raise UnrenderableNotificationError(type(notification).__qualname__)
        return rendered

    def _resolve_mail(self, event: NotificationSent, message: MailMessage) -> ChannelFields:
        return ChannelFields(
            subject=message.subject or _type_name(event.notification),
            from_=format_notification_addresses(message.from_),
            to=format_notification_addresses(_route(event, "mail")),
            data={
                "cc": format_notification_addresses(message.cc),
                "bcc": format_notification_addresses(message.bcc),
                "replyTo": format_notification_addresses(message.reply_to),
            },
        )

    def _resolve_chat(self, event: NotificationSent, message: ChatMessage) -> ChannelFields:
        return ChannelFields(
            subject=message.subject or _type_name(event.notification),
            from_=message.username,
            to=message.channel,
            content=message.content,
        )

    def _resolve_telephony(
        self, event: NotificationSent, message: TelephonyMessage,
    ) -> ChannelFields:
        return ChannelFields(
            subject=message.subject or _type_name(event.notification),
            from_=_as_text(message.from_),
            to=_as_text(_route(event, "nexmo")),
            content=message.content,
        )

    def _resolve_payload(self, event: NotificationSent, message: Any) -> ChannelFields:
        return ChannelFields(data=dict(message.data))


def _type_name(notification: Any) -> str:
    return type(notification).__qualname__


def _as_text(value: Any) -> str | None:
    return str(value) if value is not None else None


def _route(event: NotificationSent, channel: str) -> Any:
    """Ask the notifiable for its address; unroutable targets give None."""
    route = getattr(event.notifiable, "route_notification_for", None)
    if route is None:
        return None
    return route(channel, event.notification) or None


def _header(message: EmailMessage, name: str) -> str | None:
    value = message.get(name)
    return str(value) if value is not None else None


def _message_body(message: EmailMessage) -> str | None:
    part = message.get_body(preferencelist=("html", "plain"))
    if part is None:
        return None
    return part.get_content()


__all__ = ["ChannelFields", "ChannelNormalizer"]
