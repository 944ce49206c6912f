"""Normalization and correlation of sent emails and notifications."""

from notiscope.notifications.addresses import (
    format_message_addresses,
    format_notification_addresses,
    message_address_map,
)
from notiscope.notifications.buffer import CollectorBuffer
from notiscope.notifications.correlator import Correlator
from notiscope.notifications.messages import (
    BroadcastMessage,
    ChatMessage,
    GenericPayload,
    MailMessage,
    RenderedNotification,
    TelephonyMessage,
)
from notiscope.notifications.normalizer import ChannelFields, ChannelNormalizer
from notiscope.notifications.notification import (
    Mailable,
    Notification,
    RoutesNotifications,
    is_mailable,
)

__all__ = [
    "format_message_addresses",
    "format_notification_addresses",
    "message_address_map",
    "CollectorBuffer",
    "Correlator",
    "BroadcastMessage",
    "ChatMessage",
    "GenericPayload",
    "MailMessage",
    "RenderedNotification",
    "TelephonyMessage",
    "ChannelFields",
    "ChannelNormalizer",
    "Mailable",
    "Notification",
    "RoutesNotifications",
    "is_mailable",
]
