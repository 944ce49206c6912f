"""Rendered notification variants, one per channel family.

A notification renders itself into exactly one of these values; the
normalizer dispatches on the variant's ``kind`` tag.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Union

from notiscope.common.constants import RenderKind

# A scalar address, an (email, name) pair, or a list of either
Address = Union[str, tuple[str, str], list[Union[str, tuple[str, str]]], None]


@dataclass(frozen=True)
class MailMessage:
    """A notification rendered for the mail channel."""

    kind: ClassVar[RenderKind] = RenderKind.MAIL

    subject: str | None = None
    from_: Address = None
    cc: Address = None
    bcc: Address = None
    reply_to: Address = None
    lines: tuple[str, ...] = ()


@dataclass(frozen=True)
class ChatMessage:
    """A notification rendered for a chat channel such as Slack."""

    kind: ClassVar[RenderKind] = RenderKind.CHAT

    content: str | None = None
    subject: str | None = None
    username: str | None = None
    channel: str | None = None


@dataclass(frozen=True)
class TelephonyMessage:
    """A notification rendered as an SMS."""

    kind: ClassVar[RenderKind] = RenderKind.TELEPHONY

    content: str | None = None
    subject: str | None = None
    from_: str | None = None


@dataclass(frozen=True)
class BroadcastMessage:
    """A notification rendered for a broadcast channel."""

    kind: ClassVar[RenderKind] = RenderKind.BROADCAST

    data: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class GenericPayload:
    """The generic array form of a notification."""

    kind: ClassVar[RenderKind] = RenderKind.GENERIC

    data: dict[str, Any] = field(default_factory=dict)


RenderedNotification = Union[
    MailMessage, ChatMessage, TelephonyMessage, BroadcastMessage, GenericPayload,
]

RENDERED_TYPES: tuple[type, ...] = (
    MailMessage, ChatMessage, TelephonyMessage, BroadcastMessage, GenericPayload,
)

__all__ = [
    "Address",
    "MailMessage",
    "ChatMessage",
    "TelephonyMessage",
    "BroadcastMessage",
    "GenericPayload",
    "RenderedNotification",
    "RENDERED_TYPES",
]
