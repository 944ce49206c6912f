"""Formatting of channel-specific addresses into display strings."""

from __future__ import annotations

from collections.abc import Mapping
from email.message import Message
from email.utils import getaddresses
from typing import Any


def format_message_addresses(addresses: Mapping[str, str] | None) -> list[str] | None:
    """Format an email -> display name mapping, keeping insertion order.

    >>> format_message_addresses({"a@x.com": "", "b@x.com": "Bob"})
    ['a@x.com', 'Bob <b@x.com>']
    """
    if not addresses:
        return None
    return [f"{name} <{email}>" if name else email for email, name in addresses.items()]


def format_notification_addresses(address: Any) -> list[str] | None:
    """Format a scalar address, an (email, name) tuple, or a list of either."""
    if not address:
        return None
    if not isinstance(address, list):
        address = [address]

    formatted: list[str] = []
    for item in address:
        if isinstance(item, (tuple, list)):
            email = str(item[0])
            name = item[1] if len(item) > 1 else ""
            formatted.append(f"{name} <{email}>" if name else email)
        else:
            formatted.append(str(item))
    return formatted


def message_address_map(message: Message, header: str) -> dict[str, str]:
    """Read an address header of an email message as email -> name."""
    values = message.get_all(header) or []
    return {email: name for name, email in getaddresses([str(v) for v in values]) if email}


__all__ = [
    "format_message_addresses",
    "format_notification_addresses",
    "message_address_map",
]
