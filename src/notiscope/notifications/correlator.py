"""Correlation of notification-sent and mail-sent events for one delivery.

Sending a notification over the mail channel fires both a raw
message-sent event and a notification-sent event. The notification
record is folded into the preceding mail record when their recipients
match. Only the immediately preceding record is considered: anything
recorded in between means the two events are not merged.
"""

from __future__ import annotations

import logging

from notiscope.common.constants import NotificationType
from notiscope.common.schemas import NotificationRecord
from notiscope.notifications.buffer import CollectorBuffer

logger = logging.getLogger(__name__)


class Correlator:
    """Merges mail-channel notification records into the buffer tail."""

    def matches(self, last: NotificationRecord | None, record: NotificationRecord) -> bool:
        """Check whether ``record`` describes the same delivery as ``last``."""
        if last is None or last.type != NotificationType.MAIL:
            return False
        return last.joined_to == record.joined_to

    def merge(self, buffer: CollectorBuffer, record: NotificationRecord) -> bool:
        """Merge ``record`` into the last buffered record if they correlate.

        Returns True when merged; the caller must then discard ``record``.
        """
        if not self.matches(buffer.last, record):
            return False

        buffer.merge_last_data(record.data)
        logger.debug("Merged %s notification into mail record to %r", record.type, record.to)
        return True


__all__ = ["Correlator"]
