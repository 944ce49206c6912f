"""Data source for sent emails and notifications.

Listens to message-sent and notification-sent events and keeps one
normalized record per logical delivery for the current unit of work.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import Any

from notiscope.common.config import NotiScopeConfig
from notiscope.common.errors import UnrenderableNotificationError
from notiscope.common.schemas import NotificationRecord
from notiscope.datasource.base import DataSource
from notiscope.events.dispatcher import Dispatcher
from notiscope.events.events import MessageSent, NotificationSent
from notiscope.helpers.serializer import Serializer
from notiscope.helpers.stack_trace import StackTrace
from notiscope.notifications.buffer import CollectorBuffer, NotificationHost
from notiscope.notifications.correlator import Correlator
from notiscope.notifications.normalizer import ChannelNormalizer
from notiscope.notifications.notification import is_mailable

logger = logging.getLogger(__name__)


class NotificationsDataSource(DataSource):
    """Collects sent emails and notifications for one unit of work.

    Each concurrent unit of work needs its own instance; the buffer is
    not shared or locked.
    """

    def __init__(
        self,
        dispatcher: Dispatcher,
        serializer: Serializer | None = None,
        stack_trace: Callable[[], StackTrace] | None = None,
        mailable_predicate: Callable[[Any], bool] = is_mailable,
        config: NotiScopeConfig | None = None,
    ) -> None:
        super().__init__()
        self._config = config or NotiScopeConfig()
        self._dispatcher = dispatcher
        self._serializer = serializer or Serializer(
            max_depth=self._config.serializer_max_depth,
            redact_keys=self._config.serializer_redact_keys,
        )
        self._stack_trace = stack_trace or self._capture_trace
        self._normalizer = ChannelNormalizer(self._serializer, mailable_predicate)
        self._correlator = Correlator()
        self._buffer = CollectorBuffer()
        self._listening = False

    @property
    def config(self) -> NotiScopeConfig:
        return self._config

    def listen_to_events(self) -> None:
        """Register the send event handlers with the dispatcher, once."""
        if self._listening:
            return
        self._dispatcher.listen(MessageSent, self.register_message)
        self._dispatcher.listen(NotificationSent, self.register_notification)
        self._listening = True

    def resolve(self, request: NotificationHost) -> NotificationHost:
        """Add the collected records to the request."""
        return self._buffer.drain_into(request)

    def reset(self) -> None:
        """Clear the records collected so far."""
        self._buffer.reset()

    def records(self) -> list[NotificationRecord]:
        """Copies of the records collected so far."""
        return list(self._buffer)

    def register_message(self, event: MessageSent) -> None:
        """Record a raw email handed to the mail transport."""
        captured_at = time.time()

        try:
            trace = self._stack_trace()
            record = self._normalizer.normalize_message(event, trace, captured_at)
        except Exception:
            if self._config.strict:
                raise
            logger.exception("Failed to collect sent message, dropping it")
            return

        self._commit(record)

    def register_notification(self, event: NotificationSent) -> None:
        """Record a notification sent through any channel."""
        captured_at = time.time()

        try:
            trace = self._stack_trace()
            record = self._normalizer.normalize_notification(event, trace, captured_at)
            if event.channel == "mail" and self._correlator.merge(self._buffer, record):
                return
        except UnrenderableNotificationError:
            raise
        except Exception:
            if self._config.strict:
                raise
            logger.exception("Failed to collect sent %s notification, dropping it", event.channel)
            return

        self._commit(record)

    def _commit(self, record: NotificationRecord) -> None:
        if not self.passes_filters([record]):
            logger.debug("Filtered out %s record to %r", record.type, record.to)
            return
        self._buffer.append(record)
        logger.debug("Collected %s record to %r", record.type, record.to)

    def _capture_trace(self) -> StackTrace:
        trace = StackTrace.get(
            skip_modules=self._config.trace_skip_modules,
            limit=self._config.trace_limit,
        )
        return trace.resolve_view_names()


__all__ = ["NotificationsDataSource"]
