"""Request-scoped buffer of committed notification records."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Protocol

from notiscope.common.schemas import NotificationRecord


class NotificationHost(Protocol):
    """A unit-of-work artifact with a mutable ``notifications`` list."""

    notifications: list[dict[str, Any]]


class CollectorBuffer:
    """Ordered records collected during one unit of work.

    Unbounded; emptied only by ``reset``. Records leave the buffer as
    copies, so the only in-place change after commit is ``merge_last_data``.
    """

    def __init__(self) -> None:
        self._records: list[NotificationRecord] = []

    @property
    def last(self) -> NotificationRecord | None:
        return self._records[-1] if self._records else None

    def append(self, record: NotificationRecord) -> None:
        """Commit a record to the end of the buffer."""
        self._records.append(record)

    def merge_last_data(self, data: dict[str, Any]) -> None:
        """Shallow-merge ``data`` into the last record, new keys winning."""
        if not self._records:
            msg = "Cannot merge into an empty buffer"
            raise IndexError(msg)
        last = self._records[-1]
        last.data = {**last.data, **data}

    def drain_into(self, host: NotificationHost) -> NotificationHost:
        """Append copies of the buffered records to ``host.notifications``."""
        host.notifications.extend(record.to_dict() for record in self._records)
        return host

    def reset(self) -> None:
        """Clear all buffered records."""
        self._records.clear()

    def __iter__(self) -> Iterator[NotificationRecord]:
        return (record.model_copy(deep=True) for record in self._records)

    def __len__(self) -> int:
        return len(self._records)


__all__ = ["CollectorBuffer", "NotificationHost"]
