"""Data sources collecting request-scoped telemetry."""

from notiscope.datasource.base import DataSource, Filter
from notiscope.datasource.notifications import NotificationsDataSource

__all__ = ["DataSource", "Filter", "NotificationsDataSource"]
