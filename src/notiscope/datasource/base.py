"""Base class for data sources feeding a collected request."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from contextlib import contextmanager
from typing import Any, TypeVar

Filter = Callable[..., bool]
HostT = TypeVar("HostT")


class DataSource:
    """Collects one kind of data during a unit of work.

    Subclasses implement ``resolve`` to copy what they collected into the
    request and ``reset`` to start over for the next unit of work.
    """

    def __init__(self) -> None:
        self._filters: list[Filter] = []

    def add_filter(self, predicate: Filter) -> DataSource:
        """Register an acceptance predicate for collected entries."""
        self._filters.append(predicate)
        return self

    def passes_filters(self, args: Sequence[Any]) -> bool:
        """Check candidate ``args`` against every registered predicate."""
        return all(predicate(*args) for predicate in self._filters)

    def resolve(self, request: HostT) -> HostT:
        return request

    def reset(self) -> None:
        pass

    @contextmanager
    def collecting(self, request: HostT) -> Iterator[HostT]:
        """Scope collection to one unit of work resolved into ``request``."""
        self.reset()
        try:
            yield request
        finally:
            self.resolve(request)
            self.reset()


__all__ = ["DataSource", "Filter"]
