"""Conversion of arbitrary values into JSON-safe structures.

Used to store notifications, notifiables, mailables and channel responses
alongside collected records without holding references to live objects.
Handles reference cycles, redacts sensitive keys and limits depth.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel

from notiscope.common.constants import (
    CLASS_KEY,
    DEFAULT_REDACT_KEYS,
    DEPTH_MARKER,
    ERROR_KEY,
    RECURSION_MARKER,
    REDACTED_MARKER,
)

logger = logging.getLogger(__name__)

_SCALARS = (str, int, float, bool, type(None))


class Serializer:
    """Normalize values for display in the collected request."""

    def __init__(
        self,
        max_depth: int = 10,
        redact_keys: Iterable[str] = DEFAULT_REDACT_KEYS,
    ) -> None:
        self._max_depth = max_depth
        self._redact_keys = tuple(key.lower() for key in redact_keys)

    @property
    def max_depth(self) -> int:
        return self._max_depth

    def normalize(self, value: Any) -> Any:
        """Return a JSON-safe representation of ``value``."""
        return self._normalize(value, depth=0, seen=set())

    def normalize_each(self, values: Mapping[str, Any]) -> dict[str, Any]:
        """Normalize every value of a mapping, isolating per-key failures."""
        result: dict[str, Any] = {}
        for key, value in values.items():
            try:
                result[key] = self.normalize(value)
            except Exception as exc:
                logger.warning("Could not serialize %r: %s", key, exc)
                result[key] = {ERROR_KEY: f"{type(exc).__name__}: {exc}"}
        return result

    def shorten_trace(self, trace: Iterable[Any]) -> list[dict[str, Any]]:
        """Summarize stack frames as ``{call, file, line}`` mappings."""
        summaries: list[dict[str, Any]] = []
        for frame in trace:
            summary: dict[str, Any] = {
                "call": frame.call,
                "file": frame.file,
                "line": frame.line,
            }
            if frame.view is not None:
                summary["view"] = frame.view
            summaries.append(summary)
        return summaries

    def is_redacted(self, key: Any) -> bool:
        """Check whether a mapping key names a sensitive value."""
        if not isinstance(key, str):
            return False
        lowered = key.lower()
        return any(fragment in lowered for fragment in self._redact_keys)

    # --- Internals ---

    def _normalize(self, value: Any, depth: int, seen: set[int]) -> Any:
        if isinstance(value, Enum):
            return self._normalize(value.value, depth, seen)
        if isinstance(value, _SCALARS):
            return value
        if isinstance(value, bytes):
            return value.decode("utf-8", errors="replace")
        if depth >= self._max_depth:
            return DEPTH_MARKER

        marker = id(value)
        if marker in seen:
            return RECURSION_MARKER
        seen = seen | {marker}

        if isinstance(value, Mapping):
            return self._normalize_mapping(value.items(), depth, seen)
        if isinstance(value, (list, tuple, set, frozenset)):
            return [self._normalize(item, depth + 1, seen) for item in value]
        if isinstance(value, BaseModel):
            return self._normalize_object(value, dict(value), depth, seen)
        if dataclasses.is_dataclass(value) and not isinstance(value, type):
            attrs = {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}
            return self._normalize_object(value, attrs, depth, seen)
        if hasattr(value, "__dict__") and not isinstance(value, type):
            attrs = {k: v for k, v in vars(value).items() if not k.startswith("__")}
            return self._normalize_object(value, attrs, depth, seen)
        return repr(value)

    def _normalize_object(
        self, value: Any, attrs: dict[str, Any], depth: int, seen: set[int],
    ) -> dict[str, Any]:
        result: dict[str, Any] = {CLASS_KEY: type(value).__qualname__}
        result.update(self._normalize_mapping(attrs.items(), depth, seen))
        return result

    def _normalize_mapping(
        self, items: Iterable[tuple[Any, Any]], depth: int, seen: set[int],
    ) -> dict[str, Any]:
        result: dict[str, Any] = {}
        for key, item in items:
            if self.is_redacted(key):
                result[str(key)] = REDACTED_MARKER
            else:
                result[str(key)] = self._normalize(item, depth + 1, seen)
        return result


__all__ = ["Serializer"]
