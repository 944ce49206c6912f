"""Pydantic v2 schemas for collected notification records."""

from __future__ import annotations

import time
import uuid
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class NotificationRecord(BaseModel):
    """A single sent email or notification, normalized across channels."""

    model_config = ConfigDict(populate_by_name=True)

    subject: str | None = None
    from_: str | list[str] | None = Field(default=None, alias="from")
    to: str | list[str] | None = None
    content: str | None = None
    type: str = Field(min_length=1)
    data: dict[str, Any] = Field(default_factory=dict)
    time: float = Field(default_factory=time.time)
    trace: list[dict[str, Any]] = Field(default_factory=list)
    file: str | None = None
    line: int | None = None

    @model_validator(mode="before")
    @classmethod
    def set_provenance(cls, data: Any) -> Any:
        """Derive file/line from the first trace entry unless given explicitly."""
        if isinstance(data, dict) and "file" not in data and "line" not in data:
            trace = data.get("trace") or []
            first = trace[0] if trace else {}
            data["file"] = first.get("file")
            data["line"] = first.get("line")
        return data

    @property
    def joined_to(self) -> str:
        """Recipients joined into the key used to correlate deliveries."""
        if self.to is None:
            return ""
        if isinstance(self.to, str):
            return self.to
        return "".join(self.to)

    def to_dict(self) -> dict[str, Any]:
        """Plain-dict copy using the public field names."""
        return self.model_dump(by_alias=True)


class CollectedRequest(BaseModel):
    """The unit-of-work artifact that collected records are resolved into."""

    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    time: float = Field(default_factory=time.time)
    notifications: list[dict[str, Any]] = Field(default_factory=list)


__all__ = ["NotificationRecord", "CollectedRequest"]
