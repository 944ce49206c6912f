"""Call stack capture with template-frame resolution."""

from __future__ import annotations

import inspect
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, replace
from types import FrameType
from typing import Any


@dataclass(frozen=True)
class StackFrame:
    """A captured stack frame, detached from the live frame object."""

    file: str
    line: int
    function: str
    module: str = ""
    object: Any = None
    view: str | None = None
    template: Any = None

    @property
    def call(self) -> str:
        if self.object is not None:
            return f"{type(self.object).__qualname__}.{self.function}()"
        return f"{self.function}()"

    @classmethod
    def from_frame(cls, frame: FrameType) -> StackFrame:
        return cls(
            file=frame.f_code.co_filename,
            line=frame.f_lineno,
            function=frame.f_code.co_name,
            module=frame.f_globals.get("__name__", ""),
            object=frame.f_locals.get("self"),
            template=frame.f_globals.get("__jinja_template__"),
        )


class StackTrace:
    """Ordered sequence of stack frames, innermost first."""

    def __init__(self, frames: Iterable[StackFrame]) -> None:
        self._frames = list(frames)

    @classmethod
    def get(
        cls,
        skip_modules: Iterable[str] = ("notiscope",),
        limit: int | None = None,
    ) -> StackTrace:
        """Capture the current call stack, skipping frames from given modules."""
        prefixes = tuple(skip_modules)
        frames: list[StackFrame] = []
        current = inspect.currentframe()
        frame: FrameType | None = current.f_back if current is not None else None
        while frame is not None:
            if limit is not None and len(frames) >= limit:
                break
            module = frame.f_globals.get("__name__", "")
            if not _matches_prefix(module, prefixes):
                frames.append(StackFrame.from_frame(frame))
            frame = frame.f_back
        return cls(frames)

    def resolve_view_names(self) -> StackTrace:
        """Annotate Jinja2 template frames with the template name and line."""
        resolved: list[StackFrame] = []
        for frame in self._frames:
            template = frame.template
            if template is None:
                resolved.append(frame)
                continue
            line = template.get_corresponding_lineno(frame.line)
            resolved.append(replace(
                frame,
                view=template.name or template.filename,
                file=template.filename or frame.file,
                line=line,
            ))
        return StackTrace(resolved)

    def first(self, predicate: Callable[[StackFrame], bool]) -> StackFrame | None:
        """Return the first frame satisfying ``predicate``."""
        for frame in self._frames:
            if predicate(frame):
                return frame
        return None

    def frames(self) -> list[StackFrame]:
        return list(self._frames)

    def __iter__(self) -> Iterator[StackFrame]:
        return iter(self._frames)

    def __len__(self) -> int:
        return len(self._frames)


def _matches_prefix(module: str, prefixes: tuple[str, ...]) -> bool:
    return any(module == p or module.startswith(p + ".") for p in prefixes)


__all__ = ["StackFrame", "StackTrace"]
