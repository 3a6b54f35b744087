"""Minimal request and response objects used by the router."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Mapping


@dataclass(frozen=True)
class Request:
    """An incoming request: method, path and a mapping of context values."""

    method: str = "GET"
    path: str = "/"
    context: Mapping[Any, Any] = field(default_factory=dict)

    def with_context(self, context: Mapping[Any, Any]) -> Request:
        """Return a copy of the request carrying ``context``."""
        return replace(self, context=context)


@dataclass
class ResponseRecorder:
    """Collects everything a handler writes."""

    status: int = 200
    headers: dict[str, str] = field(default_factory=dict)
    body: bytearray = field(default_factory=bytearray)

    def write(self, data: bytes | str) -> int:
        """Append ``data`` to the body and return the number of bytes written."""
        chunk = data.encode("utf-8") if isinstance(data, str) else bytes(data)
        self.body.extend(chunk)
        return len(chunk)

    def text(self) -> str:
        """The body decoded as UTF-8."""
        return self.body.decode("utf-8", errors="replace")