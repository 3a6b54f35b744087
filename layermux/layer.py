"""Layers: a path pattern, filters and the handlers run when they match."""

from __future__ import annotations

import re
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Protocol, Sequence

Handler = Callable[[Any, Any], None]

DEFAULT_RESTRICT = "[^/]+"

# A placeholder is "{name}" or "{name:pattern}"; matching is non-greedy.
_PLACEHOLDER = re.compile(r"\{(?P<name>.*?)(?::(?P<restrict>.*?))??\}")


@dataclass
class Layer:
    """A routing layer; an empty path matches every request."""

    handlers: Sequence[Handler] = ()
    name: str = ""
    path: str = ""
    regexp: re.Pattern[str] | None = None
    priority: int = 0
    methods: Sequence[str] = ()
    restrictions: dict[str, str] = field(default_factory=dict)
    meta: dict[str, Any] = field(default_factory=dict)

    def with_handlers(self, *handlers: Handler) -> Layer:
        """Return a copy of the layer with ``handlers`` as its handlers."""
        return replace(self, handlers=handlers)


class _RegExpMaker(Protocol):
    def make_regexp(self, layer: Layer) -> re.Pattern[str] | None: ...


class StdRegExpMaker:
    """Turns a layer path with ``{name}`` placeholders into a compiled pattern."""

    def make_regexp(self, layer: Layer) -> re.Pattern[str] | None:
        if not layer.path:
            return None

        pattern = layer.path
        for match in _PLACEHOLDER.finditer(layer.path):
            name = match["name"]
            restrict = layer.restrictions.get(name)
            if restrict is None:
                restrict = match["restrict"] or ""
            if not restrict:
                restrict = DEFAULT_RESTRICT
            pattern = pattern.replace(match[0], f"(?P<{name}>{restrict})")

        return re.compile(f"^{pattern}$", re.MULTILINE)


@dataclass
class StdNormalizer:
    """Names anonymous layers and compiles their path patterns."""

    regexp_maker: _RegExpMaker = field(default_factory=StdRegExpMaker)
    _increment: int = field(default=0, init=False, repr=False)

    def normalize(self, layer: Layer) -> Layer:
        name = layer.name
        if not name:
            name = f"l-{self._increment}"
            self._increment += 1

        named = replace(layer, name=name)
        return replace(named, regexp=self.regexp_maker.make_regexp(named))