"""Walks the matching layers of one request, one handler at a time."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Sequence

from layermux.layer import Handler, Layer
from layermux.messages import Request
from layermux.resolver import RequestResolver


class DelegationError(RuntimeError):
    """Raised when a handler delegates but no further layer matches."""

    def __init__(self, index: int) -> None:
        super().__init__(f"can`t delegate to layer by index {index}")
        self.index = index


@dataclass
class Runner:
    """Per-request state: each call to serve_http runs the next matching handler."""

    layers: Sequence[Layer] = ()
    resolver: RequestResolver = field(default_factory=RequestResolver)
    uri_params: dict[str, str] = field(default_factory=dict)
    user_params: dict[str, Any] = field(default_factory=dict)

    _cur_layer: Layer | None = field(default=None, init=False, repr=False)
    _layer_pos: int = field(default=0, init=False, repr=False)
    _handler_pos: int = field(default=0, init=False, repr=False)

    def serve_http(self, writer: Any, request: Request) -> None:
        """Run the next handler of the layer chain."""
        handler = self._next_handler(request)
        handler(writer, request)

    def _next_handler(self, request: Request) -> Handler:
        while True:
            if self._cur_layer is None:
                self._cur_layer = self._next_layer(request)

            if self._handler_pos == len(self._cur_layer.handlers):
                self._cur_layer = None
                continue

            handler = self._cur_layer.handlers[self._handler_pos]
            self._handler_pos += 1
            return handler

    def _next_layer(self, request: Request) -> Layer:
        self._handler_pos = 0

        while self._layer_pos < len(self.layers):
            candidate = self.layers[self._layer_pos]
            self._layer_pos += 1

            result = self.resolver.for_request(candidate, request, True)
            if result is not None:
                found, params = result
                self.uri_params.update(params)
                return found

        raise DelegationError(self._layer_pos)