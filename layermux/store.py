"""An ordered collection of layers with shortcuts for HTTP methods."""

from __future__ import annotations

from dataclasses import replace
from typing import Protocol

from layermux.layer import Handler, Layer, StdNormalizer


class _Normalizer(Protocol):
    def normalize(self, layer: Layer) -> Layer: ...


class LayersStore:
    """Holds normalized layers and hands them out ordered by priority."""

    def __init__(self, normalizer: _Normalizer | None = None) -> None:
        self._normalizer: _Normalizer = (
            normalizer if normalizer is not None else StdNormalizer()
        )
        self._layers: list[Layer] = []
        self._sorted = False

    def add_layer(self, layer: Layer) -> LayersStore:
        """Normalize ``layer`` and append it."""
        self._layers.append(self._normalizer.normalize(layer))
        self._sorted = False
        return self

    def use(self, layer: Layer, *handlers: Handler) -> LayersStore:
        """Add ``layer`` with ``handlers`` as its handlers."""
        return self.add_layer(layer.with_handlers(*handlers))

    def handle_func(self, path: str, layer: Layer, *handlers: Handler) -> LayersStore:
        """Add ``layer`` bound to ``path`` with ``handlers``."""
        return self.use(replace(layer, path=path), *handlers)

    def get_layers(self) -> list[Layer]:
        """The layers, highest priority first; equal priorities keep their order."""
        if not self._sorted:
            self._layers.sort(key=lambda item: item.priority, reverse=True)
            self._sorted = True
        return list(self._layers)

    def method(
        self, method: str, path: str, layer: Layer, *handlers: Handler
    ) -> LayersStore:
        """Add ``layer`` restricted to one HTTP ``method`` at ``path``."""
        return self.use(replace(layer, path=path, methods=(method,)), *handlers)

    def get(self, path: str, options: Layer, *handlers: Handler) -> LayersStore:
        return self.method("GET", path, options, *handlers)

    def post(self, path: str, options: Layer, *handlers: Handler) -> LayersStore:
        return self.method("POST", path, options, *handlers)

    def put(self, path: str, options: Layer, *handlers: Handler) -> LayersStore:
        return self.method("PUT", path, options, *handlers)

    def patch(self, path: str, options: Layer, *handlers: Handler) -> LayersStore:
        return self.method("PATCH", path, options, *handlers)

    def delete(self, path: str, options: Layer, *handlers: Handler) -> LayersStore:
        return self.method("DELETE", path, options, *handlers)