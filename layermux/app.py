"""The application: a layer store that dispatches requests through its layers."""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Mapping

from layermux.messages import Request
from layermux.resolver import RequestResolver
from layermux.runner import Runner
from layermux.store import LayersStore, _Normalizer


class _RunnerKey:
    """Context key under which the per-request runner is stored."""

    def __repr__(self) -> str:
        return "RUNNER_CTX_KEY"


RUNNER_CTX_KEY = _RunnerKey()


def get_mux_runner_ctx(context: Mapping[Any, Any]) -> Runner | None:
    """The runner carried by a request context, or None."""
    runner = context.get(RUNNER_CTX_KEY)
    return runner if isinstance(runner, Runner) else None


class App(LayersStore):
    """A router; handlers call ``serve_http`` again to pass control onwards."""

    def __init__(
        self,
        normalizer: _Normalizer | None = None,
        resolver: RequestResolver | None = None,
    ) -> None:
        super().__init__(normalizer)
        self._resolver = resolver if resolver is not None else RequestResolver()

    def serve_http(self, writer: Any, request: Request) -> None:
        """Run the next matching handler for ``request``."""
        runner, request = self._runner_for(request)
        runner.serve_http(writer, request)

    def _runner_for(self, request: Request) -> tuple[Runner, Request]:
        runner = get_mux_runner_ctx(request.context)
        if runner is None:
            runner = Runner(layers=tuple(self.get_layers()), resolver=self._resolver)
            request = request.with_context({**request.context, RUNNER_CTX_KEY: runner})
        return runner, request

    def mount(self, other: LayersStore, prefix: str) -> App:
        """Copy the layers of ``other`` into this app under ``prefix``."""
        for layer in other.get_layers():
            path = prefix + layer.path
            if not layer.path:
                path += "/.*"
            self.add_layer(replace(layer, path=path))
        return self