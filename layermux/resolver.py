"""Decides whether a layer applies to a request."""

from __future__ import annotations

from layermux.layer import Layer
from layermux.messages import Request


def is_allowed_method(layer: Layer, request: Request) -> bool:
    """True when the layer has no method filter or lists the request's method."""
    return not layer.methods or request.method in layer.methods


class RequestResolver:
    """Matches layers against a request's method and path."""

    def for_request(
        self, layer: Layer, request: Request, check_method: bool
    ) -> tuple[Layer, dict[str, str]] | None:
        """Return the layer and its path parameters, or None when it does not apply."""
        if check_method and not is_allowed_method(layer, request):
            return None

        if not layer.path:
            return layer, {}

        if layer.regexp is None:
            raise ValueError(f"layer {layer.name!r} has a path but no compiled pattern")

        match = layer.regexp.search(request.path)
        if match is None:
            return None

        return layer, match.groupdict(default="")