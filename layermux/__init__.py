"""Layered HTTP request multiplexer with middleware chains, path parameters and priorities."""

__version__ = "0.1.0"
__all__ = ["app", "example", "layer", "messages", "resolver", "runner", "store"]