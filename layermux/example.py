"""A small demonstration of routing through middleware layers."""

from __future__ import annotations

import argparse
from typing import Any, Sequence

from layermux.app import App
from layermux.layer import Layer
from layermux.messages import Request, ResponseRecorder


def _build_app() -> App:
    app = App()

    def action(writer: Any, request: Request) -> None:
        writer.write("Hello")

    def action_alex(writer: Any, request: Request) -> None:
        writer.write("Hello Alex")

    def middleware_for_admin(writer: Any, request: Request) -> None:
        # runs only for `/admin/*/`
        app.serve_http(writer, request)

    def middleware_for_all(writer: Any, request: Request) -> None:
        app.serve_http(writer, request)

    (
        app.use(Layer(path="/admin/{slug}/"), middleware_for_admin)
        .use(Layer(), middleware_for_all)
        .get("/", Layer(), action)
        .get("/alex/", Layer(), action_alex)
    )
    return app


def main(argv: Sequence[str] | None = None) -> int:
    """Dispatch one GET request and print the response body."""
    parser = argparse.ArgumentParser(description="Route a GET request and print the body.")
    parser.add_argument("path", nargs="?", default="/alex/")
    args = parser.parse_args(argv)

    app = _build_app()
    recorder = ResponseRecorder()
    app.serve_http(recorder, Request(method="GET", path=args.path))
    print(recorder.text())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())