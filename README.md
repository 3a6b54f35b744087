# layermux

layermux is a small HTTP request multiplexer built around *layers*. Each layer
holds one or more handlers. It may also hold a path pattern, a set of allowed
methods, a priority and a name. A request runs through the layers that match
it. A handler passes control on by calling the application again.

## Installation

```
pip install layermux
```

To run the test suite, install the test extra: `pip install layermux[test]`.

## Usage

```python
from layermux.app import App, get_mux_runner_ctx
from layermux.layer import Layer
from layermux.messages import Request, ResponseRecorder

app = App()

def log_everything(writer, request):
    writer.write(b"md; ")
    app.serve_http(writer, request)  # hand over to the next matching handler

def show_user(writer, request):
    runner = get_mux_runner_ctx(request.context)
    writer.write("user: " + runner.uri_params["name"])

app.use(Layer(), log_everything)
app.get("/users/{name:[a-z]+}/", Layer(), show_user)

recorder = ResponseRecorder()
app.serve_http(recorder, Request("GET", "/users/alex/"))
print(recorder.text())  # md; user: alex
```

A handler is any callable that takes `(writer, request)`.

### Requests and responses

`layermux.messages.Request` is a frozen dataclass with three fields:
`method`, `path` and a `context` mapping. `Request.with_context(context)`
returns a copy that carries a new context.

`layermux.messages.ResponseRecorder` collects everything handlers write to
it. `write()` accepts both `bytes` and `str` and returns the number of bytes
written. `text()` returns the body decoded as UTF-8.

### Layers

Each `layermux.layer.Layer` has these fields:

- `path` is a pattern such as `/city/{slug}/`. A placeholder matches `[^/]+`
  by default. You can restrict it inline, as in `{name:[a-z]+}`, or through
  the layer's `restrictions` mapping. The mapping takes precedence over the
  inline restriction. A layer with no path matches every path.
- `methods` limits a layer to the HTTP methods it lists. When it is empty,
  every method is allowed.
- `priority` decides the order in which layers run. Higher values run first.
  Layers with equal priority keep the order in which they were added.
- `name` is filled in automatically (`l-0`, `l-1`, …) when left empty.
- `meta` is a free-form dictionary.

`Layer.with_handlers(*handlers)` returns a copy of the layer with the given
handlers.

`layermux.layer.StdNormalizer` names layers and compiles their patterns
through `StdRegExpMaker`. `layermux.resolver.RequestResolver` decides whether
a layer applies to a request.

### Store and app

`layermux.store.LayersStore` offers `add_layer`, `use`, `handle_func`,
`method`, `get`, `post`, `put`, `patch` and `delete`. Each of them returns the
store, so calls can be chained. `get_layers()` returns the layers sorted by
priority.

`layermux.app.App` is a store that can dispatch requests. The first call to
`App.serve_http(writer, request)` creates a `layermux.runner.Runner` and puts
it into the request context. Every later call with that request runs the next
matching handler. Path parameters gathered along the way are stored in
`runner.uri_params`. You can fetch the runner with
`get_mux_runner_ctx(request.context)`. `runner.user_params` is a dictionary
that handlers can use for their own data.

If a handler delegates and no matching layer is left, the app raises
`layermux.runner.DelegationError`.

### Mounting

`App.mount(other, prefix)` copies the layers of another store into this app
and puts `prefix` in front of each path. A layer that had no path becomes
`prefix + "/.*"`. The method returns the app, so mounts can be chained.

## Example command

```
layermux-example [PATH]
```

The command builds a small demo application, sends it a `GET` request for
`PATH` and prints the response body. `PATH` defaults to `/alex/`, which
prints `Hello Alex`. For `/` it prints `Hello`.

## What it does not do

layermux does not include a network server and does not listen on a socket.
You dispatch requests by calling `App.serve_http` yourself, with a `Request`
and a writer such as `ResponseRecorder`. To serve real traffic, you need to
connect it to a server of your own choosing.