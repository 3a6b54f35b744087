import re
from dataclasses import replace

from layermux.layer import Layer
from layermux.store import LayersStore


def _noop(writer, request):
    return None


def test_add_layer_names_and_compiles():
    store = LayersStore()
    store.add_layer(Layer(path="/users/{id}/"))
    (layer,) = store.get_layers()
    assert layer.name == "l-0"
    assert layer.regexp is not None
    assert layer.regexp.match("/users/42/")["id"] == "42"


def test_add_layer_returns_store_for_chaining():
    store = LayersStore()
    assert store.add_layer(Layer()) is store
    assert store.use(Layer(), _noop) is store


def test_use_sets_handlers():
    store = LayersStore()
    store.use(Layer(name="a"), _noop, _noop)
    (layer,) = store.get_layers()
    assert tuple(layer.handlers) == (_noop, _noop)


def test_handle_func_sets_path():
    store = LayersStore()
    store.handle_func("/admin/", Layer(), _noop)
    (layer,) = store.get_layers()
    assert layer.path == "/admin/"
    assert layer.methods == ()


def test_get_layers_sorted_by_priority_stable():
    store = LayersStore()
    store.use(Layer(name="a", priority=1))
    store.use(Layer(name="b", priority=5))
    store.use(Layer(name="c", priority=1))
    store.use(Layer(name="d", priority=5))
    assert [layer.name for layer in store.get_layers()] == ["b", "d", "a", "c"]


def test_sorting_again_after_new_layer():
    store = LayersStore()
    store.use(Layer(name="low", priority=1))
    assert [layer.name for layer in store.get_layers()] == ["low"]
    store.use(Layer(name="high", priority=10))
    assert [layer.name for layer in store.get_layers()] == ["high", "low"]


def test_method_shortcuts():
    store = LayersStore()
    store.get("/g", Layer(), _noop)
    store.post("/p", Layer(), _noop)
    store.put("/u", Layer(), _noop)
    store.patch("/a", Layer(), _noop)
    store.delete("/d", Layer(), _noop)
    got = [(layer.path, tuple(layer.methods)) for layer in store.get_layers()]
    assert got == [
        ("/g", ("GET",)),
        ("/p", ("POST",)),
        ("/u", ("PUT",)),
        ("/a", ("PATCH",)),
        ("/d", ("DELETE",)),
    ]


def test_method_overrides_given_methods():
    store = LayersStore()
    store.method("OPTIONS", "/x", Layer(methods=("GET", "POST")), _noop)
    (layer,) = store.get_layers()
    assert tuple(layer.methods) == ("OPTIONS",)


def test_custom_normalizer_is_used():
    seen = []

    class Marker:
        def normalize(self, layer):
            seen.append(layer.path)
            return replace(layer, name="custom", regexp=re.compile(".*"))

    store = LayersStore(Marker())
    store.get("/x", Layer(), _noop)
    (layer,) = store.get_layers()
    assert seen == ["/x"]
    assert layer.name == "custom"


def test_get_layers_returns_copy():
    store = LayersStore()
    store.use(Layer())
    layers = store.get_layers()
    layers.clear()
    assert len(store.get_layers()) == 1