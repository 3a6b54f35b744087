import pytest

from layermux.layer import Layer, StdNormalizer
from layermux.messages import Request
from layermux.resolver import RequestResolver, is_allowed_method


def _normalized(**kwargs):
    return StdNormalizer().normalize(Layer(**kwargs))


def test_is_allowed_method_without_filter():
    assert is_allowed_method(Layer(), Request("DELETE", "/"))


def test_is_allowed_method_with_filter():
    layer = Layer(methods=["POST", "GET"])
    assert is_allowed_method(layer, Request("GET", "/"))
    assert not is_allowed_method(layer, Request("PUT", "/"))


def test_layer_without_path_matches_everything():
    layer = _normalized()
    result = RequestResolver().for_request(layer, Request("GET", "/anything/"), True)
    assert result == (layer, {})


def test_method_mismatch_returns_none():
    layer = _normalized(methods=["POST"])
    assert RequestResolver().for_request(layer, Request("GET", "/"), True) is None


def test_method_ignored_when_not_checked():
    layer = _normalized(methods=["POST"])
    result = RequestResolver().for_request(layer, Request("GET", "/"), False)
    assert result[0] is layer


def test_path_mismatch_returns_none():
    layer = _normalized(path="/users/")
    assert RequestResolver().for_request(layer, Request("GET", "/admin/"), True) is None


def test_path_params_extracted():
    layer = _normalized(path="/city/{slug}/")
    found, params = RequestResolver().for_request(
        layer, Request("GET", "/city/london/"), True
    )
    assert found is layer
    assert params == {"slug": "london"}


def test_static_path_gives_no_params():
    layer = _normalized(path="/admin/")
    assert RequestResolver().for_request(layer, Request("GET", "/admin/"), True) == (
        layer,
        {},
    )


def test_unnormalized_layer_with_path_raises():
    with pytest.raises(ValueError):
        RequestResolver().for_request(Layer(path="/a/"), Request("GET", "/a/"), True)