import pytest

from plonkcore.field import SERIALIZED_SIZE, Fr
from plonkcore.polynomial import Polynomial
from plonkcore.polynomial_store import PolynomialStore


def _poly(values):
    p = Polynomial(len(values))
    for i, v in enumerate(values):
        p[i] = v
    return p


def test_put_then_get_returns_same_object():
    store = PolynomialStore()
    poly = _poly([1, 2, 3])
    store.put("w_1", poly)
    assert store.get("w_1") is poly


def test_get_is_shared_reference():
    store = PolynomialStore()
    store.put("w_1", _poly([1, 2]))
    store.get("w_1")[0] = 9
    assert store.get("w_1")[0] == Fr(9)


def test_get_missing_raises_key_error():
    store = PolynomialStore()
    with pytest.raises(KeyError):
        store.get("missing")


def test_remove_returns_and_deletes():
    store = PolynomialStore()
    poly = _poly([4, 5])
    store.put("z", poly)
    removed = store.remove("z")
    assert removed is poly
    assert "z" not in store
    assert len(store) == 0


def test_remove_missing_raises_key_error():
    store = PolynomialStore()
    with pytest.raises(KeyError):
        store.remove("nothing")


def test_put_overwrites():
    store = PolynomialStore()
    store.put("a", _poly([1]))
    replacement = _poly([2, 3])
    store.put("a", replacement)
    assert len(store) == 1
    assert store.get("a") is replacement


def test_contains_and_len():
    store = PolynomialStore()
    store.put("a", Polynomial(2))
    store.put("b", Polynomial(3))
    assert "a" in store
    assert "c" not in store
    assert len(store) == 2


def test_size_in_bytes_counts_all_coefficients():
    store = PolynomialStore()
    store.put("a", Polynomial(3))
    store.put("b", Polynomial(5))
    assert store.size_in_bytes() == (3 + 5) * SERIALIZED_SIZE


def test_empty_store_size_is_zero():
    assert PolynomialStore().size_in_bytes() == 0


def test_str_lists_header_and_entries():
    store = PolynomialStore()
    store.put("q_m", Polynomial(2))
    text = str(store)
    assert text.startswith("PolynomialStore contents total size: 0 MB")
    assert f"PolynomialStore: q_m -> {2 * SERIALIZED_SIZE} bytes" in text