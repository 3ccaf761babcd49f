"""Tests for converting plain Python data into Text / Sequence / Element nodes."""

from decimal import Decimal
from types import SimpleNamespace

import pytest

from SilverpopAPI.exceptions import SilverpopDataError
from SilverpopAPI.utils.value_tree import Element, Sequence, Text, element, to_value_tree


@pytest.mark.parametrize("value, expected", [
    ("abc", Text("abc")),
    (12, Text("12")),
    (1.5, Text("1.5")),
    (Decimal("9.90"), Text("9.90")),
])
def test_scalars_become_text(value, expected):
    assert to_value_tree(value) == expected


def test_nodes_pass_through_unchanged():
    node = Sequence((("A", Text("x")),))
    assert to_value_tree(node) is node


def test_dict_keeps_insertion_order():
    assert to_value_tree({"B": "2", "A": "1"}) == Sequence((("B", Text("2")), ("A", Text("1"))))


def test_dict_with_int_keys_is_positional():
    tree = to_value_tree({0: {"ROW": "a"}, 1: {"ROW": "b"}})
    assert tree.entries[0] == (0, Sequence((("ROW", Text("a")),)))
    assert tree.entries[1][0] == 1


def test_list_is_keyed_by_position():
    tree = to_value_tree([{"ROW": "a"}, {"ROW": "b"}])
    assert [key for key, _ in tree.entries] == [0, 1]


def test_object_with_attributes_value_children_becomes_element():
    obj = SimpleNamespace(
        attributes={"name": "Record Id"},
        value="GH123",
        children={"SUB": "x"},
    )
    assert to_value_tree(obj) == Element(
        attributes=(("name", "Record Id"),),
        text="GH123",
        children=(("SUB", Text("x")),),
    )


def test_object_fields_are_all_optional():
    assert to_value_tree(SimpleNamespace(value=5)) == Element(text="5")
    assert to_value_tree(SimpleNamespace(children=[("A", "x")])) == Element(children=(("A", Text("x")),))


def test_element_helper_coerces_numbers():
    assert element(attributes={"id": 7}, text=3) == Element(attributes=(("id", "7"),), text="3")


@pytest.mark.parametrize("value", [None, True, print, lambda: 1, {1, 2}, object(), b"bytes"])
def test_unsupported_values_raise(value):
    with pytest.raises(SilverpopDataError, match="unsupported value type"):
        to_value_tree(value)


def test_nested_unsupported_value_raises():
    with pytest.raises(SilverpopDataError):
        to_value_tree({"A": {"B": [print]}})


def test_unsupported_key_raises():
    with pytest.raises(SilverpopDataError, match="unsupported key type"):
        to_value_tree({("a", "b"): "x"})


def test_bad_attributes_raise():
    with pytest.raises(SilverpopDataError):
        to_value_tree(SimpleNamespace(attributes="name=x"))
    with pytest.raises(SilverpopDataError):
        element(attributes={"id": object()})
