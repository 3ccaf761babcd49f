#
# File: SilverpopAPI/utils/value_tree.py
# Date: Oct 2026
# Description: Structured payload model for XMLAPI calls (Text / Sequence / Element).
#
# License: MIT License
#
# Usage: Build payloads directly from these nodes, or convert plain Python data
#        with to_value_tree() before handing them to the serializer.
#
from dataclasses import dataclass
from decimal import Decimal
from typing import Union

from SilverpopAPI.exceptions import SilverpopDataError


@dataclass(frozen=True)
class Text:
    """Leaf node: rendered as the text content of its element."""
    value: str


@dataclass(frozen=True)
class Sequence:
    """
    Ordered multimap of (key, node) pairs.

    A str key is a tag name. An int key is positional: the serializer skips it
    and renders the single (tag, node) pair held by its value instead. This is
    how several sibling elements with the same tag are expressed, e.g.

        Sequence((
            (0, Sequence((("COLUMN", Text("a")),))),
            (1, Sequence((("COLUMN", Text("b")),))),
        ))
    """
    entries: tuple = ()


@dataclass(frozen=True)
class Element:
    """
    Explicit element with attributes, optional text and children.
    Rendered in that order: attributes, then text, then children.
    """
    attributes: tuple = ()   # ((name, value), ...)
    text: Union[str, None] = None
    children: tuple = ()     # ((tag, node), ...)


ValueTree = Union[Text, Sequence, Element]

_NUMERIC_TYPES = (int, float, Decimal)


def element(attributes=None, text=None, children=None) -> Element:
    """
    Convenience constructor accepting dicts/lists for Element fields.

    Args:
        attributes (dict | list[tuple] | None): attribute name -> value, in order.
        text (str | int | float | None): text content.
        children (dict | list[tuple] | None): child tag -> payload, in order.
            Payloads are converted with to_value_tree().
    """
    return Element(
        attributes=tuple((k, _coerce_text(v)) for k, v in _pairs(attributes, "attributes")),
        text=_coerce_text(text) if text is not None else None,
        children=tuple((k, to_value_tree(v)) for k, v in _pairs(children, "children")),
    )


def to_value_tree(data) -> ValueTree:
    """
    Converts plain Python data into a ValueTree.

      str / int / float / Decimal      -> Text
      dict                             -> Sequence keyed by its keys (str or int)
      list / tuple                     -> Sequence keyed by position
      object with attributes/value/text/children attributes -> Element
      Text / Sequence / Element        -> returned unchanged

    Raises:
        SilverpopDataError: for anything else (None, bool, callables, sets...).
    """
    if isinstance(data, (Text, Sequence, Element)):
        return data
    if isinstance(data, bool) or data is None:
        raise SilverpopDataError(f"unsupported value type: {type(data).__name__}")
    if isinstance(data, str):
        return Text(data)
    if isinstance(data, _NUMERIC_TYPES):
        return Text(str(data))
    if isinstance(data, dict):
        entries = []
        for key, value in data.items():
            if isinstance(key, bool) or not isinstance(key, (str, int)):
                raise SilverpopDataError(f"unsupported key type: {type(key).__name__}")
            entries.append((key, to_value_tree(value)))
        return Sequence(tuple(entries))
    if isinstance(data, (list, tuple)):
        return Sequence(tuple((i, to_value_tree(item)) for i, item in enumerate(data)))
    if not callable(data) and any(hasattr(data, name) for name in ("attributes", "value", "text", "children")):
        text = getattr(data, "value", None)
        if text is None:
            text = getattr(data, "text", None)
        return element(
            attributes=getattr(data, "attributes", None),
            text=text,
            children=getattr(data, "children", None),
        )
    raise SilverpopDataError(f"unsupported value type: {type(data).__name__}")


def _pairs(data, what):
    if data is None:
        return []
    if isinstance(data, dict):
        return list(data.items())
    if isinstance(data, (list, tuple)):
        pairs = []
        for item in data:
            if not isinstance(item, (list, tuple)) or len(item) != 2:
                raise SilverpopDataError(f"cannot convert {what} item {item!r} to a (name, value) pair")
            pairs.append(tuple(item))
        return pairs
    raise SilverpopDataError(f"cannot convert {what} type {type(data).__name__} to pairs")


def _coerce_text(value) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, _NUMERIC_TYPES) and not isinstance(value, bool):
        return str(value)
    raise SilverpopDataError(f"cannot convert text type {type(value).__name__} to string")
