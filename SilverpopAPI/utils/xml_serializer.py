#
# File: SilverpopAPI/utils/xml_serializer.py
# Date: Oct 2026
# Description: Serializes batched XMLAPI calls into a single <Envelope><Body> document.
#
# License: MIT License
#
# Usage: Used by SilverpopClient.execute(); pure functions, no I/O.
#
import logging
from lxml import etree

from SilverpopAPI.exceptions import SilverpopDataError
from SilverpopAPI.utils.value_tree import Element, Sequence, Text

logger = logging.getLogger(__name__)

ENVELOPE_TAG = "Envelope"
BODY_TAG = "Body"


def build_envelope(calls) -> str:
    """
    Builds the request document for a batch of calls.

    Args:
        calls: iterable of (function_name, payload) pairs. A str payload is raw
            XML placed verbatim inside <function_name>; any other payload must
            be a ValueTree node and supplies the content of <function_name>.

    Returns:
        The envelope as a string, without XML declaration, e.g.
        '<Envelope><Body><A>x</A><B>y</B></Body></Envelope>'.

    Raises:
        SilverpopDataError: a payload, tag name or raw fragment is invalid.
            Nothing is returned in that case, so a partial envelope is never sent.
    """
    envelope = etree.Element(ENVELOPE_TAG)
    body = etree.SubElement(envelope, BODY_TAG)

    for function_name, payload in calls:
        if isinstance(payload, str):
            body.append(_wrap_raw(function_name, payload))
        else:
            body.append(render_node(function_name, payload))

    return etree.tostring(envelope, encoding="unicode")


def render_node(tag, node):
    """
    Recursively renders one ValueTree node as an lxml element named `tag`.

    Text      -> <tag>text</tag>
    Sequence  -> <tag> with one child per entry; positional (int) keys are
                 skipped and their single (tag, node) pair is rendered instead
    Element   -> <tag attr="..."> text, then children

    Raises:
        SilverpopDataError: unsupported node, bad tag name or bad text/attribute type.
    """
    current = _create_element(tag)

    match node:
        case Text(value=value):
            _set_text(current, value)
        case Sequence(entries=entries):
            for key, child in _entries(entries):
                _append_entry(current, key, child)
        case Element(attributes=attributes, text=text, children=children):
            for name, value in _entries(attributes, "attributes"):
                _set_attribute(current, name, value)
            if text is not None:
                _set_text(current, text)
            for child_tag, child in _entries(children, "children"):
                _append_entry(current, child_tag, child)
        case _:
            raise SilverpopDataError(f"unsupported value type: {type(node).__name__}")

    return current


def pretty_print_xml(xml) -> str:
    """
    Pretty-prints an lxml element or an XML string for debug logs.
    Strings that do not parse are returned unchanged.
    """
    if isinstance(xml, (str, bytes)):
        try:
            xml = etree.fromstring(xml.encode("utf-8") if isinstance(xml, str) else xml)
        except etree.XMLSyntaxError:
            return xml if isinstance(xml, str) else xml.decode("utf-8", errors="replace")
    return etree.tostring(xml, pretty_print=True, encoding="unicode")


def _append_entry(parent, key, node):
    # Positional keys add no element of their own.
    while not isinstance(key, str):
        if isinstance(key, bool) or not isinstance(key, int):
            raise SilverpopDataError(f"could not convert key type {type(key).__name__} to XML")
        key, node = _single_pair(key, node)
    parent.append(render_node(key, node))


def _single_pair(index, node):
    if not isinstance(node, Sequence):
        raise SilverpopDataError(
            f"could not convert child type {type(node).__name__} at index {index} to XML; "
            f"expected a Sequence holding one (tag, value) pair"
        )
    entries = _entries(node.entries)
    if len(entries) != 1:
        raise SilverpopDataError(
            f"entry at index {index} must hold exactly one (tag, value) pair, got {len(entries)}"
        )
    return entries[0]


def _entries(entries, what="entries"):
    if isinstance(entries, dict):
        return list(entries.items())
    if not isinstance(entries, (list, tuple)):
        raise SilverpopDataError(f"cannot convert {what} type {type(entries).__name__} to pairs")
    for pair in entries:
        if not isinstance(pair, (list, tuple)) or len(pair) != 2:
            raise SilverpopDataError(f"cannot convert {what} item {pair!r} to a (name, value) pair")
    return list(entries)


def _create_element(tag):
    if not isinstance(tag, str):
        raise SilverpopDataError(f"could not convert tag type {type(tag).__name__} to XML")
    try:
        return etree.Element(tag)
    except ValueError as e:
        raise SilverpopDataError(f"invalid tag name {tag!r}: {e}") from e


def _set_attribute(current, name, value):
    if not isinstance(name, str):
        raise SilverpopDataError(f"could not convert attribute name type {type(name).__name__} to XML")
    if not isinstance(value, str):
        raise SilverpopDataError(f"cannot convert attribute {name!r} type {type(value).__name__} to string")
    try:
        current.set(name, value)
    except ValueError as e:
        raise SilverpopDataError(f"invalid attribute {name!r}: {e}") from e


def _set_text(current, value):
    if not isinstance(value, str):
        raise SilverpopDataError(f"cannot convert text type {type(value).__name__} to string")
    try:
        current.text = value
    except ValueError as e:
        # lxml rejects control characters XML 1.0 cannot carry
        raise SilverpopDataError(f"text cannot be represented in XML: {e}") from e


def _wrap_raw(function_name, xml):
    _create_element(function_name)
    try:
        return etree.fromstring(f"<{function_name}>{xml}</{function_name}>")
    except etree.XMLSyntaxError as e:
        logger.error("Raw XML for %s does not parse: %s", function_name, e)
        raise SilverpopDataError(f"raw XML for {function_name!r} is not well-formed: {e}") from e
