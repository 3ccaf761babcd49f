#
# File: SilverpopAPI/utils/response_parser.py
# Date: Oct 2026
# Description: Minimal lookups on XMLAPI responses (faults, session id).
#
# License: MIT License
#
# Usage: Used by SilverpopConnection for login checks and fault logging.
#        Responses are otherwise returned to the caller untouched.
#
import logging
from lxml import etree

logger = logging.getLogger(__name__)

FAULT_STRING_TAG = "FaultString"
FAULT_CODE_TAG = "errorid"
SESSION_ID_TAG = "SESSIONID"

# Tolerates truncated or sloppy responses; never resolves external entities.
_PARSER = etree.XMLParser(recover=True, resolve_entities=False, no_network=True)


def parse_response(response):
    """
    Parses a raw response (str or bytes) into an lxml root element.

    Returns:
        The root element, or None when nothing usable could be parsed
        (empty body, HTML error page with no root, etc.).
    """
    if response is None:
        return None
    if isinstance(response, str):
        response = response.encode("utf-8")
    if not response.strip():
        return None
    try:
        return etree.fromstring(response, parser=_PARSER)
    except (etree.XMLSyntaxError, ValueError) as e:
        logger.warning("Could not parse XMLAPI response: %s", e)
        return None


def find_texts(root, tag: str) -> list[str]:
    """Text of every element named `tag` (any namespace), in document order."""
    if root is None:
        return []
    return ["".join(el.itertext()) for el in root.iter(f"{{*}}{tag}")]


def find_first_text(root, tag: str) -> str | None:
    texts = find_texts(root, tag)
    return texts[0] if texts else None


def fault_strings(response) -> list[str]:
    return find_texts(parse_response(response), FAULT_STRING_TAG)
