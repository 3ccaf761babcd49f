"""Client for the Silverpop (Acoustic Campaign) XMLAPI."""

from SilverpopAPI.api.silverpop_api import SilverpopClient
from SilverpopAPI.exceptions import SilverpopConnectionError, SilverpopDataError
from SilverpopAPI.services.silverpop_connection import LogEntry, SilverpopConnection
from SilverpopAPI.utils.value_tree import Element, Sequence, Text, element, to_value_tree
from SilverpopAPI.utils.xml_serializer import build_envelope, render_node

__all__ = [
    "Element",
    "LogEntry",
    "Sequence",
    "SilverpopClient",
    "SilverpopConnection",
    "SilverpopConnectionError",
    "SilverpopDataError",
    "Text",
    "build_envelope",
    "element",
    "render_node",
    "to_value_tree",
]
