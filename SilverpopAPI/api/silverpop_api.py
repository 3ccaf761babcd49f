#
# File: SilverpopAPI/api/silverpop_api.py
# Date: Oct 2026
# Description: Public client for the Silverpop XMLAPI: batch calls, send them in one envelope.
#
# License: MIT License
#
# Usage:
#   api = SilverpopClient(endpoint, username, password)
#   xml = api.build("GetLists", {"VISIBILITY": 1, "LIST_TYPE": 2}).execute()
#
import logging

from SilverpopAPI.config import Config
from SilverpopAPI.services.silverpop_connection import SilverpopConnection
from SilverpopAPI.utils.value_tree import to_value_tree
from SilverpopAPI.utils.xml_serializer import build_envelope, pretty_print_xml

logger = logging.getLogger(__name__)


class SilverpopClient:
    """
    Batches XMLAPI calls and executes them through one SilverpopConnection.

    Payloads are raw XML strings (wrapped in <FunctionName>) or structured data:
    Text / Sequence / Element nodes, or plain dicts, lists and scalars.
    """

    def __init__(self, endpoint=None, username=None, password=None, *, connection=None, **connection_options):
        if connection is None:
            connection = SilverpopConnection(
                endpoint or Config.SILVERPOP_ENDPOINT,
                username if username is not None else Config.SILVERPOP_USERNAME,
                password if password is not None else Config.SILVERPOP_PASSWORD,
                **connection_options,
            )
        self.connection = connection
        self._calls = []

        if Config.SILVERPOP_LOG_CALLS:
            self.enable_logging()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        if exc_type is not None:
            logger.error("Exception inside XMLAPI session: %s(%s)", exc_type.__name__, exc)
        self.logout()

    @property
    def pending(self) -> tuple:
        """Calls queued for the next execute(), as (function_name, payload) pairs."""
        return tuple(self._calls)

    def build(self, function, data, reset_first=False):
        """
        Queues one XMLAPI call.

        Args:
            function (str): XMLAPI function name, e.g. "AddRecipient".
            data: raw XML string (the content of <function>), or structured data.
            reset_first (bool): drop previously queued calls first.

        Returns:
            self, for chaining.

        Raises:
            SilverpopDataError: `data` cannot be converted. The queue is left
                as it was (apart from reset_first, which happens first).
        """
        if reset_first:
            self.rebuild()

        payload = data if isinstance(data, str) else to_value_tree(data)
        self._calls.append((function, payload))
        return self

    def rebuild(self):
        """Drops queued calls without sending them."""
        self._calls = []

    def execute(self) -> str:
        """
        Sends all queued calls in one envelope and returns the raw XML response.

        <Fault> elements in the response are not raised; inspect the response
        or get_fault_log().

        Raises:
            SilverpopDataError: a queued call cannot be serialized. Nothing is
                sent and the queue is kept.
            SilverpopConnectionError: the endpoint could not be reached.
        """
        envelope = build_envelope(self._calls)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("XMLAPI request:\n%s", pretty_print_xml(envelope))

        try:
            return self.connection.call(envelope)
        finally:
            self.rebuild()

    def enable_logging(self):
        """Turns on transaction and <Fault> logging on the connection."""
        self.connection.log_transactions = True
        self.connection.log_faults = True

    def get_session_log(self) -> tuple:
        return self.connection.session_log

    def get_fault_log(self) -> tuple:
        return self.connection.fault_log

    def logout(self):
        self.connection.logout()
