#
# File: SilverpopAPI/services/silverpop_connection.py
# Date: Oct 2026
# Description: Authenticated connection to the Silverpop XMLAPI endpoint.
#
# License: MIT License
#
# Usage: Owns the HTTP session, the login SessionID and the call/fault logs.
#        Every XMLAPI request goes through SilverpopConnection.call().
#
import logging
import time
from collections import namedtuple
from datetime import datetime

import requests
import urllib3
from zeep import Transport

from SilverpopAPI.config import Config
from SilverpopAPI.exceptions import SilverpopConnectionError
from SilverpopAPI.utils import response_parser
from SilverpopAPI.utils.value_tree import Sequence, Text
from SilverpopAPI.utils.xml_serializer import build_envelope

logger = logging.getLogger(__name__)

# One entry per request when transaction logging is on
LogEntry = namedtuple('LogEntry', 'timestamp duration_seconds request_xml response_xml')

REQUEST_HEADERS = {
    'Content-Type': 'text/xml;charset=UTF-8',
}


def build_transport(verify=None, connect_timeout=None, operation_timeout=None) -> Transport:
    """
    Creates the zeep Transport (backed by a requests.Session) used to POST envelopes.

    Args:
        verify: False (no certificate checks, the historical default), True,
            or a CA bundle path handed to requests as session.verify.
        connect_timeout / operation_timeout (int): seconds; default from Config.
    """
    if verify is None:
        verify = Config.SILVERPOP_VERIFY
    connect_timeout = connect_timeout or Config.SILVERPOP_CONNECT_TIMEOUT
    operation_timeout = operation_timeout or Config.SILVERPOP_OPERATION_TIMEOUT

    session = requests.Session()
    session.verify = verify
    if verify is False:
        urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)

    return Transport(
        session=session,
        timeout=connect_timeout,
        operation_timeout=(connect_timeout, operation_timeout),  # requests (connect, read)
    )


class SilverpopConnection:
    """
    One authenticated channel to the XMLAPI.

    Logs in on construction; the SessionID returned by <Login> is appended to
    every later request URL as ;jsessionid=<id>. Not thread-safe: use one
    connection per thread.
    """

    def __init__(self, endpoint, username, password, *, transport=None,
                 session_param=None, **transport_options):
        self.endpoint = endpoint
        self.username = username
        self.password = password
        self.session_param = session_param or Config.SILVERPOP_SESSION_PARAM
        self.transport = transport or build_transport(**transport_options)

        self._session_id = None
        self._session_log = []
        self._fault_log = []

        self.log_transactions = False
        self.log_faults = False

        self.login()

    @property
    def session_id(self):
        return self._session_id

    @property
    def session_log(self) -> tuple:
        return tuple(self._session_log)

    @property
    def fault_log(self) -> tuple:
        return tuple(self._fault_log)

    def call(self, xml: str) -> str:
        """
        Sends one envelope to the XMLAPI and returns the raw response body.

        <Fault> responses are not errors here; with fault logging on their
        FaultString texts are appended to fault_log.

        Raises:
            SilverpopConnectionError: the endpoint could not be reached.
        """
        return self._post(xml).text

    def login(self):
        """
        Sends <Login> and stores the returned SESSIONID.

        Raises:
            SilverpopConnectionError: unreachable endpoint, rejected credentials
                (with errorid/FaultString), or a response without SESSIONID.
            SilverpopDataError: the credentials cannot be written as XML text.
        """
        logger.info(f"Logging in to XMLAPI at {self.endpoint} as {self.username}")
        self._session_id = None
        login_xml = build_envelope([("Login", Sequence((
            ("USERNAME", Text(self.username or "")),
            ("PASSWORD", Text(self.password or "")),
        )))])
        resp = self._post(login_xml)

        # Raw bytes, so lxml honours the encoding declared by the response
        root = response_parser.parse_response(resp.content)
        fault = response_parser.find_first_text(root, response_parser.FAULT_STRING_TAG)
        session_id = response_parser.find_first_text(root, response_parser.SESSION_ID_TAG)

        if fault is not None:
            code = response_parser.find_first_text(root, response_parser.FAULT_CODE_TAG)
            logger.error("XMLAPI login rejected (errorid=%s): %s", code, fault)
            raise SilverpopConnectionError("remote rejected credentials", code=code, fault_message=fault)

        if not session_id:
            logger.error(f"No SESSIONID in login response from {self.endpoint}")
            raise SilverpopConnectionError("unexpected response shape")

        self._session_id = session_id.strip()
        logger.info("XMLAPI login OK (SessionID=%s)", self._session_id)

    def logout(self):
        """Best-effort <Logout>; the response is ignored."""
        if self._session_id is None:
            return
        try:
            self.call(build_envelope([("Logout", Sequence())]))
        except SilverpopConnectionError as e:
            logger.warning(f"XMLAPI logout failed: {e}")
        finally:
            self._session_id = None

    def _post(self, xml):
        url = self._url()
        call_time = time.time()
        start = time.perf_counter()
        try:
            resp = self.transport.post(url, xml.encode("utf-8"), dict(REQUEST_HEADERS))
        except requests.exceptions.RequestException as e:
            logger.error("XMLAPI request to %s failed: %s", self.endpoint, e)
            raise SilverpopConnectionError("endpoint unreachable") from e
        duration = time.perf_counter() - start

        if resp.status_code != 200:
            logger.warning("XMLAPI answered HTTP %s (%.3fs)", resp.status_code, duration)
        else:
            logger.debug("XMLAPI answered in %.3fs", duration)

        if self.log_transactions:
            self._session_log.append(LogEntry(
                timestamp=datetime.fromtimestamp(call_time),
                duration_seconds=duration,
                request_xml=xml,
                response_xml=resp.text,
            ))

        if self.log_faults:
            for fault in response_parser.fault_strings(resp.content):
                logger.info("XMLAPI fault: %s", fault)
                self._fault_log.append(fault)

        return resp

    def _url(self):
        if self._session_id:
            return f"{self.endpoint};{self.session_param}={self._session_id}"
        return self.endpoint
