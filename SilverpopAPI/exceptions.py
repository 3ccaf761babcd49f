#
# File: SilverpopAPI/exceptions.py
# Date: Oct 2026
# Description: Error types raised by the Silverpop XMLAPI client.
#
# License: MIT License
#
# Usage: Catch SilverpopConnectionError around construction/login and calls,
#        SilverpopDataError around build()/execute() payload handling.
#


class SilverpopConnectionError(ConnectionError):
    """
    The XMLAPI endpoint could not be used: it was unreachable, it rejected
    the login credentials, or it answered the login with an unexpected shape.

    When the endpoint returned a <Fault>, `code` holds the <errorid> value and
    `fault_message` the <FaultString> text.
    """

    def __init__(self, message: str, code: str | None = None, fault_message: str | None = None) -> None:
        super().__init__(message)
        self.code = code
        self.fault_message = fault_message

    def __str__(self) -> str:
        message = self.args[0] if self.args else ""
        if self.fault_message is not None:
            return f'{message} (errorid={self.code}): "{self.fault_message}"'
        return message


class SilverpopDataError(ValueError):
    """A payload, attribute set or text value cannot be converted to XML."""
