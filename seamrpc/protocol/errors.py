"""
Error codes and fault taxonomy

Defines the reserved JSON-RPC error codes and the exception hierarchy shared by
the client and server sides of the engine.
"""

from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Reserved JSON-RPC error codes"""
    PARSE_ERROR = -32700
    INVALID_REQUEST = -32600
    METHOD_NOT_FOUND = -32601
    INVALID_PARAMS = -32602
    INTERNAL_ERROR = -32603


DEFAULT_MESSAGES = {
    ErrorCode.PARSE_ERROR: "Parse error",
    ErrorCode.INVALID_REQUEST: "Invalid Request",
    ErrorCode.METHOD_NOT_FOUND: "Method not found",
    ErrorCode.INVALID_PARAMS: "Invalid params",
    ErrorCode.INTERNAL_ERROR: "Internal error",
}


def default_message(code: Any) -> str:
    """Return the standard message for a reserved code, or "" for application codes."""
    try:
        return DEFAULT_MESSAGES[ErrorCode(code)]
    except (ValueError, TypeError):
        return ""


def is_reserved_code(code: Any) -> bool:
    """Check whether code falls into the range reserved by JSON-RPC 2.0"""
    return isinstance(code, int) and not isinstance(code, bool) and -32768 <= code <= -32000


class SeamRPCError(Exception):
    """Base exception for all seamrpc errors."""
    pass


class TransportFault(SeamRPCError):
    """Raised when the underlying transport fails. The cause is kept as __cause__."""
    pass


class EmptyResponseFault(TransportFault):
    """The transport returned no response bytes for a call that expects one."""
    pass


class SyntaxFault(SeamRPCError):
    """Bytes could not be decoded, or a response matched no valid shape."""
    pass


class SpecViolation(SeamRPCError):
    """The caller attempted something the selected spec version forbids."""
    pass


class ProtocolFault(SeamRPCError):
    """A wire object does not fit the exchange it arrived in."""
    pass


class ProcedureFault(SeamRPCError):
    """
    Raised by host procedures to report a failure to the remote caller.

    The dispatcher maps it to -32603 unless `code` carries an application
    error code, in which case that code is returned unchanged.
    """

    def __init__(self, message: str = "", code: int = None, data: Any = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.data = data


class InvalidParamsFault(ProcedureFault):
    """Raised by host procedures to reject their parameters (-32602)."""

    def __init__(self, message: str = "", data: Any = None):
        super().__init__(message, code=ErrorCode.INVALID_PARAMS, data=data)


class RemoteError(SeamRPCError):
    """Raised by Client.call when the server answered with an error outcome."""

    def __init__(self, error):
        super().__init__(f"{error.message} (code {error.code})")
        self.error = error

    @property
    def code(self):
        return self.error.code

    @property
    def data(self):
        return self.error.data
