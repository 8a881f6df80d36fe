"""
JSON-RPC Protocol Module

Version-aware message construction, classification and error taxonomy:
- spec: SpecVersion and the per-version rules
- codec: serialization and classification entry points
- messages: Call / Outcome / inbound message types
- errors: error codes and fault hierarchy

Nothing here performs I/O.
"""

from .errors import (
    ErrorCode,
    SeamRPCError,
    TransportFault,
    EmptyResponseFault,
    SyntaxFault,
    SpecViolation,
    ProtocolFault,
    ProcedureFault,
    InvalidParamsFault,
    RemoteError,
)
from .messages import NO_ID, Call, Result, Error, Outcome, InboundCall, Malformed, generate_id
from .spec import SpecVersion, rules_for

__all__ = [
    "ErrorCode",
    "SeamRPCError",
    "TransportFault",
    "EmptyResponseFault",
    "SyntaxFault",
    "SpecViolation",
    "ProtocolFault",
    "ProcedureFault",
    "InvalidParamsFault",
    "RemoteError",
    "NO_ID",
    "Call",
    "Result",
    "Error",
    "Outcome",
    "InboundCall",
    "Malformed",
    "generate_id",
    "SpecVersion",
    "rules_for",
]
