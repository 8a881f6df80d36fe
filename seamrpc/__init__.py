"""
SeamRPC - JSON-RPC 1.0 / 2.0 protocol engine

Builds and validates JSON-RPC messages for both spec versions, correlates
responses with pending calls (singly or in batches) and dispatches inbound
requests to registered procedures:

1. protocol: spec rules, codec, message types and fault taxonomy
2. client: CallCorrelator, BatchCoordinator and the Client facade
3. server: ProcedureTable and Dispatcher
4. adapters: byte transports (ZeroMQ, HTTP, in-process loopback)

Telemetry is reported through OpenTelemetry.
"""

from seamrpc.protocol import (
    SpecVersion,
    Call,
    Result,
    Error,
    NO_ID,
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
from seamrpc.client import Client, CallCorrelator, BatchCoordinator
from seamrpc.server import Dispatcher, ProcedureTable
from seamrpc.config import SeamConfig

__version__ = "0.1.0"

__all__ = [
    "SpecVersion",
    "Call",
    "Result",
    "Error",
    "NO_ID",
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
    "Client",
    "CallCorrelator",
    "BatchCoordinator",
    "Dispatcher",
    "ProcedureTable",
    "SeamConfig",
]
