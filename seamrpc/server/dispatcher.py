"""
JSON-RPC dispatcher

Turns raw request bytes into raw response bytes: decodes, validates each
element, invokes the registered procedure and frames results and errors for
the configured spec version. A dispatch cycle keeps its responses in a local
list, so one Dispatcher can serve several listeners.
"""

import time
import logging
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from seamrpc.adapters.transport import ServerTransport
from seamrpc.protocol import codec
from seamrpc.protocol.errors import (
    ErrorCode,
    InvalidParamsFault,
    ProcedureFault,
    SyntaxFault,
)
from seamrpc.protocol.messages import InboundCall, Malformed
from seamrpc.protocol.spec import SpecVersion, rules_for
from seamrpc.server.procedures import ProcedureTable, invoke
from seamrpc.telemetry.metrics import increment_counter, record_latency
from seamrpc.telemetry.tracer import create_span

logger = logging.getLogger(__name__)


class Dispatcher:
    """
    Server-side JSON-RPC dispatcher.

    A top-level array is always processed as a batch and answered with an
    array, including `[x]`. Notifications never produce output; when no
    response object is produced at all, dispatch() returns None.
    """

    def __init__(self,
                 procedures: Union[ProcedureTable, Mapping[str, Callable]],
                 spec: SpecVersion = SpecVersion.V2):
        """
        Args:
            procedures: ProcedureTable or plain mapping of name -> callable
            spec: Spec version used to validate requests and frame responses
        """
        if not isinstance(procedures, ProcedureTable):
            procedures = ProcedureTable(procedures)
        self.procedures = procedures.freeze()
        self.spec = SpecVersion.parse(spec)
        self.rules = rules_for(self.spec)

    def dispatch(self, raw: Union[bytes, str, None]) -> Optional[bytes]:
        """Process one inbound payload

        Args:
            raw: Request bytes as delivered by the transport

        Returns:
            bytes: Serialized response, or None when there is nothing to send
        """
        start_time = time.time()
        increment_counter("rpc.server.requests", 1, {"spec": self.spec.value})

        if codec.is_blank(raw):
            logger.debug("Empty request received")
            increment_counter("rpc.server.errors", 1, {"type": "invalid_request"})
            return codec.encode(self.rules.format_error(None, ErrorCode.INVALID_REQUEST))

        try:
            decoded = codec.decode(raw)
        except SyntaxFault as e:
            logger.error(f"JSON parse error: {str(e)}")
            increment_counter("rpc.server.errors", 1, {"type": "parse_error"})
            return codec.encode(self.rules.format_error(None, ErrorCode.PARSE_ERROR, data=str(e)))

        is_batch = isinstance(decoded, list)
        elements = decoded if is_batch else [decoded]

        responses: List[bytes] = []
        for element in elements:
            response = self._process(element)
            if response is not None:
                responses.append(self._render(response))

        latency_ms = (time.time() - start_time) * 1000
        record_latency("rpc.server.latency", latency_ms, {"batch": is_batch})

        if not responses:
            return None
        if is_batch:
            return b"[" + b",".join(responses) + b"]"
        return responses[0]

    def handle(self, transport: ServerTransport) -> None:
        """Serve one request from transport; an empty payload is written when there is no response"""
        response = self.dispatch(transport.receive_request())
        transport.send_response(response or b"")

    def _process(self, element: Any) -> Optional[Dict[str, Any]]:
        """Process one request element; returns the response object or None"""
        inbound = self.rules.classify_inbound(element)

        if isinstance(inbound, Malformed):
            logger.warning(f"Invalid request: {inbound.reason}")
            increment_counter("rpc.server.errors", 1, {"type": "invalid_request"})
            return self.rules.format_error(inbound.id, ErrorCode.INVALID_REQUEST, data=inbound.reason)

        if inbound.is_notification:
            increment_counter("rpc.server.notifications", 1, {"method": inbound.method})
            logger.debug(f"Received notification: {inbound.method}")

        procedure = self.procedures.resolve(inbound.method)
        if procedure is None:
            increment_counter("rpc.server.errors", 1, {"type": "method_not_found", "method": inbound.method})
            return self._error(inbound, ErrorCode.METHOD_NOT_FOUND, data=inbound.method)

        with create_span("rpc.server.invoke", {
            "rpc.system": "jsonrpc",
            "rpc.method": inbound.method,
            "rpc.jsonrpc.version": self.spec.value,
        }):
            try:
                result = invoke(procedure, inbound.params)
            except InvalidParamsFault as e:
                increment_counter("rpc.server.errors", 1, {"type": "invalid_params", "method": inbound.method})
                return self._error(inbound, ErrorCode.INVALID_PARAMS, e.message, e.data)
            except ProcedureFault as e:
                increment_counter("rpc.server.errors", 1, {"type": "procedure_fault", "method": inbound.method})
                code = e.code if e.code is not None else ErrorCode.INTERNAL_ERROR
                return self._error(inbound, code, e.message, e.data)
            except Exception as e:
                logger.exception(f"Error executing method {inbound.method}")
                increment_counter("rpc.server.errors", 1, {"type": "internal_error", "method": inbound.method})
                return self._error(inbound, ErrorCode.INTERNAL_ERROR, str(e))

        if inbound.is_notification:
            return None
        return self.rules.format_result(inbound.id, result)

    def _error(self, inbound: InboundCall, code: int, message: str = "", data: Any = None) -> Optional[Dict[str, Any]]:
        if inbound.is_notification:
            return None
        return self.rules.format_error(inbound.id, code, message, data)

    def _render(self, response: Dict[str, Any]) -> bytes:
        """Encode one response object; unserializable results become internal errors"""
        try:
            return codec.encode(response)
        except (TypeError, ValueError) as e:
            logger.error(f"Response is not JSON serializable: {str(e)}")
            increment_counter("rpc.server.errors", 1, {"type": "unserializable_result"})
            return codec.encode(self.rules.format_error(
                response.get("id"), ErrorCode.INTERNAL_ERROR, f"Result is not JSON serializable: {e}"
            ))
