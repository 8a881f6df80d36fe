"""
Call correlator

Performs the round trip of a single call over a client transport and turns the
raw reply into an Outcome tied to the call's id.
"""

import time
import logging
from typing import Optional

from seamrpc.adapters.transport import ClientTransport
from seamrpc.protocol import codec
from seamrpc.protocol.errors import (
    EmptyResponseFault,
    SeamRPCError,
    SyntaxFault,
    TransportFault,
)
from seamrpc.protocol.messages import Call, Error, Outcome
from seamrpc.protocol.spec import SpecVersion
from seamrpc.telemetry.metrics import increment_counter, record_latency
from seamrpc.telemetry.tracer import create_span

logger = logging.getLogger(__name__)


def exchange(transport: ClientTransport, payload: bytes, method: str) -> bytes:
    """Send payload through transport, normalising transport failures

    Raises:
        TransportFault: any failure raised by the transport
    """
    start_time = time.time()
    try:
        logger.debug(f"Sending request: {payload[:200]!r}")
        increment_counter("rpc.client.requests", 1, {"method": method})
        response = transport.send(payload)
    except SeamRPCError:
        increment_counter("rpc.client.errors", 1, {"type": "transport", "method": method})
        raise
    except Exception as e:
        logger.error(f"Transport failed while calling {method}: {str(e)}")
        increment_counter("rpc.client.errors", 1, {"type": "transport", "method": method})
        raise TransportFault(f"Transport error: {str(e)}") from e

    latency_ms = (time.time() - start_time) * 1000
    record_latency("rpc.client.latency", latency_ms, {"method": method})
    logger.debug(f"Received response, latency: {latency_ms:.2f}ms")
    return response


class CallCorrelator:
    """Sends one call and interprets its response"""

    def __init__(self, spec: SpecVersion = SpecVersion.V2):
        self.spec = SpecVersion.parse(spec)

    def send(self, transport: ClientTransport, call: Call) -> Optional[Outcome]:
        """Perform one blocking round trip for call

        Args:
            transport: Client transport
            call: Call to send; its outcome is attached on success

        Returns:
            Outcome: Result or Error; None for notifications

        Raises:
            SpecViolation: The call cannot be expressed in this spec version
            TransportFault: The transport failed
            EmptyResponseFault: No response bytes for a call expecting one
            SyntaxFault: Undecodable response or response matching no valid shape
        """
        payload = codec.serialize(self.spec, call)

        with create_span("rpc.client.call", {
            "rpc.system": "jsonrpc",
            "rpc.method": call.method,
            "rpc.jsonrpc.version": self.spec.value,
        }):
            response = exchange(transport, payload, call.method)

        if call.is_notification:
            return None

        outcome = self.interpret(call, response)
        call.outcome = outcome
        return outcome

    def interpret(self, call: Call, response: bytes) -> Outcome:
        """Decode and classify raw response bytes for call"""
        if codec.is_blank(response):
            increment_counter("rpc.client.errors", 1, {"type": "empty_response", "method": call.method})
            raise EmptyResponseFault("No response received")

        try:
            wire = codec.decode(response)
        except SyntaxFault as e:
            increment_counter("rpc.client.errors", 1, {"type": "invalid_encoding", "method": call.method})
            raise SyntaxFault("Invalid response encoding") from e

        try:
            outcome = codec.classify_response(self.spec, call.id, wire)
        except SyntaxFault:
            logger.error(f"Invalid JSON-RPC {self.spec.value} response for {call.method}: {str(wire)[:200]}")
            increment_counter("rpc.client.errors", 1, {"type": "invalid_response", "method": call.method})
            raise

        if isinstance(outcome, Error):
            logger.debug(f"RPC call error: {outcome.message}, code: {outcome.code}")
            increment_counter("rpc.client.errors", 1, {"type": "rpc_error", "method": call.method})
        else:
            increment_counter("rpc.client.success", 1, {"method": call.method})
        return outcome
