"""
Batch coordinator

Sends several calls as one JSON array and matches the answers back to the
calls by id.
"""

import logging
from typing import Any, Dict, List, Sequence

from seamrpc.adapters.transport import ClientTransport
from seamrpc.client.correlator import CallCorrelator, exchange
from seamrpc.protocol import codec
from seamrpc.protocol.errors import (
    EmptyResponseFault,
    ProtocolFault,
    SpecViolation,
    SyntaxFault,
)
from seamrpc.protocol.messages import Call, Outcome
from seamrpc.protocol.spec import SpecVersion, rules_for
from seamrpc.telemetry.metrics import increment_counter
from seamrpc.telemetry.tracer import create_span

logger = logging.getLogger(__name__)


class BatchCoordinator:
    """
    Groups calls into a single batch request.

    Response elements that match none of the pending calls are dropped and
    recorded in `faults` (reset on every send_batch).
    """

    def __init__(self, spec: SpecVersion = SpecVersion.V2):
        self.spec = SpecVersion.parse(spec)
        self.faults: List[ProtocolFault] = []

    def send_batch(self, transport: ClientTransport, calls: Sequence[Call]) -> Dict[Any, Outcome]:
        """Send calls in one transport operation

        Args:
            transport: Client transport
            calls: Calls and notifications, in submission order

        Returns:
            Dict: call id -> Outcome for every answered call; notifications
            and unanswered calls are absent

        Raises:
            SpecViolation: Empty batch, or a call not expressible in this spec
            TransportFault: The transport failed
            EmptyResponseFault: No response bytes while calls are pending
            SyntaxFault: The response is not decodable or not an array
        """
        self.faults = []
        calls = list(calls)
        if not calls:
            raise SpecViolation("Batch must contain at least one call")

        # A single call goes out un-batched
        if len(calls) == 1:
            call = calls[0]
            outcome = CallCorrelator(self.spec).send(transport, call)
            return {} if call.is_notification else {call.id: outcome}

        payload = codec.serialize_batch(self.spec, calls)
        pending = [call for call in calls if not call.is_notification]

        with create_span("rpc.client.batch", {
            "rpc.system": "jsonrpc",
            "rpc.jsonrpc.version": self.spec.value,
            "rpc.batch.size": len(calls),
        }):
            response = exchange(transport, payload, "batch")

        if not pending:
            return {}

        if codec.is_blank(response):
            raise EmptyResponseFault("No response received")

        try:
            elements = codec.decode(response)
        except SyntaxFault as e:
            raise SyntaxFault("Invalid response encoding") from e

        if isinstance(elements, dict):
            # e.g. a top-level parse error answering the whole batch
            elements = [elements]
        if not isinstance(elements, list):
            raise SyntaxFault("Batch response must be an array")

        return self._demultiplex(elements, pending)

    def _demultiplex(self, elements: List[Any], pending: List[Call]) -> Dict[Any, Outcome]:
        rules = rules_for(self.spec)
        outcomes: Dict[Any, Outcome] = {}
        unmatched = list(pending)

        for index, element in enumerate(elements):
            for call in unmatched:
                outcome = rules.classify_response(call.id, element)
                if outcome is not None:
                    call.outcome = outcome
                    outcomes[call.id] = outcome
                    unmatched.remove(call)
                    break
            else:
                fault = ProtocolFault(f"Batch response element {index} matches no pending call")
                self.faults.append(fault)
                increment_counter("rpc.client.errors", 1, {"type": "unmatched_batch_element"})
                logger.warning(f"{fault}: {str(element)[:200]}")

        if unmatched:
            logger.debug(f"{len(unmatched)} batched call(s) received no response")
        return outcomes
