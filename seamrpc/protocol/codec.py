"""
Message codec

Stateless functions converting between Calls/Outcomes and JSON-RPC wire bytes
for a given spec version.
"""

import json
import logging
from typing import Any, Dict, Iterable, Union

from seamrpc.protocol.errors import SyntaxFault
from seamrpc.protocol.messages import Call, InboundCall, Malformed, Outcome
from seamrpc.protocol.spec import SpecVersion, rules_for

logger = logging.getLogger(__name__)


def encode(obj: Any) -> bytes:
    """Serialize a wire object to compact ASCII JSON

    Non-ASCII text is escaped, so lone surrogates survive the trip. NaN and
    infinities are rejected with ValueError since JSON has no literal for them.
    """
    return json.dumps(obj, separators=(",", ":"), allow_nan=False).encode("ascii")


def decode(raw: Union[bytes, str]) -> Any:
    """Parse JSON bytes into a wire object

    Raises:
        SyntaxFault: the bytes are not valid UTF-8 JSON
    """
    try:
        if isinstance(raw, (bytes, bytearray)):
            raw = raw.decode("utf-8")
        return json.loads(raw)
    except (UnicodeDecodeError, ValueError, RecursionError) as e:
        raise SyntaxFault(f"Invalid JSON: {e}") from e


def is_blank(raw: Union[bytes, str, None]) -> bool:
    """True for None, empty or whitespace-only payloads"""
    return raw is None or not raw.strip()


def serialize(spec: SpecVersion, call: Call) -> bytes:
    """Serialize one call or notification

    Raises:
        SpecViolation: the call uses a feature the selected JSON-RPC version forbids
    """
    return encode(rules_for(spec).serialize_call(call))


def serialize_batch(spec: SpecVersion, calls: Iterable[Call]) -> bytes:
    """Serialize several calls into one JSON array"""
    rules = rules_for(spec)
    return encode([rules.serialize_call(call) for call in calls])


def classify_response(spec: SpecVersion, original_id: Any, wire: Any) -> Outcome:
    """Interpret a decoded response for the call identified by original_id

    Raises:
        SyntaxFault: the object is neither a valid error nor a valid result
    """
    outcome = rules_for(spec).classify_response(original_id, wire)
    if outcome is None:
        logger.debug(f"Response does not match call {original_id!r}: {str(wire)[:200]}")
        raise SyntaxFault("Invalid response structure")
    return outcome


def classify_inbound(spec: SpecVersion, wire: Any) -> Union[InboundCall, Malformed]:
    """Classify a decoded inbound element as request, notification or malformed"""
    return rules_for(spec).classify_inbound(wire)


def format_result(spec: SpecVersion, call_id: Any, value: Any) -> Dict[str, Any]:
    return rules_for(spec).format_result(call_id, value)


def format_error(spec: SpecVersion, call_id: Any, code: int, message: str = "", data: Any = None) -> Dict[str, Any]:
    return rules_for(spec).format_error(call_id, code, message, data)
