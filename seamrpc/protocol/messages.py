"""
Message types

Plain data types exchanged between the codec, the client-side correlators and
the dispatcher. Wire encoding lives in `seamrpc.protocol.spec`.
"""

import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from seamrpc.protocol.errors import SpecViolation, is_reserved_code


class _NoId:
    """Marker for an id that is absent from the wire object (not JSON null)."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "NO_ID"

    def __bool__(self):
        return False

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self


NO_ID = _NoId()

CallID = Union[str, int, float, None, _NoId]
Params = Union[List[Any], Dict[str, Any], None]


def generate_id() -> str:
    """Generate a fresh request id (random 128 bits in UUID form)."""
    return str(uuid.uuid4())


def same_id(received: Any, expected: Any) -> bool:
    """Strict id comparison: same JSON type and equal value.

    `1` does not match `1.0` or `True`, and NO_ID matches nothing.
    """
    if received is NO_ID or expected is NO_ID:
        return False
    return type(received) is type(expected) and received == expected


@dataclass
class Result:
    """Successful outcome of a call."""
    value: Any = None


@dataclass
class Error:
    """Failed outcome of a call as reported by the server."""
    code: Any
    message: Any
    data: Any = None

    @property
    def is_standard(self) -> bool:
        return is_reserved_code(self.code)


Outcome = Union[Result, Error]


@dataclass
class Call:
    """
    A single RPC invocation.

    A fresh id is generated unless one is given. Notifications are built with
    `Call.notification()` and carry NO_ID.
    """
    method: str
    params: Params = None
    id: CallID = field(default_factory=generate_id)
    outcome: Optional[Outcome] = field(default=None, compare=False)

    def __post_init__(self):
        if not isinstance(self.method, str) or not self.method:
            raise SpecViolation("method must be a non-empty string")
        if isinstance(self.params, tuple):
            self.params = list(self.params)
        if self.params is not None and not isinstance(self.params, (list, dict)):
            raise SpecViolation(
                f"params must be a sequence or a mapping, got {type(self.params).__name__}"
            )

    @classmethod
    def notification(cls, method: str, params: Params = None) -> "Call":
        """Build a call that expects no response."""
        return cls(method, params, id=NO_ID)

    @property
    def is_notification(self) -> bool:
        return self.id is NO_ID

    @property
    def is_error(self) -> bool:
        return isinstance(self.outcome, Error)


@dataclass(frozen=True)
class InboundCall:
    """A validated inbound request or notification (server side)."""
    method: str
    params: Params = None
    id: CallID = NO_ID

    @property
    def is_notification(self) -> bool:
        return self.id is NO_ID


@dataclass(frozen=True)
class Malformed:
    """An inbound element that matched neither the request nor the notification shape."""
    reason: str
    id: Any = None
