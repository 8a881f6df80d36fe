"""
Spec version rules

Every decision that differs between JSON-RPC 1.0 and 2.0 lives in one rules
object per version. Callers obtain the rules with `rules_for(spec)` and never
branch on the version themselves.
"""

import abc
from enum import Enum
from typing import Any, Dict, Optional, Union

from seamrpc.protocol.errors import SpecViolation, default_message
from seamrpc.protocol.messages import (
    NO_ID,
    Call,
    Error,
    InboundCall,
    Malformed,
    Outcome,
    Result,
    same_id,
)


class SpecVersion(Enum):
    """Supported JSON-RPC spec versions"""
    V1 = "1.0"
    V2 = "2.0"

    @classmethod
    def parse(cls, value: Any) -> "SpecVersion":
        """Coerce "1.0", "2", 2.0, SpecVersion.V2 ... into a SpecVersion

        Raises:
            SpecViolation: unsupported version
        """
        if isinstance(value, cls):
            return value
        aliases = {
            "1.0": cls.V1, "1": cls.V1,
            "2.0": cls.V2, "2": cls.V2,
        }
        key = value.strip() if isinstance(value, str) else str(value)
        if key in aliases:
            return aliases[key]
        raise SpecViolation(f"Unsupported JSON-RPC spec version: {value!r}")


def _is_scalar_id(value: Any) -> bool:
    return value is None or (isinstance(value, (str, int, float)) and not isinstance(value, bool))


def _offending_id(wire: Any) -> Any:
    if isinstance(wire, dict) and _is_scalar_id(wire.get("id")):
        return wire.get("id")
    return None


class SpecRules(abc.ABC):
    """Serialization and validation rules of one spec version"""

    version: SpecVersion

    @abc.abstractmethod
    def serialize_call(self, call: Call) -> Dict[str, Any]:
        """Build the wire object for an outbound call or notification"""
        pass

    @abc.abstractmethod
    def match_error(self, original_id: Any, wire: Dict[str, Any]) -> Optional[Error]:
        pass

    @abc.abstractmethod
    def match_result(self, original_id: Any, wire: Dict[str, Any]) -> Optional[Result]:
        pass

    @abc.abstractmethod
    def classify_inbound(self, wire: Any) -> Union[InboundCall, Malformed]:
        """Validate an inbound element as a request or notification"""
        pass

    @abc.abstractmethod
    def format_result(self, call_id: Any, value: Any) -> Dict[str, Any]:
        pass

    @abc.abstractmethod
    def format_error(self, call_id: Any, code: int, message: str = "", data: Any = None) -> Dict[str, Any]:
        pass

    def classify_response(self, original_id: Any, wire: Any) -> Optional[Outcome]:
        """Match a response object against the id of a pending call.

        The error shape is checked before the result shape.

        Returns:
            Error or Result, or None when the object fits neither shape
        """
        if not isinstance(wire, dict):
            return None
        error = self.match_error(original_id, wire)
        if error is not None:
            return error
        return self.match_result(original_id, wire)

    @staticmethod
    def _error_object(code: int, message: str, data: Any) -> Dict[str, Any]:
        return {
            "code": int(code) if isinstance(code, int) else code,
            "message": message or default_message(code) or "Application error",
            "data": data,
        }


class V2Rules(SpecRules):
    """JSON-RPC 2.0"""

    version = SpecVersion.V2

    def serialize_call(self, call: Call) -> Dict[str, Any]:
        request = {"jsonrpc": "2.0", "method": call.method}
        if not call.is_notification:
            request["id"] = call.id
        if call.params is not None:
            request["params"] = call.params
        return request

    def match_error(self, original_id, wire):
        if wire.get("jsonrpc") != "2.0":
            return None
        error = wire.get("error")
        if not isinstance(error, dict) or "code" not in error or "message" not in error:
            return None
        response_id = wire.get("id")
        if response_id is not None and not same_id(response_id, original_id):
            return None
        return Error(error["code"], error["message"], error.get("data"))

    def match_result(self, original_id, wire):
        if wire.get("jsonrpc") != "2.0" or "id" not in wire or "result" not in wire:
            return None
        if not same_id(wire["id"], original_id):
            return None
        return Result(wire["result"])

    def classify_inbound(self, wire):
        if not isinstance(wire, dict):
            return Malformed("request must be an object")
        if wire.get("jsonrpc") != "2.0":
            return Malformed("jsonrpc member must be exactly \"2.0\"", _offending_id(wire))
        method = wire.get("method")
        if not isinstance(method, str):
            return Malformed("method must be a string", _offending_id(wire))
        params = wire.get("params")
        if params is not None and not isinstance(params, (list, dict)):
            return Malformed("params must be an array or an object", _offending_id(wire))
        if "id" in wire and not _is_scalar_id(wire["id"]):
            return Malformed("id must be a string, a number or null")
        return InboundCall(method, params, wire["id"] if "id" in wire else NO_ID)

    def format_result(self, call_id, value):
        return {"jsonrpc": "2.0", "id": call_id, "result": value}

    def format_error(self, call_id, code, message="", data=None):
        return {
            "jsonrpc": "2.0",
            "id": call_id,
            "error": self._error_object(code, message, data),
        }


class V1Rules(SpecRules):
    """JSON-RPC 1.0"""

    version = SpecVersion.V1

    def serialize_call(self, call: Call) -> Dict[str, Any]:
        request = {
            "method": call.method,
            "id": None if call.is_notification else call.id,
        }
        if call.params is not None:
            if isinstance(call.params, dict):
                raise SpecViolation("JSON-RPC 1.0 doesn't allow named parameters")
            request["params"] = call.params
        return request

    def match_error(self, original_id, wire):
        if "error" not in wire or "id" not in wire or wire["error"] is None:
            return None
        if wire["id"] is not None and not same_id(wire["id"], original_id):
            return None
        # 1.0 errors are opaque
        raw = wire["error"]
        return Error(raw, raw, raw)

    def match_result(self, original_id, wire):
        if "result" not in wire or "id" not in wire:
            return None
        if not same_id(wire["id"], original_id) and wire["result"] is not None:
            return None
        return Result(wire["result"])

    def classify_inbound(self, wire):
        if not isinstance(wire, dict):
            return Malformed("request must be an object")
        method = wire.get("method")
        if not isinstance(method, str):
            return Malformed("method must be a string", _offending_id(wire))
        params = wire.get("params")
        if params is not None and not isinstance(params, list):
            return Malformed("params must be an array", _offending_id(wire))
        if "id" in wire and not _is_scalar_id(wire["id"]):
            return Malformed("id must be a string, a number or null")
        return InboundCall(method, params, wire["id"] if "id" in wire else NO_ID)

    def format_result(self, call_id, value):
        return {"id": call_id, "result": value, "error": None}

    def format_error(self, call_id, code, message="", data=None):
        return {
            "id": call_id,
            "result": None,
            "error": self._error_object(code, message, data),
        }


_RULES = {
    SpecVersion.V1: V1Rules(),
    SpecVersion.V2: V2Rules(),
}


def rules_for(spec: Any) -> SpecRules:
    """Return the rules object for a spec version (or anything SpecVersion.parse accepts)"""
    return _RULES[SpecVersion.parse(spec)]
