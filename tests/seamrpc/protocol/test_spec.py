"""
Tests for spec version handling and the error taxonomy
"""
import pytest

from seamrpc.protocol.errors import (
    ErrorCode,
    InvalidParamsFault,
    ProcedureFault,
    RemoteError,
    SpecViolation,
    default_message,
    is_reserved_code,
)
from seamrpc.protocol.messages import NO_ID, Error, same_id
from seamrpc.protocol.spec import SpecVersion, V1Rules, V2Rules, rules_for


class TestSpecVersion:
    """Test spec version parsing"""

    @pytest.mark.parametrize("value", ["2.0", "2", 2, 2.0, " 2.0 ", SpecVersion.V2])
    def test_parse_v2(self, value):
        assert SpecVersion.parse(value) is SpecVersion.V2

    @pytest.mark.parametrize("value", ["1.0", "1", 1, 1.0, SpecVersion.V1])
    def test_parse_v1(self, value):
        assert SpecVersion.parse(value) is SpecVersion.V1

    @pytest.mark.parametrize("value", ["3.0", "", None, "two"])
    def test_parse_unsupported(self, value):
        with pytest.raises(SpecViolation, match="Unsupported"):
            SpecVersion.parse(value)

    def test_rules_for(self):
        """Test each version has its own rules object"""
        assert isinstance(rules_for(SpecVersion.V1), V1Rules)
        assert isinstance(rules_for("2.0"), V2Rules)
        assert rules_for("2") is rules_for(SpecVersion.V2)


class TestIds:
    """Test strict id comparison"""

    def test_same_id(self):
        assert same_id("a", "a")
        assert same_id(1, 1)
        assert same_id(None, None)

    def test_different_types_do_not_match(self):
        assert not same_id(1, "1")
        assert not same_id(1, 1.0)
        assert not same_id(True, 1)

    def test_absent_id_matches_nothing(self):
        assert not same_id(NO_ID, NO_ID)
        assert not same_id(None, NO_ID)

    def test_no_id_is_falsy_singleton(self):
        assert not NO_ID
        assert repr(NO_ID) == "NO_ID"


class TestErrors:
    """Test error codes and faults"""

    def test_default_messages(self):
        assert default_message(ErrorCode.PARSE_ERROR) == "Parse error"
        assert default_message(-32601) == "Method not found"
        assert default_message(42) == ""
        assert default_message("x") == ""

    def test_reserved_range(self):
        assert is_reserved_code(-32600)
        assert is_reserved_code(-32000)
        assert not is_reserved_code(-31999)
        assert not is_reserved_code(100)
        assert not is_reserved_code("x")

    def test_error_is_standard(self):
        assert Error(-32603, "Internal error").is_standard
        assert not Error(7, "custom").is_standard

    def test_invalid_params_fault(self):
        fault = InvalidParamsFault("bad", data={"field": "a"})
        assert isinstance(fault, ProcedureFault)
        assert fault.code == ErrorCode.INVALID_PARAMS
        assert fault.message == "bad"
        assert fault.data == {"field": "a"}

    def test_remote_error(self):
        error = RemoteError(Error(-32601, "Method not found", "nope"))
        assert error.code == -32601
        assert error.data == "nope"
        assert "Method not found" in str(error)
