"""
End-to-end tests of Client against an in-process Dispatcher
"""
import pytest

from seamrpc.adapters.transport import LoopbackTransport
from seamrpc.client.client import Client
from seamrpc.protocol.errors import InvalidParamsFault, RemoteError, TransportFault
from seamrpc.protocol.messages import Call, Error, Result
from seamrpc.protocol.spec import SpecVersion
from seamrpc.server.dispatcher import Dispatcher
from seamrpc.server.procedures import ProcedureTable


received = []


def error_code(outcome):
    # 1.0 errors are opaque: code carries the whole error object
    return outcome.code["code"] if isinstance(outcome.code, dict) else outcome.code


def build_table():
    table = ProcedureTable()

    @table.procedure("demo.sayHello")
    def say_hello():
        return "Hello World!"

    @table.procedure("demo.substract")
    def substract(num1, num2):
        return num1 - num2

    @table.procedure("demo.divide")
    def divide(a, b):
        if b == 0:
            raise InvalidParamsFault("division by zero")
        return a / b

    @table.procedure("demo.record")
    def record(value):
        received.append(value)

    return table


@pytest.fixture(params=[SpecVersion.V1, SpecVersion.V2])
def client(request):
    received.clear()
    dispatcher = Dispatcher(build_table(), spec=request.param)
    with Client(LoopbackTransport(dispatcher), spec=request.param) as client:
        yield client


def test_call_returns_value(client):
    assert client.call("demo.sayHello") == "Hello World!"
    assert client.call("demo.substract", [42, 23]) == 19


def test_request_returns_outcome(client):
    assert client.request("demo.substract", [1, 1]) == Result(0)


def test_remote_error(client):
    with pytest.raises(RemoteError) as exc_info:
        client.call("demo.divide", [1, 0])
    assert error_code(exc_info.value.error) == -32602


def test_method_not_found_outcome(client):
    outcome = client.request("demo.unknown")
    assert isinstance(outcome, Error)
    assert error_code(outcome) == -32601


def test_notify(client):
    client.notify("demo.record", ["x"])
    assert received == ["x"]


def test_batch(client):
    first = Call("demo.substract", [5, 3])
    second = Call("demo.sayHello")
    outcomes = client.batch(first, second, Call.notification("demo.record", ["y"]))
    assert outcomes == {first.id: Result(2), second.id: Result("Hello World!")}
    assert received == ["y"]


def test_named_params_v2_only():
    dispatcher = Dispatcher(build_table())
    client = Client(LoopbackTransport(dispatcher))
    assert client.call("demo.substract", {"num2": 3, "num1": 10}) == 7


def test_closed_transport():
    transport = LoopbackTransport(Dispatcher(build_table()))
    with Client(transport) as client:
        pass
    with pytest.raises(TransportFault):
        client.call("demo.sayHello")
