"""
ZeroMQ adapter contract tests

Run the Client against a Dispatcher hosted by ZeroMQServer over a real socket.
"""

import time
import pytest

from seamrpc.adapters.adapter_factory import AdapterFactory, AdapterType
from seamrpc.adapters.zeromq.client import ZeroMQTransport
from seamrpc.adapters.zeromq.server import ZeroMQServer
from seamrpc.client.client import Client
from seamrpc.protocol.errors import TransportFault
from seamrpc.protocol.messages import Call, Result
from seamrpc.server.dispatcher import Dispatcher

# Test server addresses
TEST_SERVER_ADDRESS = "tcp://127.0.0.1:15555"


@pytest.fixture
def server():
    """Create and start test server"""
    dispatcher = Dispatcher({
        "echo": lambda value: value,
        "add": lambda a, b: a + b,
        "log": lambda message: None,
    })
    server = ZeroMQServer(dispatcher, bind_address=TEST_SERVER_ADDRESS)

    # Start server (in background thread)
    server.start(threaded=True)
    time.sleep(0.1)

    yield server

    server.close()


@pytest.fixture
def client(server):
    """Create test client"""
    client = Client(ZeroMQTransport(server_address=TEST_SERVER_ADDRESS))
    yield client
    client.close()


def test_basic_rpc(client):
    """Test basic RPC call"""
    test_data = {"message": "Hello, World!", "number": 42}
    assert client.call("echo", [test_data]) == test_data


def test_notification_gets_empty_frame(client):
    """Test REP socket still answers notifications so the next call works"""
    client.notify("log", ["x"])
    assert client.call("add", [2, 3]) == 5


def test_batch(client):
    """Test batch over ZeroMQ"""
    first, second = Call("add", [1, 2]), Call("echo", ["hi"])
    outcomes = client.batch(first, second)
    assert outcomes == {first.id: Result(3), second.id: Result("hi")}


def test_timeout_without_server():
    """Test timeouts surface as TransportFault"""
    transport = ZeroMQTransport(server_address="tcp://127.0.0.1:15599", timeout_ms=100)
    try:
        with pytest.raises(TransportFault, match="超时"):
            transport.send(b"{}")
    finally:
        transport.close()


def test_factory(server):
    """Test AdapterFactory builds a working transport"""
    transport = AdapterFactory.create_transport(AdapterType.ZEROMQ, {"server_address": TEST_SERVER_ADDRESS})
    with Client(transport) as client:
        assert client.call("add", [20, 22]) == 42


def test_factory_rejects_unknown_type():
    with pytest.raises(ValueError):
        AdapterFactory.create_transport("carrier-pigeon")
    with pytest.raises(ValueError):
        AdapterFactory.create_server("http", Dispatcher({}))

