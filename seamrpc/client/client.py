"""
RPC client

Convenience front end over CallCorrelator and BatchCoordinator bound to one
transport and one spec version.
"""

from typing import Any, Dict

from seamrpc.adapters.transport import ClientTransport
from seamrpc.client.batch import BatchCoordinator
from seamrpc.client.correlator import CallCorrelator
from seamrpc.protocol.errors import RemoteError
from seamrpc.protocol.messages import Call, Error, Outcome, Params
from seamrpc.protocol.spec import SpecVersion


class Client:
    """
    JSON-RPC client.

    Example:
        with Client(ZeroMQTransport("tcp://localhost:5555")) as client:
            total = client.call("add", [2, 3])
    """

    def __init__(self, transport: ClientTransport, spec: SpecVersion = SpecVersion.V2):
        self.transport = transport
        self.spec = SpecVersion.parse(spec)
        self.correlator = CallCorrelator(self.spec)
        self.batcher = BatchCoordinator(self.spec)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def close(self):
        """Close the underlying transport"""
        self.transport.close()

    def send(self, call: Call) -> Outcome:
        """Send a prepared call and return its outcome"""
        return self.correlator.send(self.transport, call)

    def request(self, method: str, params: Params = None) -> Outcome:
        """Invoke method and return the Result or Error outcome"""
        return self.send(Call(method, params))

    def call(self, method: str, params: Params = None) -> Any:
        """Invoke method and return its result value

        Raises:
            RemoteError: The server answered with an error
        """
        outcome = self.request(method, params)
        if isinstance(outcome, Error):
            raise RemoteError(outcome)
        return outcome.value

    def notify(self, method: str, params: Params = None) -> None:
        """Send a notification; no response is expected"""
        self.correlator.send(self.transport, Call.notification(method, params))

    def batch(self, *calls: Call) -> Dict[Any, Outcome]:
        """Send calls as one batch; returns id -> Outcome for answered calls"""
        return self.batcher.send_batch(self.transport, calls)
