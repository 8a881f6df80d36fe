"""
Transport interfaces

The protocol engine only ever sees bytes. Client transports perform one
blocking round trip per `send`; server transports hand raw request bytes to a
Dispatcher and write back whatever it produced.
"""

import abc
import logging

from seamrpc.protocol.errors import TransportFault

logger = logging.getLogger(__name__)


class ClientTransport(abc.ABC):
    """Client-side transport: one request payload in, one response payload out"""

    @abc.abstractmethod
    def send(self, payload: bytes) -> bytes:
        """Send a request payload and block until the response arrives

        Args:
            payload: Serialized JSON-RPC request (single or batch)

        Returns:
            bytes: Raw response payload, possibly empty

        Raises:
            TransportFault: The exchange failed
        """
        pass

    def close(self) -> None:
        """Release transport resources"""
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()


class ServerTransport(abc.ABC):
    """Server-side transport driven by a listener loop"""

    @abc.abstractmethod
    def receive_request(self) -> bytes:
        """Block until a request payload arrives"""
        pass

    @abc.abstractmethod
    def send_response(self, payload: bytes) -> None:
        """Write the response payload for the last received request

        Args:
            payload: Serialized response, empty when nothing is to be returned
        """
        pass


class LoopbackTransport(ClientTransport):
    """In-process transport that hands payloads straight to a dispatcher"""

    def __init__(self, dispatcher):
        """
        Args:
            dispatcher: Object exposing dispatch(bytes) -> Optional[bytes]
        """
        self.dispatcher = dispatcher
        self.closed = False

    def send(self, payload: bytes) -> bytes:
        if self.closed:
            raise TransportFault("Loopback transport is closed")
        response = self.dispatcher.dispatch(payload)
        return response or b""

    def close(self) -> None:
        self.closed = True
