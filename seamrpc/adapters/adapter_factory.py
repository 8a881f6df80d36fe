"""
Adapter factory

Creates client transports and Dispatcher hosts from a transport type name and
a configuration dictionary.
"""

from typing import Any, Dict

from seamrpc.adapters.transport import ClientTransport
from seamrpc.adapters.http import HttpTransport
from seamrpc.adapters.zeromq.client import ZeroMQTransport
from seamrpc.adapters.zeromq.server import ZeroMQServer


class AdapterType:
    """Adapter type constants"""
    ZEROMQ = "zeromq"
    HTTP = "http"


class AdapterFactory:
    """Factory for transport adapters"""

    @staticmethod
    def create_transport(adapter_type: str, config: Dict[str, Any] = None) -> ClientTransport:
        """Create a client transport

        Args:
            adapter_type: "zeromq" or "http"
            config: Adapter configuration parameters

        Returns:
            ClientTransport: Client transport instance

        Raises:
            ValueError: Invalid adapter type
        """
        if config is None:
            config = {}

        if adapter_type.lower() == AdapterType.ZEROMQ:
            return ZeroMQTransport(
                server_address=config.get("server_address", "tcp://localhost:5555"),
                timeout_ms=config.get("timeout_ms", 5000)
            )
        elif adapter_type.lower() == AdapterType.HTTP:
            return HttpTransport(
                url=config.get("server_address", "http://localhost:8080/rpc"),
                timeout_ms=config.get("timeout_ms", 5000),
                headers=config.get("headers")
            )
        else:
            raise ValueError(f"Invalid adapter type: {adapter_type}")

    @staticmethod
    def create_server(adapter_type: str, dispatcher, config: Dict[str, Any] = None) -> ZeroMQServer:
        """Create a server hosting dispatcher

        Args:
            adapter_type: Only "zeromq" ships a server host
            dispatcher: Dispatcher serving the requests
            config: Adapter configuration parameters

        Raises:
            ValueError: Invalid adapter type
        """
        if config is None:
            config = {}

        if adapter_type.lower() == AdapterType.ZEROMQ:
            return ZeroMQServer(
                dispatcher,
                bind_address=config.get("bind_address", "tcp://*:5555")
            )
        else:
            raise ValueError(f"Invalid server adapter type: {adapter_type}")
