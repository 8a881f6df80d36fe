"""
Transport Adapters Module

Byte-level transports feeding the protocol engine:
- transport: ClientTransport / ServerTransport interfaces and LoopbackTransport
- zeromq: ZeroMQ REQ transport and REP Dispatcher host
- http: HTTP POST transport (httpx)

Adapters never inspect JSON-RPC messages.
"""

from .adapter_factory import AdapterFactory, AdapterType
from .transport import ClientTransport, ServerTransport, LoopbackTransport

__all__ = [
    "AdapterFactory",
    "AdapterType",
    "ClientTransport",
    "ServerTransport",
    "LoopbackTransport",
]
