"""
ZeroMQ Adapter Package

ZeroMQ client transport and Dispatcher host (REQ/REP).
"""

from seamrpc.adapters.zeromq.client import ZeroMQTransport
from seamrpc.adapters.zeromq.server import ZeroMQServer

__all__ = ["ZeroMQTransport", "ZeroMQServer"]
