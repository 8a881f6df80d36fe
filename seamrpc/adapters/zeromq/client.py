"""
ZeroMQ客户端传输

基于ZeroMQ REQ套接字的客户端传输，每次send为一次阻塞的请求-响应往返。
"""

import zmq
import logging

from seamrpc.adapters.transport import ClientTransport
from seamrpc.protocol.errors import TransportFault

logger = logging.getLogger(__name__)


class ZeroMQTransport(ClientTransport):
    """
    ZeroMQ客户端传输，只负责字节收发，不解析JSON-RPC消息
    """

    def __init__(self,
                 server_address: str = "tcp://localhost:5555",
                 timeout_ms: int = 5000):
        """初始化ZeroMQ客户端传输

        Args:
            server_address: ZeroMQ服务器地址
            timeout_ms: 请求超时时间(毫秒)
        """
        self.server_address = server_address
        self.timeout_ms = timeout_ms
        self.context = zmq.Context()
        self.socket = self.context.socket(zmq.REQ)
        self.socket.connect(server_address)
        self.socket.setsockopt(zmq.RCVTIMEO, timeout_ms)
        self.socket.setsockopt(zmq.LINGER, 0)
        logger.info(f"ZeroMQ客户端连接到 {server_address}")

    def __del__(self):
        """析构函数，关闭套接字和上下文"""
        self.close()

    def close(self):
        """关闭客户端连接"""
        if getattr(self, 'socket', None) is not None:
            self.socket.close()
            self.socket = None
        if getattr(self, 'context', None) is not None:
            self.context.term()
            self.context = None

    def send(self, payload: bytes) -> bytes:
        """发送请求字节并等待响应字节

        Args:
            payload: 序列化后的JSON-RPC请求

        Returns:
            bytes: 原始响应（通知可能得到空帧）

        Raises:
            TransportFault: 超时或ZeroMQ错误
        """
        if self.socket is None:
            raise TransportFault("ZeroMQ传输已关闭")

        try:
            self.socket.send(payload)
            return self.socket.recv()

        except zmq.error.Again as e:
            logger.error(f"请求超时 ({self.timeout_ms}ms)")
            raise TransportFault(f"ZeroMQ请求超时 ({self.timeout_ms}ms)") from e

        except zmq.error.ZMQError as e:
            logger.error(f"ZeroMQ错误: {str(e)}")
            raise TransportFault(f"ZeroMQ连接错误: {str(e)}") from e
