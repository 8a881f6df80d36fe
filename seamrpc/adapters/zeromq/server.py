"""
ZeroMQ服务器

基于ZeroMQ REP套接字承载Dispatcher：接收请求字节，交给Dispatcher处理，再写回响应字节。
"""

import zmq
import logging
import threading
import time

from seamrpc.adapters.transport import ServerTransport
from seamrpc.telemetry.metrics import increment_counter

logger = logging.getLogger(__name__)


class ZeroMQServer(ServerTransport):
    """
    ZeroMQ服务器，REP套接字必须对每个请求应答，没有响应内容时发送空帧
    """

    def __init__(self,
                 dispatcher,
                 bind_address: str = "tcp://*:5555",
                 poll_interval_ms: int = 100):
        """初始化ZeroMQ服务器

        Args:
            dispatcher: 处理请求的Dispatcher
            bind_address: 请求套接字绑定地址
            poll_interval_ms: 轮询间隔(毫秒)，决定stop()的响应速度
        """
        self.dispatcher = dispatcher
        self.bind_address = bind_address
        self.poll_interval_ms = poll_interval_ms
        self.running = False
        self.server_thread = None
        self.context = zmq.Context()

        # 创建REP套接字用于请求-响应
        self.socket = self.context.socket(zmq.REP)
        self.socket.setsockopt(zmq.LINGER, 0)
        self.socket.bind(bind_address)

        logger.info(f"ZeroMQ服务器绑定到 {bind_address}")

    def __del__(self):
        """析构函数，清理资源"""
        self.close()

    def receive_request(self) -> bytes:
        return self.socket.recv()

    def send_response(self, payload: bytes) -> None:
        self.socket.send(payload)

    def start(self, threaded: bool = True):
        """启动服务器

        Args:
            threaded: 是否在单独线程中运行
        """
        self.running = True

        if threaded:
            self.server_thread = threading.Thread(target=self._run_server, daemon=True)
            self.server_thread.start()
            logger.info("ZeroMQ服务器在后台线程中启动")
        else:
            logger.info("ZeroMQ服务器在主线程中启动")
            self._run_server()

    def stop(self):
        """停止服务器"""
        self.running = False
        if self.server_thread is not None:
            self.server_thread.join(timeout=1.0)
            self.server_thread = None
            logger.info("ZeroMQ服务器已停止")

    def close(self):
        """停止服务器并释放套接字"""
        if getattr(self, 'running', False):
            self.stop()
        if getattr(self, 'socket', None) is not None:
            self.socket.close()
            self.socket = None
        if getattr(self, 'context', None) is not None:
            self.context.term()
            self.context = None

    def _run_server(self):
        """服务器主循环"""
        logger.info("ZeroMQ服务器开始接收请求")

        while self.running:
            try:
                if not self.socket.poll(self.poll_interval_ms):
                    continue
                self.dispatcher.handle(self)

            except zmq.error.ZMQError as e:
                if not self.running:
                    break
                logger.error(f"服务器循环中发生错误: {str(e)}")
                increment_counter("rpc.server.errors", 1, {"type": "loop_error"})
                time.sleep(1.0)  # 错误后稍微等待，避免迅速重试
