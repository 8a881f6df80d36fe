#!/usr/bin/env python
"""
ZeroMQ Server Example

Demonstrates how to host a Dispatcher on a ZeroMQ REP socket.
"""

import sys
import signal
import logging

from seamrpc.adapters.zeromq.server import ZeroMQServer
from seamrpc.config import SeamConfig
from seamrpc.protocol.errors import InvalidParamsFault
from seamrpc.server.dispatcher import Dispatcher
from seamrpc.server.procedures import ProcedureTable

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

procedures = ProcedureTable()


@procedures.procedure("demo.sayHello")
def say_hello():
    return "Hello World!"


@procedures.procedure("demo.substract")
def substract(num1, num2):
    return num1 - num2


@procedures.procedure("demo.divide")
def divide(dividend, divisor):
    if divisor == 0:
        raise InvalidParamsFault("divisor must not be zero")
    return dividend / divisor


@procedures.procedure("demo.log")
def log_message(message):
    logger.info(f"Client says: {message}")


def main():
    """Start ZeroMQ server example"""
    config = SeamConfig.from_env()
    config.setup_telemetry()

    dispatcher = Dispatcher(procedures, spec=config.spec_version)
    server = ZeroMQServer(dispatcher, bind_address=config.bind_address)

    # Add SIGINT handler for graceful exit
    def handle_sigint(sig, frame):
        logger.info("Received exit signal, stopping server...")
        server.close()
        sys.exit(0)

    signal.signal(signal.SIGINT, handle_sigint)

    logger.info(f"Starting JSON-RPC {config.spec_version.value} server on {config.bind_address}...")

    try:
        # Run server in main thread
        server.start(threaded=False)
    except KeyboardInterrupt:
        logger.info("Received exit signal, stopping server...")
    finally:
        server.close()

    logger.info("Server stopped")


if __name__ == "__main__":
    main()
