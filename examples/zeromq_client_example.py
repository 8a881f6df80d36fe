#!/usr/bin/env python
"""
ZeroMQ Client Example

Calls the procedures of zeromq_server_example.py singly, as a notification and
as a batch.
"""

import logging

from seamrpc.adapters.adapter_factory import AdapterFactory
from seamrpc.client.client import Client
from seamrpc.config import SeamConfig
from seamrpc.protocol.errors import RemoteError, SeamRPCError
from seamrpc.protocol.messages import Call

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def main():
    """Run ZeroMQ client example"""
    config = SeamConfig.from_env()
    config.setup_telemetry()

    transport = AdapterFactory.create_transport(config.transport, config.to_adapter_config())

    try:
        with Client(transport, spec=config.spec_version) as client:
            logger.info(f"demo.sayHello -> {client.call('demo.sayHello')}")
            logger.info(f"demo.substract(42, 23) -> {client.call('demo.substract', [42, 23])}")

            client.notify("demo.log", ["hello from the client"])

            try:
                client.call("demo.divide", [1, 0])
            except RemoteError as e:
                logger.info(f"demo.divide(1, 0) failed as expected: {e}")

            calls = [Call("demo.substract", [10, 4]), Call("demo.sayHello"), Call("demo.missing")]
            outcomes = client.batch(*calls)
            for call in calls:
                logger.info(f"batch {call.method} -> {outcomes.get(call.id)}")

    except SeamRPCError as e:
        logger.error(f"Error occurred while running client: {str(e)}")

    logger.info("Client exited")


if __name__ == "__main__":
    main()
