"""
HTTP client transport

POSTs request payloads to a JSON-RPC endpoint with httpx and returns the raw
response body.
"""

import logging
from typing import Dict, Optional

import httpx

from seamrpc.adapters.transport import ClientTransport
from seamrpc.protocol.errors import TransportFault

logger = logging.getLogger(__name__)


class HttpTransport(ClientTransport):
    """Blocking HTTP POST transport"""

    def __init__(self,
                 url: str,
                 timeout_ms: int = 5000,
                 headers: Optional[Dict[str, str]] = None,
                 client: Optional[httpx.Client] = None):
        """
        Args:
            url: Endpoint URL
            timeout_ms: Request timeout in milliseconds
            headers: Extra request headers
            client: Pre-configured httpx.Client (owned by the caller)
        """
        self.url = url
        self.timeout_ms = timeout_ms
        self.headers = {"Content-Type": "application/json", "Accept": "application/json"}
        self.headers.update(headers or {})
        self._owns_client = client is None
        self.client = client or httpx.Client(timeout=timeout_ms / 1000.0)
        self.last_response_headers: Dict[str, str] = {}

    def send(self, payload: bytes) -> bytes:
        try:
            response = self.client.post(self.url, content=payload, headers=self.headers)
        except httpx.TimeoutException as e:
            raise TransportFault(f"HTTP request to {self.url} timed out ({self.timeout_ms}ms)") from e
        except httpx.HTTPError as e:
            raise TransportFault(f"HTTP request to {self.url} failed: {e}") from e

        self.last_response_headers = dict(response.headers)

        # Servers commonly answer JSON-RPC errors with 4xx/5xx and a JSON body
        if response.status_code >= 400 and not response.content.strip():
            raise TransportFault(f"HTTP {response.status_code} from {self.url}")
        if response.status_code >= 400:
            logger.debug(f"HTTP {response.status_code} from {self.url}, passing body to the protocol layer")

        return response.content

    def close(self) -> None:
        if self._owns_client:
            self.client.close()
