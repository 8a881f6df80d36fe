"""
Configuration settings for seamrpc endpoints
"""
import os
from dataclasses import dataclass
from typing import Any, Dict

from seamrpc.protocol.spec import SpecVersion


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class SeamConfig:
    """Client / server endpoint configuration"""
    spec_version: SpecVersion = SpecVersion.V2
    transport: str = "zeromq"  # zeromq, http
    endpoint: str = "tcp://localhost:5555"
    bind_address: str = "tcp://*:5555"
    timeout_ms: int = 5000

    # Telemetry configuration
    service_name: str = "seamrpc"
    enable_tracing: bool = False
    enable_metrics: bool = False
    otlp_endpoint: str = "localhost:4317"

    def __post_init__(self):
        self.spec_version = SpecVersion.parse(self.spec_version)
        if self.timeout_ms <= 0:
            raise ValueError("timeout_ms must be positive")

    @classmethod
    def from_env(cls) -> "SeamConfig":
        """Create config from SEAMRPC_* environment variables"""
        defaults = cls()
        return cls(
            spec_version=os.getenv("SEAMRPC_SPEC_VERSION", defaults.spec_version.value),
            transport=os.getenv("SEAMRPC_TRANSPORT", defaults.transport),
            endpoint=os.getenv("SEAMRPC_ENDPOINT", defaults.endpoint),
            bind_address=os.getenv("SEAMRPC_BIND_ADDRESS", defaults.bind_address),
            timeout_ms=int(os.getenv("SEAMRPC_TIMEOUT_MS", str(defaults.timeout_ms))),
            service_name=os.getenv("SEAMRPC_SERVICE_NAME", defaults.service_name),
            enable_tracing=_env_bool("SEAMRPC_ENABLE_TRACING", defaults.enable_tracing),
            enable_metrics=_env_bool("SEAMRPC_ENABLE_METRICS", defaults.enable_metrics),
            otlp_endpoint=os.getenv("SEAMRPC_OTLP_ENDPOINT", defaults.otlp_endpoint),
        )

    def to_adapter_config(self) -> Dict[str, Any]:
        """Configuration dictionary understood by AdapterFactory"""
        return {
            "server_address": self.endpoint,
            "bind_address": self.bind_address,
            "timeout_ms": self.timeout_ms,
        }

    def setup_telemetry(self) -> None:
        """Install tracer / meter providers when enabled"""
        if self.enable_tracing:
            from seamrpc.telemetry.tracer import setup_tracer
            setup_tracer(self.service_name, self.otlp_endpoint)
        if self.enable_metrics:
            from seamrpc.telemetry.metrics import setup_metrics
            setup_metrics(self.service_name, self.otlp_endpoint)
