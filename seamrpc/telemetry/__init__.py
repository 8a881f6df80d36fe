"""
OpenTelemetry Integration Module

Provides tracing and metrics collection for the client and server sides:
- tracer: Tracer setup and span creation
- metrics: Counters and latency histograms

Without a configured provider the OpenTelemetry API falls back to no-op
implementations, so instrumentation is always safe to call.
"""

from .tracer import setup_tracer, create_span, current_trace_id
from .metrics import setup_metrics, increment_counter, record_latency

__all__ = [
    "setup_tracer",
    "create_span",
    "current_trace_id",
    "setup_metrics",
    "increment_counter",
    "record_latency",
]
