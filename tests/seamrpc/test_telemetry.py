"""
Telemetry helper tests
"""
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter

from seamrpc.adapters.transport import LoopbackTransport
from seamrpc.client.client import Client
from seamrpc.server.dispatcher import Dispatcher
from seamrpc.telemetry import tracer as tracer_module
from seamrpc.telemetry.metrics import increment_counter, record_latency
from seamrpc.telemetry.tracer import create_span, current_trace_id


def make_provider():
    exporter = InMemorySpanExporter()
    provider = TracerProvider()
    provider.add_span_processor(SimpleSpanProcessor(exporter))
    return provider, exporter


def test_metrics_without_provider():
    """Test instruments no-op when no meter provider is installed"""
    increment_counter("rpc.test.counter", 1, {"method": "x"})
    record_latency("rpc.test.latency", 1.5)


def test_span_attributes(monkeypatch):
    """Test create_span drops None attributes"""
    provider, exporter = make_provider()
    monkeypatch.setattr(tracer_module.trace, "get_tracer", provider.get_tracer)

    with create_span("unit", {"rpc.method": "add", "rpc.id": None}):
        assert current_trace_id() is not None

    span = exporter.get_finished_spans()[0]
    assert span.name == "unit"
    assert dict(span.attributes) == {"rpc.method": "add"}


def test_no_trace_id_outside_span():
    assert current_trace_id() is None


def test_client_and_dispatcher_spans(monkeypatch):
    """Test a round trip produces client and server spans"""
    provider, exporter = make_provider()
    monkeypatch.setattr(tracer_module.trace, "get_tracer", provider.get_tracer)

    client = Client(LoopbackTransport(Dispatcher({"add": lambda a, b: a + b})))
    assert client.call("add", [1, 2]) == 3

    names = sorted(span.name for span in exporter.get_finished_spans())
    assert names == ["rpc.client.call", "rpc.server.invoke"]
