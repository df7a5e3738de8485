# src/skyadmin/tracing.py

import os

from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import (
    SimpleSpanProcessor,
    ConsoleSpanExporter,
)


def configure_tracing(service_name: str | None = None) -> None:
    """
    Configure OpenTelemetry tracing with a console exporter.

    Spans are printed to stdout; set OTEL_TRACES_CONSOLE=false to keep the
    provider (so trace ids still reach the logs) without exporting.
    """
    # If there's already a provider, don't reconfigure
    if isinstance(trace.get_tracer_provider(), TracerProvider):
        return

    service_name = service_name or os.getenv("SERVICE_NAME", "sky-admin")
    provider = TracerProvider(resource=Resource.create({"service.name": service_name}))

    if os.getenv("OTEL_TRACES_CONSOLE", "true").lower() != "false":
        # SimpleSpanProcessor exports synchronously. BatchSpanProcessor
        # spawns a background worker which can attempt to write to stdout after
        # pytest has closed its capture file.
        provider.add_span_processor(SimpleSpanProcessor(ConsoleSpanExporter()))

    trace.set_tracer_provider(provider)
