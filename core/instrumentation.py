"""
OpenTelemetry tracing setup.

Spans are always created through the OpenTelemetry API. They are only
exported when an OTLP endpoint is configured; otherwise the default
no-op provider discards them.
"""

import logging

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor

logger = logging.getLogger(__name__)


def setup_tracing(
    service_name: str,
    otlp_endpoint: str,
    environment: str = "development",
    service_version: str = "1.0.0",
) -> bool:
    """
    Configure span export over OTLP.

    Args:
        service_name: ``service.name`` resource attribute
        otlp_endpoint: OTLP gRPC collector endpoint; empty disables export
        environment: ``deployment.environment`` resource attribute
        service_version: ``service.version`` resource attribute

    Returns:
        True if an exporting tracer provider was installed
    """
    if not otlp_endpoint:
        logger.info("OTLP endpoint not configured; spans will not be exported")
        return False

    resource = Resource.create(
        {
            "service.name": service_name,
            "service.version": service_version,
            "deployment.environment": environment,
        }
    )
    provider = TracerProvider(resource=resource)
    provider.add_span_processor(
        BatchSpanProcessor(
            OTLPSpanExporter(endpoint=otlp_endpoint, insecure=otlp_endpoint.startswith("http://"))
        )
    )
    trace.set_tracer_provider(provider)
    logger.info("Tracing configured, exporting to %s", otlp_endpoint)
    return True


def get_tracer(name: str) -> trace.Tracer:
    """
    Get a tracer instance for manual instrumentation.

    Args:
        name: Tracer name (usually module name)

    Returns:
        Tracer instance
    """
    return trace.get_tracer(name)
