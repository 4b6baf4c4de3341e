"""
OpenTelemetry tracing configuration for the checkout client.

Provides:
- TracerProvider setup (console exporter for local debugging)
- Auto-instrumentation of the shared httpx client
- Manual span creation helpers

Use cases create spans through `trace.get_tracer(__name__)`; without
`TracingConfig.setup()` those calls hit the no-op provider.
"""

import httpx
from opentelemetry import trace
from opentelemetry.instrumentation.httpx import HTTPXClientInstrumentor
from opentelemetry.sdk.resources import SERVICE_NAME, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter
from opentelemetry.sdk.trace.sampling import ALWAYS_ON

from src.platform.config.core_setting import settings


class TracingConfig:
    """
    Usage:
        # Initialize once at client startup
        tracing = TracingConfig(service_name="cinema-checkout-client")
        tracing.setup()
        tracing.instrument_httpx(client=api_client.client)
    """

    def __init__(
        self,
        *,
        service_name: str | None = None,
        enable_console: bool | None = None,
    ) -> None:
        self.service_name = service_name or settings.OTEL_SERVICE_NAME
        self.enable_console = (
            settings.OTEL_CONSOLE_EXPORT if enable_console is None else enable_console
        )
        self._provider: TracerProvider | None = None

    def setup(self) -> None:
        resource = Resource(attributes={SERVICE_NAME: self.service_name})
        self._provider = TracerProvider(resource=resource, sampler=ALWAYS_ON)

        if self.enable_console:
            self._provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))

        trace.set_tracer_provider(self._provider)

    def instrument_httpx(self, *, client: httpx.AsyncClient) -> None:
        HTTPXClientInstrumentor.instrument_client(client)

    def shutdown(self) -> None:
        if self._provider:
            self._provider.shutdown()
