"""Phoenix tracing for dataset loads and highlight collection.

Environment Variables:
    PHOENIX_ENABLED: Set to 'true' to enable tracing (default: false)
    PHOENIX_ENDPOINT: Phoenix collector URL (default: http://localhost:6006)
    PHOENIX_PROJECT_NAME: Project name in Phoenix UI (default: family-highlights)
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor

if TYPE_CHECKING:
    from .models import Highlights

# Phoenix groups traces by this resource attribute
PROJECT_NAME_ATTRIBUTE = "openinference.project.name"

# Span attributes
DATA_SOURCE_ATTRIBUTE = "highlights.data_source"
SOURCE_KIND_ATTRIBUTE = "highlights.source_kind"  # "url" or "file"
LOADED_ATTRIBUTE = "highlights.loaded"
LOAD_ERROR_ATTRIBUTE = "highlights.load_error"
REFERENCE_DATE_ATTRIBUTE = "highlights.reference_date"
TOMORROW_DATE_ATTRIBUTE = "highlights.tomorrow_date"
TODAY_COUNT_ATTRIBUTE = "highlights.today_count"
TOMORROW_COUNT_ATTRIBUTE = "highlights.tomorrow_count"
EMPTY_ATTRIBUTE = "highlights.empty"


def is_tracing_enabled() -> bool:
    return os.getenv("PHOENIX_ENABLED", "false").lower() == "true"


def get_phoenix_endpoint() -> str:
    return os.getenv("PHOENIX_ENDPOINT", "http://localhost:6006")


def get_project_name() -> str:
    return os.getenv("PHOENIX_PROJECT_NAME", "family-highlights")


_tracer_provider: TracerProvider | None = None


def initialize_tracing() -> TracerProvider | None:
    """Send spans to Phoenix over OTLP/HTTP when PHOENIX_ENABLED is true.

    Returns:
        TracerProvider if tracing is enabled, None otherwise.
    """
    global _tracer_provider

    if not is_tracing_enabled():
        return None
    if _tracer_provider is not None:
        return _tracer_provider

    exporter = OTLPSpanExporter(endpoint=f"{get_phoenix_endpoint()}/v1/traces")
    _tracer_provider = TracerProvider(
        resource=Resource.create({PROJECT_NAME_ATTRIBUTE: get_project_name()})
    )
    _tracer_provider.add_span_processor(BatchSpanProcessor(exporter))
    trace.set_tracer_provider(_tracer_provider)
    return _tracer_provider


def get_tracer(name: str = "family-highlights") -> trace.Tracer:
    """Get a tracer instance (no-op if tracing disabled)."""
    return trace.get_tracer(name)


def record_load(span, source: str | Path, is_url: bool, error: Exception | None = None) -> None:
    """Annotate a dataset fetch span with its source and outcome."""
    span.set_attribute(DATA_SOURCE_ATTRIBUTE, str(source))
    span.set_attribute(SOURCE_KIND_ATTRIBUTE, "url" if is_url else "file")
    span.set_attribute(LOADED_ATTRIBUTE, error is None)
    if error is not None:
        span.set_attribute(LOAD_ERROR_ATTRIBUTE, type(error).__name__)


def record_highlights(span, highlights: Highlights) -> None:
    """Annotate a collection span with the dates and bucket sizes."""
    span.set_attribute(REFERENCE_DATE_ATTRIBUTE, highlights.reference_date.isoformat())
    span.set_attribute(TOMORROW_DATE_ATTRIBUTE, highlights.next_date.isoformat())
    span.set_attribute(TODAY_COUNT_ATTRIBUTE, len(highlights.today))
    span.set_attribute(TOMORROW_COUNT_ATTRIBUTE, len(highlights.tomorrow))
    span.set_attribute(EMPTY_ATTRIBUTE, highlights.is_empty)
