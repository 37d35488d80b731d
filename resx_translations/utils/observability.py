"""
Observability - OpenTelemetry tracing for repository operations

Spans are created through the OpenTelemetry API only; without an SDK and
exporter configured by the host application they are no-ops.
"""

import os
import logging
from typing import Dict, Any, Optional
from contextlib import contextmanager

from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode

logger = logging.getLogger(__name__)


# =============================================================================
# Constants
# =============================================================================

DEFAULT_TRACER_MODULE_NAME = "resx_translations"
DEFAULT_TRACER_VERSION = "0.1.0"
SPAN_PREFIX = "resx"


# =============================================================================
# Tracer factory
# =============================================================================

def get_tracer(
    module_name: Optional[str] = None,
    version: Optional[str] = None
) -> trace.Tracer:
    """
    Get the OpenTelemetry tracer for the repository.

    Environment variables:
    - TRACER_MODULE_NAME: module name (default: "resx_translations")
    - TRACER_LIBRARY_VERSION: version (default: "0.1.0")
    """
    return trace.get_tracer(
        instrumenting_module_name=module_name or os.getenv(
            "TRACER_MODULE_NAME", DEFAULT_TRACER_MODULE_NAME
        ),
        instrumenting_library_version=version or os.getenv(
            "TRACER_LIBRARY_VERSION", DEFAULT_TRACER_VERSION
        )
    )


# =============================================================================
# Span helpers
# =============================================================================

def _safe_value(value: Any) -> Any:
    if isinstance(value, (str, bool, int, float)):
        return value
    return str(value)[:1000]


def set_span_attribute(span: trace.Span, key: str, value: Any) -> None:
    """Set an attribute, coercing non-primitive values to a short string"""
    if span is not None and span.is_recording() and value is not None:
        span.set_attribute(key, _safe_value(value))


def add_span_event(
    span: trace.Span,
    event_name: str,
    attributes: Optional[Dict[str, Any]] = None
) -> None:
    """Add a timestamped event to the span"""
    if span is not None and span.is_recording():
        safe_attrs = {k: _safe_value(v) for k, v in (attributes or {}).items() if v is not None}
        span.add_event(event_name, safe_attrs)


def record_exception(span: trace.Span, exception: Exception) -> None:
    """Record an exception and mark the span as failed"""
    if span is not None and span.is_recording():
        span.record_exception(exception)
        span.set_status(Status(StatusCode.ERROR, str(exception)))


# =============================================================================
# Operation span
# =============================================================================

@contextmanager
def trace_operation(
    operation: str,
    attributes: Optional[Dict[str, Any]] = None,
    tracer: Optional[trace.Tracer] = None
):
    """
    Context manager wrapping a repository operation in a span.

    Example:
        with trace_operation("create", {"resx.group": "Menu"}) as span:
            outcome = ...
            set_span_attribute(span, "resx.succeeded", outcome.succeeded)
    """
    if tracer is None:
        tracer = get_tracer()

    with tracer.start_as_current_span(f"{SPAN_PREFIX}.{operation}") as span:
        for key, value in (attributes or {}).items():
            set_span_attribute(span, key, value)
        try:
            yield span
            if span.is_recording():
                span.set_status(Status(StatusCode.OK))
        except Exception as e:
            record_exception(span, e)
            raise
