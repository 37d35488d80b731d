"""
Utility modules for the translation repository
"""

# Config loader
from .config import (
    ConfigLoader,
    RepositoryConfig,
    load_repository_config,
)

# Observability (OpenTelemetry-based)
from .observability import (
    get_tracer,
    add_span_event,
    set_span_attribute,
    record_exception,
    trace_operation,
)

# In-process file locks
from .file_locks import PathLockRegistry

# Result formatting
from .result_formatter import (
    format_record,
    format_records,
    format_entries,
    format_write_outcome,
)

__all__ = [
    # Config loader
    "ConfigLoader",
    "RepositoryConfig",
    "load_repository_config",
    # Observability
    "get_tracer",
    "add_span_event",
    "set_span_attribute",
    "record_exception",
    "trace_operation",
    # Locks
    "PathLockRegistry",
    # Formatting
    "format_record",
    "format_records",
    "format_entries",
    "format_write_outcome",
]
