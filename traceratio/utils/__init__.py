"""Utility functions for traceratio."""

from traceratio.utils.helpers import (
    TRACE_ID_BYTES,
    format_trace_id,
    parse_trace_id,
    trace_id_to_bytes,
    trace_id_from_bytes,
)

__all__ = [
    "TRACE_ID_BYTES",
    "format_trace_id",
    "parse_trace_id",
    "trace_id_to_bytes",
    "trace_id_from_bytes",
]
