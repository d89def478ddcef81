"""Helper functions for converting trace identifiers."""

from __future__ import annotations

from traceratio.errors import ValidationError

TRACE_ID_BYTES = 16
_TRACE_ID_LIMIT = 1 << 128


def format_trace_id(trace_id: int) -> str:
    """
    Format OTel trace_id (128-bit int) to hex string.

    Args:
        trace_id: OTel trace_id as int

    Returns:
        32-character hex string
    """
    return format(trace_id, '032x')


def parse_trace_id(hex_string: str) -> int:
    """
    Parse hex string trace_id to OTel int.

    Args:
        hex_string: 32-character hex string

    Returns:
        OTel trace_id as int
    """
    if not hex_string:
        return 0
    return int(hex_string, 16)


def trace_id_to_bytes(trace_id: int) -> bytes:
    """
    Convert an OTel trace_id to its 16-byte big-endian form.

    Byte 0 is the most significant byte, byte 15 the least significant.

    Raises:
        ValidationError: if trace_id does not fit in 128 unsigned bits
    """
    if trace_id < 0 or trace_id >= _TRACE_ID_LIMIT:
        raise ValidationError(
            "trace_id must fit in 128 unsigned bits",
            {"trace_id": trace_id},
        )
    return trace_id.to_bytes(TRACE_ID_BYTES, "big")


def trace_id_from_bytes(trace_id: bytes) -> int:
    """Convert a 16-byte big-endian trace identifier to an OTel trace_id."""
    if len(trace_id) != TRACE_ID_BYTES:
        raise ValidationError(
            f"trace_id must be exactly {TRACE_ID_BYTES} bytes",
            {"length": len(trace_id)},
        )
    return int.from_bytes(trace_id, "big")
