"""Deterministic sampling from the low-order half of the trace id."""

from __future__ import annotations

import logging
import numbers
import struct

from traceratio.errors import InvalidArgumentError
from traceratio.sampler.base import Sampler, SamplingParameters, SamplingResult

logger = logging.getLogger(__name__)

MIN_INT64 = -(1 << 63)
MAX_INT64 = (1 << 63) - 1

# Bytes 8..15 of the trace id, read as a big-endian signed 64-bit integer.
_LOWER_LONG = struct.Struct(">q")
_LOWER_LONG_OFFSET = 8

_SAMPLED = SamplingResult(sampled=True)
_NOT_SAMPLED = SamplingResult(sampled=False)


def get_lower_long(trace_id: bytes) -> int:
    """Return the low-order 64 bits of a 16-byte trace id as a signed int."""
    return _LOWER_LONG.unpack_from(trace_id, _LOWER_LONG_OFFSET)[0]


def wrapping_abs(value: int) -> int:
    """
    Absolute value of a signed 64-bit integer with two's-complement wraparound.

    ``wrapping_abs(MIN_INT64)`` is ``MIN_INT64``.
    """
    if value == MIN_INT64:
        return MIN_INT64
    return -value if value < 0 else value


def get_bound_for_probability(probability: float) -> int:
    """
    Derive the decision threshold for a probability in [0.0, 1.0].

    The limits are special-cased to avoid precision loss across the
    float/int64 boundary. For 0.0 the minimum int64 is used, so even an id
    whose lower long is MIN_INT64 (whose absolute value is itself) is never
    sampled.
    """
    if probability == 0.0:
        return MIN_INT64
    if probability == 1.0:
        return MAX_INT64
    return int(probability * MAX_INT64)


class TraceIdRatioBasedSampler(Sampler):
    """
    Samples traces according to the specified probability.

    The decision only depends on the trace id, so every process running this
    sampler with the same probability agrees on each trace.

    Args:
        probability: Probability (between 0.0 and 1.0) that a trace is sampled
    """

    def __init__(self, probability: float) -> None:
        if isinstance(probability, bool) or not isinstance(probability, numbers.Real):
            raise TypeError(
                f"probability must be a real number, got {type(probability).__name__}"
            )
        probability = float(probability)
        if not 0.0 <= probability <= 1.0:
            raise InvalidArgumentError(
                f"probability {probability} must be in the range [0.0, 1.0]",
                {"probability": probability, "min": 0.0, "max": 1.0},
            )

        self._probability = probability
        self._id_upper_bound = get_bound_for_probability(probability)
        self._description = f"TraceIdRatioBasedSampler{{{probability:.6f}}}"
        logger.debug(f"Created {self._description} with bound {self._id_upper_bound}")

    @property
    def probability(self) -> float:
        return self._probability

    @property
    def threshold(self) -> int:
        return self._id_upper_bound

    @property
    def description(self) -> str:
        return self._description

    def should_sample_trace_id(self, trace_id: bytes) -> bool:
        """
        Decide for a raw 16-byte trace id.

        Uses '<' so that probability 0.0 never samples, at the cost of never
        sampling ids whose lower long has absolute value MAX_INT64 when the
        probability is 1.0.
        """
        return wrapping_abs(get_lower_long(trace_id)) < self._id_upper_bound

    def should_sample(self, parameters: SamplingParameters) -> SamplingResult:
        if self.should_sample_trace_id(parameters.trace_id):
            return _SAMPLED
        return _NOT_SAMPLED

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TraceIdRatioBasedSampler):
            return NotImplemented
        return self._probability == other._probability

    def __hash__(self) -> int:
        return hash((TraceIdRatioBasedSampler, self._probability))
