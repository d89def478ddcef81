"""Sampler interface and the parameters/results it exchanges with a tracer."""

from __future__ import annotations

import abc
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence

from traceratio.errors import ValidationError
from traceratio.utils.helpers import TRACE_ID_BYTES, parse_trace_id, trace_id_to_bytes


@dataclass(frozen=True)
class SamplingParameters:
    """
    Inputs to a sampling decision.

    Only ``trace_id`` is required. The remaining fields are carried for
    samplers that consult span context; a ratio sampler ignores them.
    """

    trace_id: bytes
    name: Optional[str] = None
    parent_context: Optional[Any] = None
    kind: Optional[Any] = None
    attributes: Optional[Mapping[str, Any]] = None
    links: Optional[Sequence[Any]] = None

    def __post_init__(self) -> None:
        if not isinstance(self.trace_id, (bytes, bytearray, memoryview)):
            raise ValidationError(
                "trace_id must be a byte sequence",
                {"type": type(self.trace_id).__name__},
            )
        if len(self.trace_id) != TRACE_ID_BYTES:
            raise ValidationError(
                f"trace_id must be exactly {TRACE_ID_BYTES} bytes",
                {"length": len(self.trace_id)},
            )
        if not isinstance(self.trace_id, bytes):
            object.__setattr__(self, "trace_id", bytes(self.trace_id))

    @classmethod
    def from_int(cls, trace_id: int, **kwargs: Any) -> "SamplingParameters":
        """Build parameters from an OTel-style 128-bit integer trace_id."""
        return cls(trace_id_to_bytes(trace_id), **kwargs)

    @classmethod
    def from_hex(cls, trace_id: str, **kwargs: Any) -> "SamplingParameters":
        """Build parameters from a 32-character hex trace_id."""
        if not trace_id:
            raise ValidationError("trace_id must not be empty")
        try:
            value = parse_trace_id(trace_id)
        except (TypeError, ValueError) as e:
            raise ValidationError(
                "trace_id must be a hex string", {"trace_id": trace_id}
            ) from e
        return cls.from_int(value, **kwargs)


@dataclass(frozen=True)
class SamplingResult:
    sampled: bool
    attributes: Optional[Mapping[str, Any]] = None
    trace_state_updates: Optional[Mapping[str, str]] = None


class Sampler(abc.ABC):
    """
    Base sampler interface.

    Subclasses implement ``should_sample`` as the single decision entry
    point, so composite samplers can wrap any sampler uniformly.
    """

    @abc.abstractmethod
    def should_sample(self, parameters: SamplingParameters) -> SamplingResult:
        pass

    @property
    def description(self) -> str:
        return self.__class__.__name__

    def get_description(self) -> str:
        """OpenTelemetry-style alias for ``description``."""
        return self.description

    def __repr__(self) -> str:
        return self.description


class AlwaysOnSampler(Sampler):
    """Samples every trace."""

    def should_sample(self, parameters: SamplingParameters) -> SamplingResult:
        return SamplingResult(sampled=True)


class AlwaysOffSampler(Sampler):
    """Samples no trace."""

    def should_sample(self, parameters: SamplingParameters) -> SamplingResult:
        return SamplingResult(sampled=False)
