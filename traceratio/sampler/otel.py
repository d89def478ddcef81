"""Adapter exposing traceratio samplers through the OpenTelemetry SDK interface."""

from __future__ import annotations

from typing import Mapping, Optional, Sequence

from opentelemetry.context import Context
from opentelemetry.sdk.trace import sampling as otel_sampling
from opentelemetry.trace import Link, SpanKind, TraceState, get_current_span
from opentelemetry.util.types import Attributes

from traceratio.sampler.base import Sampler, SamplingParameters
from traceratio.utils.helpers import trace_id_to_bytes


def _get_parent_trace_state(parent_context: Optional[Context]) -> Optional[TraceState]:
    parent_span_context = get_current_span(parent_context).get_span_context()
    if parent_span_context is None or not parent_span_context.is_valid:
        return None
    return parent_span_context.trace_state


def _apply_trace_state_updates(
    trace_state: Optional[TraceState], updates: Optional[Mapping[str, str]]
) -> Optional[TraceState]:
    if not updates:
        return trace_state
    trace_state = trace_state or TraceState()
    for key, value in updates.items():
        if key in trace_state:
            trace_state = trace_state.update(key, value)
        else:
            trace_state = trace_state.add(key, value)
    return trace_state


class OTelSamplerAdapter(otel_sampling.Sampler):
    """
    Wraps a traceratio Sampler so it can be handed to an OTel TracerProvider.

    OTel passes the trace id as a 128-bit int; it is converted to the 16-byte
    big-endian form before delegating. Attributes and trace-state updates
    returned by a sampled decision are applied on top of the caller's
    attributes and the parent's trace state.
    """

    def __init__(self, sampler: Sampler) -> None:
        self._sampler = sampler

    @property
    def sampler(self) -> Sampler:
        return self._sampler

    def should_sample(
        self,
        parent_context: Optional[Context],
        trace_id: int,
        name: str,
        kind: Optional[SpanKind] = None,
        attributes: Attributes = None,
        links: Optional[Sequence[Link]] = None,
        trace_state: Optional[TraceState] = None,
    ) -> otel_sampling.SamplingResult:
        parameters = SamplingParameters(
            trace_id=trace_id_to_bytes(trace_id),
            name=name,
            parent_context=parent_context,
            kind=kind,
            attributes=attributes,
            links=links,
        )
        result = self._sampler.should_sample(parameters)

        if result.sampled:
            decision = otel_sampling.Decision.RECORD_AND_SAMPLE
            if result.attributes:
                attributes = {**(attributes or {}), **result.attributes}
        else:
            decision = otel_sampling.Decision.DROP
            attributes = None
        return otel_sampling.SamplingResult(
            decision,
            attributes,
            _apply_trace_state_updates(
                _get_parent_trace_state(parent_context), result.trace_state_updates
            ),
        )

    def get_description(self) -> str:
        return self._sampler.description


def to_otel_sampler(sampler: Sampler) -> otel_sampling.Sampler:
    """Return an OTel sampler for ``sampler``, reusing an existing adapter."""
    if isinstance(sampler, OTelSamplerAdapter):
        return sampler
    return OTelSamplerAdapter(sampler)


def parent_based(sampler: Sampler) -> otel_sampling.ParentBased:
    """
    Compose ``sampler`` as the root of OTel's ParentBased sampler.

    New traces are decided by ``sampler``; child spans follow their parent's
    sampled flag.
    """
    return otel_sampling.ParentBased(root=to_otel_sampler(sampler))
