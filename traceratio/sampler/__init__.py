"""Samplers and the OpenTelemetry adapter."""

from traceratio.sampler.base import (
    AlwaysOffSampler,
    AlwaysOnSampler,
    Sampler,
    SamplingParameters,
    SamplingResult,
)
from traceratio.sampler.otel import OTelSamplerAdapter, parent_based, to_otel_sampler
from traceratio.sampler.ratio import MAX_INT64, MIN_INT64, TraceIdRatioBasedSampler

__all__ = [
    "Sampler",
    "SamplingParameters",
    "SamplingResult",
    "AlwaysOnSampler",
    "AlwaysOffSampler",
    "TraceIdRatioBasedSampler",
    "MIN_INT64",
    "MAX_INT64",
    "OTelSamplerAdapter",
    "parent_based",
    "to_otel_sampler",
]
