"""traceratio: deterministic trace-id ratio sampling for OpenTelemetry."""

from traceratio.config import (
    SamplingConfig,
    build_otel_sampler,
    build_sampler,
    load_config_with_priority,
)
from traceratio.errors import ConfigError, InvalidArgumentError, TraceRatioError, ValidationError
from traceratio.provider import create_tracer_provider
from traceratio.sampler import (
    AlwaysOffSampler,
    AlwaysOnSampler,
    OTelSamplerAdapter,
    Sampler,
    SamplingParameters,
    SamplingResult,
    TraceIdRatioBasedSampler,
    parent_based,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Sampler",
    "SamplingParameters",
    "SamplingResult",
    "AlwaysOnSampler",
    "AlwaysOffSampler",
    "TraceIdRatioBasedSampler",
    "OTelSamplerAdapter",
    "parent_based",
    "SamplingConfig",
    "load_config_with_priority",
    "build_sampler",
    "build_otel_sampler",
    "create_tracer_provider",
    "TraceRatioError",
    "InvalidArgumentError",
    "ValidationError",
    "ConfigError",
]
