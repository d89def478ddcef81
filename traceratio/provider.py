"""TracerProvider construction with the configured sampler."""

from __future__ import annotations

import logging
from typing import Dict, Optional

from opentelemetry.sdk.resources import Resource as OTelResource
from opentelemetry.sdk.trace import TracerProvider as OTelTracerProvider

from traceratio.config import SamplingConfig, build_otel_sampler, load_config_with_priority
from traceratio.sampler.base import Sampler
from traceratio.sampler.otel import to_otel_sampler

logger = logging.getLogger(__name__)


def create_tracer_provider(
    config: Optional[SamplingConfig] = None,
    sampler: Optional[Sampler] = None,
    resource: Optional[Dict[str, str]] = None,
) -> OTelTracerProvider:
    """
    Create an OpenTelemetry TracerProvider that samples with traceratio.

    OTel samplers are fixed at provider creation, so swapping the sampler
    means creating a new provider. Span processors and exporters are left
    to the caller.

    Args:
        config: Sampling config; loaded with load_config_with_priority() if omitted
        sampler: Explicit sampler, used as-is instead of the config
        resource: Resource attributes dictionary (converted to OTel Resource)

    Returns:
        OTel TracerProvider
    """
    if sampler is not None:
        otel_sampler = to_otel_sampler(sampler)
    else:
        otel_sampler = build_otel_sampler(config or load_config_with_priority())

    provider = OTelTracerProvider(
        sampler=otel_sampler,
        resource=OTelResource.create(resource or {}),
    )
    logger.info(f"Tracer provider configured with sampler {otel_sampler.get_description()}")
    return provider
