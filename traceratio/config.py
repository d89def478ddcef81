"""Sampling configuration loaded from TOML, environment and explicit overrides.

Priority (lowest to highest):
- defaults
- ``[sampling]`` table of a ``traceratio.toml`` file
- environment: TRACERATIO_SAMPLE_PROBABILITY (or OTEL_TRACES_SAMPLER_ARG),
  TRACERATIO_PARENT_BASED
- explicit overrides passed by the caller

Only types are checked here. The probability range is enforced by the
sampler itself when it is built.
"""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from opentelemetry.sdk.trace import sampling as otel_sampling
from pydantic import BaseModel, ConfigDict, field_validator
from pydantic import ValidationError as PydanticValidationError

from traceratio.errors import ConfigError
from traceratio.sampler.otel import parent_based, to_otel_sampler
from traceratio.sampler.ratio import TraceIdRatioBasedSampler

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "traceratio.toml"
CONFIG_SECTION = "sampling"

ENV_PROBABILITY = "TRACERATIO_SAMPLE_PROBABILITY"
ENV_OTEL_SAMPLER_ARG = "OTEL_TRACES_SAMPLER_ARG"
ENV_PARENT_BASED = "TRACERATIO_PARENT_BASED"


class SamplingConfig(BaseModel):
    """Validated sampling configuration."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    probability: float = 1.0
    parent_based: bool = True

    @field_validator("probability", mode="before")
    @classmethod
    def _reject_bool_probability(cls, value: Any) -> Any:
        # bool would otherwise coerce to 0.0 or 1.0
        if isinstance(value, bool):
            raise ValueError("probability must be a number, not a boolean")
        return value


def find_config_file() -> Optional[str]:
    """
    Look for traceratio.toml in the current directory, then the home directory.

    Returns:
        Path of the first file found, or None
    """
    candidates = [Path.cwd() / CONFIG_FILE_NAME, Path.home() / CONFIG_FILE_NAME]
    for candidate in candidates:
        if candidate.is_file():
            return str(candidate)
    return None


def load_toml_config(path: str) -> Dict[str, Any]:
    """
    Load a TOML config file.

    Returns an empty dict if the file does not exist.

    Raises:
        ConfigError: if the file is not valid TOML
    """
    config_path = Path(path)
    if not config_path.is_file():
        return {}
    try:
        with config_path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}", {"path": path}) from e


def load_env_config() -> Dict[str, str]:
    """Collect raw sampling settings from environment variables."""
    env: Dict[str, str] = {}
    probability = os.getenv(ENV_PROBABILITY) or os.getenv(ENV_OTEL_SAMPLER_ARG)
    if probability:
        env["probability"] = probability.strip()
    parent = os.getenv(ENV_PARENT_BASED)
    if parent:
        env["parent_based"] = parent.strip()
    return env


def validate_config(values: Mapping[str, Any]) -> SamplingConfig:
    """
    Validate raw settings into a SamplingConfig.

    Raises:
        ConfigError: on unknown keys or values of the wrong type
    """
    try:
        return SamplingConfig(**values)
    except PydanticValidationError as e:
        raise ConfigError(
            "Invalid sampling configuration",
            {"errors": "; ".join(
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
            )},
        ) from e


def load_config_with_priority(
    config_file: Optional[str] = None,
    overrides: Optional[Mapping[str, Any]] = None,
) -> SamplingConfig:
    """
    Merge defaults, config file, environment and overrides.

    Args:
        config_file: Explicit TOML path. When omitted, find_config_file() is used.
        overrides: Highest-priority values, e.g. from function arguments

    Returns:
        Validated SamplingConfig
    """
    merged: Dict[str, Any] = {}

    path = config_file or find_config_file()
    if path:
        if config_file and not Path(config_file).is_file():
            logger.warning(f"Config file {config_file} not found, using defaults")
        file_section = load_toml_config(path).get(CONFIG_SECTION, {})
        if not isinstance(file_section, dict):
            raise ConfigError(
                f"[{CONFIG_SECTION}] must be a table", {"path": path}
            )
        merged.update(file_section)

    merged.update(load_env_config())

    if overrides:
        merged.update({k: v for k, v in overrides.items() if v is not None})

    return validate_config(merged)


def build_sampler(config: SamplingConfig) -> TraceIdRatioBasedSampler:
    """
    Build the ratio sampler described by ``config``.

    Raises:
        InvalidArgumentError: if the probability is outside [0.0, 1.0]
    """
    return TraceIdRatioBasedSampler(config.probability)


def build_otel_sampler(config: SamplingConfig) -> otel_sampling.Sampler:
    """Build the OTel sampler for ``config``, parent-based when configured."""
    sampler = build_sampler(config)
    if config.parent_based:
        return parent_based(sampler)
    return to_otel_sampler(sampler)
