"""traceratio error hierarchy and exceptions."""

from __future__ import annotations


class TraceRatioError(Exception):
    """Base exception for all traceratio errors."""

    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message


class InvalidArgumentError(TraceRatioError, ValueError):
    """Raised when a sampler is constructed with an out-of-range argument."""
    pass


class ValidationError(TraceRatioError, ValueError):
    """Raised when sampling input is malformed at the boundary."""
    pass


class ConfigError(TraceRatioError):
    """Raised when configuration is invalid or cannot be parsed."""
    pass
