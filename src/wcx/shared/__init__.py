"""Shared exports used across wcx layers."""

from .errors import (
    ConfigurationError,
    DecodeFailure,
    IoFailure,
    MetricsIOError,
    NotFound,
    PermissionDenied,
    WcxError,
)

__all__ = [
    "ConfigurationError",
    "DecodeFailure",
    "IoFailure",
    "MetricsIOError",
    "NotFound",
    "PermissionDenied",
    "WcxError",
]
