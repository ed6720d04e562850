"""Logging infrastructure."""

from .logger import get_logger, redact_secrets, setup_logging

__all__ = ["get_logger", "setup_logging", "redact_secrets"]
