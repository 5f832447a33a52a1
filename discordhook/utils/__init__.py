"""Utility modules for discordhook."""

from discordhook.utils.logging import get_logger, redact, setup_logging

__all__ = ["get_logger", "redact", "setup_logging"]
