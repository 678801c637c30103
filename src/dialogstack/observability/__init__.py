"""Observability module for dialogstack."""

from dialogstack.observability.logging import ContextLogger, setup_logging

__all__ = ["ContextLogger", "setup_logging"]
