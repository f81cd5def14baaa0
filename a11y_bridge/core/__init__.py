"""Core infrastructure: logging setup and the exception taxonomy."""

from .exceptions import (
    A11yBridgeError,
    AuditEngineUnavailableError,
    MalformedEngineResponseError,
    ParseError,
)
from .logging import setup_logging

__all__ = [
    "A11yBridgeError",
    "AuditEngineUnavailableError",
    "MalformedEngineResponseError",
    "ParseError",
    "setup_logging",
]
