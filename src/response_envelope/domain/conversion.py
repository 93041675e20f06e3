"""Turns any handler result into a wire response.

A producer is anything exposing ``respond_to(request)``: ``Envelope``,
``ErrorCode``, ``ApplicationError`` and ``UncaughtFailure`` all qualify
without sharing a base class.
"""

import logging
from pathlib import Path
from typing import Any, Optional, Protocol, runtime_checkable

from fastapi import Request
from fastapi.responses import Response

# =============================================================================
#   Logger
# =============================================================================
logger = logging.getLogger(Path(__file__).stem)


@runtime_checkable
class Responder(Protocol):
    """Something that can render itself as an HTTP response."""

    def respond_to(self, request: Optional[Request] = None) -> Response: ...


def convert(value: Any, request: Optional[Request] = None) -> Response:
    """Convert a producer into a response.

    Args:
        value: Envelope, ErrorCode, ApplicationError or UncaughtFailure.
        request: Incoming request, passed through to the producer.

    Returns:
        The response (status, headers, body).

    Raises:
        TypeError: If ``value`` cannot render itself.
    """
    if not isinstance(value, Responder):
        raise TypeError(f"Cannot convert {type(value).__name__} into a response")

    logger.debug("Converting %s into a response.", type(value).__name__)
    return value.respond_to(request)
