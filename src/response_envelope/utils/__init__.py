from response_envelope.utils.exceptions import ApplicationError, EnvelopeError, UncaughtFailure
from response_envelope.utils.logging import setup_logging

__all__ = [
    "setup_logging",
    "ApplicationError",
    "EnvelopeError",
    "UncaughtFailure",
]
