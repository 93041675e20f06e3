import inspect
import traceback
from typing import TYPE_CHECKING, Optional

from fastapi import Request, status
from fastapi.responses import Response

if TYPE_CHECKING:
    from response_envelope.data_models.envelope import Envelope
    from response_envelope.data_models.error_code import ErrorCode

HTML_MEDIA_TYPE = "text/html"


# =============================================================================
#   Catalogued application error
# =============================================================================
class ApplicationError(Exception):
    """Raised to abort a handler with a catalogued ErrorCode.

    Rendered as a 200 envelope carrying the error's code and message.
    """

    def __init__(self, error_code: "ErrorCode", tips: Optional[str] = None) -> None:
        self.error_code = error_code
        self.tips = tips
        super().__init__(error_code, tips)

    def respond_to(self, request: Optional[Request] = None) -> Response:
        return self.error_code.to_envelope(self.tips).respond_to(request)

    def __str__(self) -> str:
        if self.tips is None:
            return self.error_code.message
        return self.error_code.tips(self.tips)


# =============================================================================
#   Arbitrary envelope raised as an error
# =============================================================================
class EnvelopeError(Exception):
    """Raised to abort a handler with a ready-made envelope, payload included.

    Rendered exactly like the envelope itself: HTTP 200 and JSON.
    """

    def __init__(self, envelope: "Envelope") -> None:
        self.envelope = envelope
        super().__init__(envelope)

    def respond_to(self, request: Optional[Request] = None) -> Response:
        return self.envelope.respond_to(request)

    def __str__(self) -> str:
        return str(self.envelope)


# =============================================================================
#   Uncaught-failure carrier
# =============================================================================
class UncaughtFailure(Exception):
    """An unanticipated fault, tagged with the source location that raised it.

    This is the only outcome rendered with a non-success HTTP status:
    ``400`` with a ``text/html`` body of ``"<file>:<line> <message>"``.
    """

    def __init__(self, file: str, line: int, message: str) -> None:
        self.file = file
        self.line = line
        self.message = message
        super().__init__(file, line, message)

    @classmethod
    def here(cls, message: str) -> "UncaughtFailure":
        """Build a carrier pointing at the caller's file and line."""
        frame = inspect.currentframe()
        caller = frame.f_back if frame is not None else None
        if caller is None:
            return cls("<unknown>", 0, message)
        return cls(caller.f_code.co_filename, caller.f_lineno, message)

    @classmethod
    def from_exception(cls, exc: BaseException) -> "UncaughtFailure":
        """Build a carrier from the innermost traceback frame of ``exc``."""
        frames = traceback.extract_tb(exc.__traceback__)
        message = f"{type(exc).__name__}: {exc}" if str(exc) else type(exc).__name__
        if not frames:
            return cls("<unknown>", 0, message)
        return cls(frames[-1].filename, frames[-1].lineno or 0, message)

    def respond_to(self, request: Optional[Request] = None) -> Response:
        return Response(
            content=str(self),
            status_code=status.HTTP_400_BAD_REQUEST,
            media_type=HTML_MEDIA_TYPE,
        )

    def __str__(self) -> str:
        return f"{self.file}:{self.line} {self.message}"
