import logging
from pathlib import Path
from typing import Optional, TypeVar

from fastapi import Request
from fastapi.responses import Response

from response_envelope.config import configuration
from response_envelope.config.constants import GENERIC_FAILURE_CODE, SUCCESS_CODE
from response_envelope.data_models.envelope import Envelope
from response_envelope.data_models.error_code import ErrorCode

# =============================================================================
#   Logger
# =============================================================================
logger = logging.getLogger(Path(__file__).stem)

T = TypeVar("T")


# =============================================================================
#   Envelope builders
# =============================================================================
def success(data: Optional[T] = None) -> Envelope[T]:
    """Successful outcome: code 200, localized "success" message.

    Example::

        @router.get("/greeting")
        async def greeting(request: Request) -> Response:
            return success("Hey test!").respond_to(request)
    """
    return Envelope(code=SUCCESS_CODE, data=data, message=configuration.messages.text("success"))


def error(data: Optional[T] = None) -> Envelope[T]:
    """Generic failure: sentinel code 0, localized "failure" message."""
    return Envelope(
        code=GENERIC_FAILURE_CODE,
        data=data,
        message=configuration.messages.text("failure"),
    )


def unauthorized() -> Envelope[None]:
    """Fixed-shape "no permission" envelope; never carries a payload."""
    return Envelope[None](
        code=GENERIC_FAILURE_CODE,
        data=None,
        message=configuration.messages.text("unauthorized"),
    )


# =============================================================================
#   Build-and-respond shortcuts
# =============================================================================
def success_respond_to(request: Optional[Request], data: Optional[T] = None) -> Response:
    return success(data).respond_to(request)


def error_respond_to(request: Optional[Request], data: Optional[T] = None) -> Response:
    return error(data).respond_to(request)


def unauthorized_respond_to(request: Optional[Request]) -> Response:
    logger.debug("Responding with unauthorized envelope.")
    return unauthorized().respond_to(request)


def throw(request: Optional[Request], error_code: ErrorCode) -> Response:
    """Render ``error_code`` with its raw template.

    Example::

        return throw(request, errcode.VALID_CODE_ERROR)
    """
    return error_code.throw(request)


def throw_tips(request: Optional[Request], error_code: ErrorCode, tips: str) -> Response:
    """Render ``error_code`` with ``%s`` replaced by ``tips``.

    Example::

        return throw_tips(request, errcode.NOT_EXIST, "user 42")
    """
    return error_code.throw_tips(request, tips)
