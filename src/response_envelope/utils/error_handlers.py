"""Global exception handlers registered on the FastAPI application. """

import logging
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import Response

from response_envelope.data_models.envelope import Envelope
from response_envelope.domain.errcode import PARAM_INVALID
from response_envelope.utils.exceptions import ApplicationError, EnvelopeError, UncaughtFailure

# =============================================================================
#   Logger
# =============================================================================
logger = logging.getLogger(Path(__file__).stem)


# =============================================================================
#   Validation Error Handler
# =============================================================================
async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> Response:
    """
    Handles validation exceptions raised when request validation fails.

    Args:
        request (Request): The HTTP request object that triggered the validation error.
        exc (RequestValidationError): The exception object containing details of
            validation failures.

    Returns:
        Response: A 200 envelope with the PARAM_INVALID code, the offending
            fields in the message and one "field: reason" string per error as data.
    """
    errors = []
    fields = []
    for error in exc.errors():
        field = " → ".join(str(loc) for loc in error["loc"])
        fields.append(field)
        errors.append(f"{field}: {error['msg']}")

    logger.warning("Validation failed for %s %s: %s", request.method, request.url.path, errors)

    return Envelope[list[str]](
        code=PARAM_INVALID.code,
        data=errors,
        message=PARAM_INVALID.tips(", ".join(fields)),
    ).respond_to(request)


# =============================================================================
#   Application Error Handler
# =============================================================================
async def application_error_handler(request: Request, exc: ApplicationError) -> Response:
    """Render a raised ErrorCode as its envelope."""
    logger.info(
        "%s %s aborted with error code %d.", request.method, request.url.path, exc.error_code.code
    )
    return exc.respond_to(request)


async def envelope_error_handler(request: Request, exc: EnvelopeError) -> Response:
    """Render a raised envelope as is."""
    logger.info(
        "%s %s aborted with envelope code %d.", request.method, request.url.path, exc.envelope.code
    )
    return exc.respond_to(request)


# =============================================================================
#   Uncaught Failure Handlers
# =============================================================================
async def uncaught_failure_handler(request: Request, exc: UncaughtFailure) -> Response:
    logger.error("Uncaught failure on %s %s: %s", request.method, request.url.path, exc)
    return exc.respond_to(request)


async def unexpected_exception_handler(request: Request, exc: Exception) -> Response:
    """Map any other exception onto an UncaughtFailure at its raise site."""
    logger.exception("Unexpected error on %s %s.", request.method, request.url.path)
    return UncaughtFailure.from_exception(exc).respond_to(request)


def register_error_handlers(app: FastAPI) -> None:
    """Register all envelope-aware error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(ApplicationError, application_error_handler)
    app.add_exception_handler(EnvelopeError, envelope_error_handler)
    app.add_exception_handler(UncaughtFailure, uncaught_failure_handler)
    app.add_exception_handler(Exception, unexpected_exception_handler)
