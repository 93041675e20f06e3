from response_envelope.domain.auth import Auth, interceptor
from response_envelope.domain.conversion import Responder, convert
from response_envelope.domain.errcode import ERROR_CODES
from response_envelope.domain.responses import (
    error,
    error_respond_to,
    success,
    success_respond_to,
    throw,
    throw_tips,
    unauthorized,
    unauthorized_respond_to,
)

__all__ = [
    "Auth",
    "interceptor",
    "ERROR_CODES",
    "Responder",
    "convert",
    "success",
    "success_respond_to",
    "error",
    "error_respond_to",
    "unauthorized",
    "unauthorized_respond_to",
    "throw",
    "throw_tips",
]
