"""Process-wide catalog of application error codes.

Code ``0`` is the generic failure sentinel used by ``error()`` and
``unauthorized()`` and is never assigned here. Templates may carry a single
``%s`` placeholder that ``ErrorCode.tips`` fills in.
"""

from response_envelope.data_models.error_code import ErrorCode, ErrorCodeRegistry

# =============================================================================
#   1xxx – request and resource errors
# =============================================================================
VALID_CODE_ERROR = ErrorCode(code=1000, message="invalid verification code")
NOT_EXIST = ErrorCode(code=1001, message="%s does not exist")
PARAM_MISSING = ErrorCode(code=1002, message="missing %s")
PARAM_INVALID = ErrorCode(code=1003, message="invalid parameter: %s")
ALREADY_EXISTS = ErrorCode(code=1004, message="%s already exists")

# =============================================================================
#   11xx – access errors
# =============================================================================
NOT_LOGGED_IN = ErrorCode(code=1101, message="not logged in")
NO_PERMISSION = ErrorCode(code=1102, message="no permission to access %s")
TOO_MANY_REQUESTS = ErrorCode(code=1103, message="too many requests, retry later")

# =============================================================================
#   15xx – server side
# =============================================================================
INTERNAL_ERROR = ErrorCode(code=1500, message="internal error: %s")

ERROR_CODES = ErrorCodeRegistry(
    {
        "VALID_CODE_ERROR": VALID_CODE_ERROR,
        "NOT_EXIST": NOT_EXIST,
        "PARAM_MISSING": PARAM_MISSING,
        "PARAM_INVALID": PARAM_INVALID,
        "ALREADY_EXISTS": ALREADY_EXISTS,
        "NOT_LOGGED_IN": NOT_LOGGED_IN,
        "NO_PERMISSION": NO_PERMISSION,
        "TOO_MANY_REQUESTS": TOO_MANY_REQUESTS,
        "INTERNAL_ERROR": INTERNAL_ERROR,
    }
)
