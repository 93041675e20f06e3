from response_envelope.data_models.envelope import Envelope
from response_envelope.data_models.error_code import ErrorCode, ErrorCodeRegistry

__all__ = [
    "Envelope",
    "ErrorCode",
    "ErrorCodeRegistry",
]
