import logging
from pathlib import Path
from typing import Generic, Optional, TypeVar

from fastapi import Request, status
from fastapi.responses import Response
from pydantic import AliasChoices, BaseModel, Field
from pydantic_core import PydanticSerializationError

from response_envelope.config.constants import GENERIC_FAILURE_CODE
from response_envelope.utils.exceptions import UncaughtFailure

# =============================================================================
#   Logger
# =============================================================================
logger = logging.getLogger(Path(__file__).stem)

T = TypeVar("T")

JSON_MEDIA_TYPE = "application/json"


# =============================================================================
#   Envelope
# =============================================================================
class Envelope(BaseModel, Generic[T]):
    """Uniform response wrapper returned for every request outcome.

    Serialized as ``{"code": ..., "data": ..., "msg": ...}``. All three keys are
    always present; an absent payload is written as ``null``. The logical
    outcome lives in ``code``, never in the HTTP status.

    Attributes:
        code: Logical outcome code. ``0`` is the generic failure sentinel.
        data: Optional payload.
        message: Human-readable message, ``msg`` on the wire.
    """

    code: int = GENERIC_FAILURE_CODE
    data: Optional[T] = None
    message: str = Field(
        default="",
        validation_alias=AliasChoices("msg", "message"),
        serialization_alias="msg",
    )

    def body_json(self) -> str:
        """Serialize the envelope to its compact JSON wire form.

        Raises:
            UncaughtFailure: If the payload cannot be serialized.
        """
        try:
            return self.model_dump_json(by_alias=True)
        except PydanticSerializationError as exc:
            raise UncaughtFailure.here(f"envelope payload is not serializable: {exc}") from exc

    def respond_to(self, request: Optional[Request] = None) -> Response:
        """Convert into a 200 JSON response, whatever the logical code."""
        body = self.body_json()
        logger.debug("Envelope response code=%d", self.code)
        return Response(
            content=body,
            status_code=status.HTTP_200_OK,
            media_type=JSON_MEDIA_TYPE,
        )

    def __str__(self) -> str:
        return self.body_json()
