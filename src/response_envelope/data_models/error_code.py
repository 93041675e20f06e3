from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Optional

from fastapi import Request
from fastapi.responses import Response
from pydantic import BaseModel, ConfigDict, Field

from response_envelope.config.constants import GENERIC_FAILURE_CODE
from response_envelope.data_models.envelope import Envelope

PLACEHOLDER = "%s"

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


# =============================================================================
#   ErrorCode
# =============================================================================
class ErrorCode(BaseModel):
    """A catalogued application error: numeric code plus message template.

    The template may contain a ``%s`` placeholder that :meth:`tips` fills in.
    Instances are immutable and meant to be defined once as module constants.
    """

    model_config = ConfigDict(frozen=True)

    code: int = Field(ge=INT64_MIN, le=INT64_MAX)
    message: str

    @classmethod
    def new(cls, code: int, message: str) -> "ErrorCode":
        """Build a catalog entry. Uniqueness is checked by the registry, not here."""
        return cls(code=code, message=message)

    def code_string(self) -> str:
        return str(self.code)

    def tips(self, tips: str) -> str:
        """Return the template with every ``%s`` replaced by ``tips``.

        Templates without a placeholder are returned unchanged.
        """
        return self.message.replace(PLACEHOLDER, tips)

    def to_envelope(self, tips: Optional[str] = None) -> Envelope[None]:
        """Envelope for this error, with the template filled in when ``tips`` is given."""
        message = self.message if tips is None else self.tips(tips)
        return Envelope[None](code=self.code, data=None, message=message)

    def throw(self, request: Optional[Request] = None) -> Response:
        """Render the raw template as an envelope response."""
        return self.to_envelope().respond_to(request)

    def throw_tips(self, request: Optional[Request], tips: str) -> Response:
        """Render the filled-in template as an envelope response."""
        return self.to_envelope(tips).respond_to(request)

    def respond_to(self, request: Optional[Request] = None) -> Response:
        return self.throw(request)

    def __str__(self) -> str:
        return f"({self.code}, {self.message})"


# =============================================================================
#   ErrorCodeRegistry
# =============================================================================
class ErrorCodeRegistry(Mapping[str, ErrorCode]):
    """Read-only catalog of named error codes.

    Entries are also reachable as attributes (``registry.NOT_EXIST``).
    Construction fails on duplicate codes and on the generic failure
    sentinel ``0``, which is reserved for ``error()`` and ``unauthorized()``.
    """

    def __init__(self, entries: Mapping[str, ErrorCode]) -> None:
        by_code: dict[int, ErrorCode] = {}
        for name, error_code in entries.items():
            if error_code.code == GENERIC_FAILURE_CODE:
                raise ValueError(
                    f"{name}: code {GENERIC_FAILURE_CODE} is reserved for generic failures"
                )
            if error_code.code in by_code:
                raise ValueError(f"{name}: duplicate error code {error_code.code}")
            by_code[error_code.code] = error_code

        self._entries = MappingProxyType(dict(entries))
        self._by_code = MappingProxyType(by_code)

    def __getitem__(self, name: str) -> ErrorCode:
        return self._entries[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __getattr__(self, name: str) -> ErrorCode:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._entries[name]
        except KeyError:
            raise AttributeError(f"Unknown error code: {name}") from None

    def by_code(self, code: int) -> Optional[ErrorCode]:
        """Look up an entry by its numeric code."""
        return self._by_code.get(code)
