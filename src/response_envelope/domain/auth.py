import warnings
from typing import Optional, Protocol

from response_envelope.data_models.envelope import Envelope


class Auth(Protocol):
    def ok(self) -> bool: ...

    def response(self) -> Envelope[list[int]]: ...


def interceptor(auth: Auth) -> Optional[Envelope[list[int]]]:
    """Return the rejection envelope when ``auth`` does not pass.

    Deprecated: check authorization in a FastAPI dependency instead.
    """
    warnings.warn(
        "interceptor() is deprecated; use a FastAPI dependency instead.",
        DeprecationWarning,
        stacklevel=2,
    )
    if not auth.ok():
        return auth.response()
    return None
