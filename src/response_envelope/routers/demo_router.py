import logging
from pathlib import Path

from fastapi import APIRouter, Query, Request
from fastapi.responses import Response

from response_envelope.domain import errcode
from response_envelope.domain.responses import (
    error,
    error_respond_to,
    success_respond_to,
    throw_tips,
    unauthorized_respond_to,
)
from response_envelope.utils.exceptions import ApplicationError, EnvelopeError, UncaughtFailure

# =============================================================================
#   Logger
# =============================================================================
logger = logging.getLogger(Path(__file__).stem)

# =============================================================================
#   Router
# =============================================================================
router = APIRouter(prefix="/v1/demo", tags=["demo"])

# Read-only sample data.
ITEMS: dict[int, str] = {1: "apple", 2: "pear", 3: "plum"}


# =============================================================================
#   Success
# =============================================================================
@router.get("/greeting", summary="Success envelope with a string payload.")
async def greeting(request: Request) -> Response:
    return success_respond_to(request, "Hey test!")


@router.get(
    "/items",
    summary="List items.",
    description="Invalid query parameters come back as a PARAM_INVALID envelope.",
)
async def list_items(request: Request, limit: int = Query(ge=1, le=100)) -> Response:
    items = [{"id": item_id, "name": name} for item_id, name in ITEMS.items()][:limit]
    return success_respond_to(request, items)


# =============================================================================
#   Business failures
# =============================================================================
@router.get("/items/{item_id}", summary="Fetch one item or a NOT_EXIST envelope.")
async def get_item(request: Request, item_id: int) -> Response:
    logger.debug("GET /v1/demo/items/%d", item_id)
    name = ITEMS.get(item_id)
    if name is None:
        return throw_tips(request, errcode.NOT_EXIST, f"item {item_id}")
    return success_respond_to(request, {"id": item_id, "name": name})


@router.get("/rejected", summary="Generic failure envelope echoing the query.")
async def rejected(request: Request, reason: str = "") -> Response:
    return error_respond_to(request, reason or None)


@router.get("/private", summary="Always answers with the unauthorized envelope.")
async def private(request: Request) -> Response:
    return unauthorized_respond_to(request)


@router.get("/raise/{name}", summary="Raises NOT_EXIST from inside the handler.")
async def raise_not_exist(name: str) -> Response:
    raise ApplicationError(errcode.NOT_EXIST, tips=name)


@router.get("/quota/{user}", summary="Raises a failure envelope carrying quota details.")
async def quota_exceeded(user: str) -> Response:
    raise EnvelopeError(error({"user": user, "limit": 3, "used": 3}))


# =============================================================================
#   Unanticipated failures
# =============================================================================
@router.get("/broken", summary="Raises an uncaught-failure carrier.")
async def broken() -> Response:
    raise UncaughtFailure.here("demo failure")


@router.get("/crash", summary="Raises an arbitrary exception.")
async def crash() -> Response:
    raise RuntimeError("unexpected crash")
