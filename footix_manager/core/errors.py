# footix_manager/core/errors.py
# Structured API errors: a machine-readable code plus an HTTP status derived from it.

import logging
from typing import Any, Optional

from fastapi import Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

# Error code -> HTTP status. Anything unknown is a 500.
STATUS_BY_CODE = {
    "UNAUTHORIZED": 401,
    "FORBIDDEN": 403,
    "AUCTION_NOT_ACTIVE": 403,
    "BAD_REQUEST": 400,
    "INVALID_DATA": 400,
    "BID_TOO_LOW": 400,
    "OWN_AUCTION_BID": 400,
    "ALREADY_HIGHEST_BID": 400,
    "INSUFFICIENT_BALANCE": 400,
    "BID_OUT_OF_MARKET_RANGE": 400,
    "BID_LIMIT_EXCEEDED": 400,
    "ACTIVE_LOANS_EXIST": 400,
    "NOT_FOUND": 404,
    "AUCTION_NOT_FOUND": 404,
    "CLUB_NOT_FOUND": 404,
    "PLAYER_NOT_FOUND": 404,
    "COMPETITION_NOT_FOUND": 404,
    "LOAN_NOT_FOUND": 404,
    "SERVER_NOT_FOUND": 404,
    "TRANSACTION_ERROR": 500,
    "INTERNAL_SERVER_ERROR": 500,
}


def status_for_code(code: str) -> int:
    """Map an error code to its HTTP status."""
    return STATUS_BY_CODE.get(code, 500)


class ApiError(Exception):
    """
    Raised by route handlers for any request that cannot be served.
    The code decides the HTTP status; details are passed through to the client.
    """

    def __init__(self, message: str, code: str, details: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details

    @property
    def status_code(self) -> int:
        return status_for_code(self.code)

    def to_dict(self) -> dict:
        body = {"error": self.message, "code": self.code}
        if self.details is not None:
            body["details"] = self.details
        return body


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s (%s)", request.method, request.url.path, exc.message, exc.code)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())
