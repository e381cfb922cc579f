import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from lads.config.constants import MSG_ALREADY_REGISTERED, MSG_INVALID_EMAIL, MSG_JOIN_FAILED

logger = logging.getLogger("lads.api")


class WaitlistError(Exception):
    """Base error for the waitlist API, rendered as a JSON body with an ``error`` field."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, extra: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.extra = extra or {}

    def payload(self) -> Dict[str, Any]:
        return {"error": self.message, **self.extra}


class InvalidInput(WaitlistError):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str = MSG_INVALID_EMAIL):
        super().__init__(message)


class Conflict(WaitlistError):
    status_code = status.HTTP_409_CONFLICT

    def __init__(self, message: str = MSG_ALREADY_REGISTERED):
        super().__init__(message)


class StorageFailure(WaitlistError):
    """Connection, lookup or insert failure in the document store."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str = MSG_JOIN_FAILED, details: Optional[str] = None, extra: Optional[Dict[str, Any]] = None):
        extra = dict(extra or {})
        if details is not None:
            extra["details"] = details
        super().__init__(message, extra)


def add_exception_handlers(app: FastAPI):
    @app.exception_handler(WaitlistError)
    async def waitlist_error_handler(request: Request, exc: WaitlistError):
        return JSONResponse(content=exc.payload(), status_code=exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        # Only the waitlist signup takes a body, so a malformed one is a bad email
        logger.info(f"Rejected malformed waitlist body: {exc.errors()}")
        error = InvalidInput()
        return JSONResponse(content=error.payload(), status_code=error.status_code)
