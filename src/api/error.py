"""API error translation

Use cases return Error values; routes raise ClientError and the handler
registered in create_app renders {"error": {...}} bodies.
"""

import logging
from typing import Optional
from fastapi import Request, status
from fastapi.responses import JSONResponse
from libs.result import Error

CONFLICT_CODES = {"DOCUMENT_NUMBER_CONFLICT"}
SERVER_ERROR_CODES = {"DATABASE_ERROR", "LOG_WRITE_ERROR"}

logger = logging.getLogger(__name__)


def status_for_error(error: Error) -> int:
    """Default HTTP status for an error code"""
    if error.code.endswith("_NOT_FOUND"):
        return status.HTTP_404_NOT_FOUND
    if error.code in CONFLICT_CODES:
        return status.HTTP_409_CONFLICT
    if error.code in SERVER_ERROR_CODES or error.code.endswith("_FAILED"):
        return status.HTTP_500_INTERNAL_SERVER_ERROR
    return status.HTTP_400_BAD_REQUEST


class ClientError(Exception):
    def __init__(self, error: Error, status_code: Optional[int] = None):
        super().__init__(error.message)
        self.error = error
        self.status_code = status_code or status_for_error(error)

    def to_body(self) -> dict:
        body = {"code": self.error.code, "message": self.error.message}
        if self.error.reason:
            body["reason"] = self.error.reason
        if self.error.issues:
            body["issues"] = self.error.issues
        return {"error": body}


async def client_error_handler(request: Request, exc: ClientError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(
            f"{request.method} {request.url.path} failed: {exc.error.code} {exc.error.reason or exc.error.message}"
        )
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())
