"""
API Middleware - Request context and error translation.

Provides:
- Request ID plus latency headers and one access log line per request
- DataOpsError to JSON translation, status chosen by error code
"""

from __future__ import annotations

import logging
import time
import uuid
from collections.abc import Awaitable, Callable

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from dataops.config.errors import DataOpsError, ErrorCode

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"

# Codes absent here are server faults (500)
ERROR_STATUS: dict[ErrorCode, int] = {
    ErrorCode.SEQUENCE_MISSING: 400,
    ErrorCode.SEQUENCE_INVALID_TYPE: 400,
    ErrorCode.SEQUENCE_INVALID_ELEMENT: 400,
    ErrorCode.KEY_INVALID: 400,
    ErrorCode.VALIDATION_ERROR: 400,
    ErrorCode.SEQUENCE_TOO_LONG: 413,
}


def _request_id(request: Request) -> str:
    return getattr(request.state, "request_id", "unknown")


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Tag each request with an ID, time it, and log the outcome."""

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        request.state.request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        started = time.perf_counter()

        response = await call_next(request)

        elapsed_ms = (time.perf_counter() - started) * 1000
        response.headers[REQUEST_ID_HEADER] = request.state.request_id
        response.headers["X-Response-Time-Ms"] = f"{elapsed_ms:.2f}"

        logger.info(
            "%s %s -> %d in %.2fms request_id=%s",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
            request.state.request_id,
        )
        return response


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """Turn failures raised by the sort/search routes into error payloads."""

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        try:
            return await call_next(request)
        except DataOpsError as e:
            status = ERROR_STATUS.get(e.code, 500)
            logger.warning(
                "Rejected %s: code=%s index=%s status=%d request_id=%s",
                request.url.path,
                e.code.value,
                e.details.get("index", "-"),
                status,
                _request_id(request),
            )
            return _error_response(status, e.to_dict(), request)
        except Exception:
            logger.exception("Unhandled error on %s request_id=%s", request.url.path, _request_id(request))
            payload = {
                "code": ErrorCode.INTERNAL_ERROR.value,
                "message": "Internal server error",
                "details": {},
            }
            return _error_response(500, payload, request)


def _error_response(status: int, error: dict, request: Request) -> JSONResponse:
    return JSONResponse(
        status_code=status,
        content={"error": error, "request_id": _request_id(request)},
    )
