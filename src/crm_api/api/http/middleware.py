"""Request logging and last-resort error handling."""

import time
import uuid
from collections.abc import Awaitable, Callable

from fastapi import Request
from loguru import logger
from starlette.responses import JSONResponse, Response

REQUEST_ID_HEADER = "X-Request-ID"


def _client_ip(request: Request) -> str:
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.client.host if request.client else "unknown"


async def log_requests(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """Log one start and one end line per request and tag the response.

    Every record logged while handling the request carries ``request_id``.
    Exceptions nothing else handled become a 500 without internal details.
    """
    request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
    started = time.perf_counter()

    def elapsed_ms() -> float:
        return round((time.perf_counter() - started) * 1000, 1)

    with logger.contextualize(
        request_id=request_id,
        method=request.method,
        path=request.url.path,
        client_ip=_client_ip(request),
    ):
        logger.info("request.start")
        try:
            response = await call_next(request)
        except Exception as exc:
            logger.bind(
                status_code=500, duration_ms=elapsed_ms(), error_type=type(exc).__name__
            ).exception("request.error")
            return JSONResponse(
                status_code=500,
                content={"detail": "Internal Server Error", "request_id": request_id},
                headers={REQUEST_ID_HEADER: request_id},
            )

        logger.bind(status_code=response.status_code, duration_ms=elapsed_ms()).info("request.end")
        response.headers.setdefault(REQUEST_ID_HEADER, request_id)
        return response
