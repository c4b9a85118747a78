"""Translation of domain errors into HTTP responses."""

from collections.abc import Awaitable, Callable
from typing import cast

from fastapi import FastAPI, Request
from loguru import logger
from starlette.responses import JSONResponse, Response

from crm_api.core.exceptions import (
    AccountAlreadyActiveError,
    AccountAlreadyInactiveError,
    AccountError,
    AccountNotFoundError,
    EmailAlreadyExistsError,
    InvalidSearchQueryError,
)

HttpExceptionHandler = Callable[[Request, Exception], Response | Awaitable[Response]]

# Subclasses resolve through the MRO, so AccountEmailNotFoundError maps to 404.
STATUS_CODES: dict[type[AccountError], int] = {
    AccountNotFoundError: 404,
    EmailAlreadyExistsError: 409,
    AccountAlreadyActiveError: 400,
    AccountAlreadyInactiveError: 400,
    InvalidSearchQueryError: 400,
}


def status_code_for(exc: AccountError) -> int:
    for cls in type(exc).__mro__:
        if cls in STATUS_CODES:
            return STATUS_CODES[cls]
    return 400


async def account_error_handler(request: Request, exc: AccountError) -> JSONResponse:
    status_code = status_code_for(exc)
    logger.bind(status_code=status_code, error_type=type(exc).__name__).info(
        "request.rejected: {}", exc.message
    )
    return JSONResponse(status_code=status_code, content={"detail": exc.message})


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the domain error handler to the FastAPI app."""
    app.add_exception_handler(AccountError, cast(HttpExceptionHandler, account_error_handler))
