"""Translation of use case errors into HTTP responses."""

from typing import NoReturn

import logfire
import pydantic
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response

from social.domain.error import (
    BusinessRuleViolationError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from social.util.jwt import JWTError

PAGE_PARAMS = ("limit", "offset")


def raise_http_error(error: Exception, action: str) -> NoReturn:
    """Raise the HTTPException matching ``error``.

    Store and other unexpected errors become a 500 without leaking detail.

    Args:
        error: Exception raised while serving the request
        action: What the route was doing, for the log
    """
    if isinstance(error, HTTPException):
        raise error
    if isinstance(error, NotFoundError):
        logfire.info(f"{action}: not found", error=str(error))
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{error.resource} not found",
        )
    if isinstance(error, NotAuthorizedError):
        logfire.warn(f"{action}: not authorized", error=str(error))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"Not authorized to modify this {error.resource}",
        )
    if isinstance(error, (BusinessRuleViolationError, ValidationError)):
        logfire.warn(f"{action}: rejected", error=str(error))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(error),
        )
    if isinstance(error, (pydantic.ValidationError, ValueError)):
        logfire.warn(f"{action}: validation error", error=str(error))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid request",
        )
    if isinstance(error, JWTError):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(error),
        )

    logfire.error(f"{action}: unexpected error", error=str(error))
    raise HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Internal server error",
    )


def _is_page_param_error(error: dict) -> bool:
    loc = error.get("loc", ())
    return len(loc) == 2 and loc[0] == "query" and loc[1] in PAGE_PARAMS


def install_error_handlers(app: FastAPI) -> None:
    """Answer malformed ``limit``/``offset`` with 400 like out of range ones.

    Every other validation error keeps FastAPI's 422 response.
    """

    @app.exception_handler(RequestValidationError)
    async def validation_exc_handler(
        request: Request, exc: RequestValidationError
    ) -> Response:
        errors = exc.errors()
        if errors and all(_is_page_param_error(error) for error in errors):
            logfire.warn(
                "Invalid page parameters",
                path=request.url.path,
                params=[error["loc"][1] for error in errors],
            )
            return JSONResponse(
                status_code=status.HTTP_400_BAD_REQUEST,
                content={"detail": "limit and offset must be integers"},
            )
        return await request_validation_exception_handler(request, exc)
