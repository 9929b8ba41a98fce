"""Global error handling middleware for consistent error responses."""

import logging
import traceback
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, Request, Response, status
from fastapi.responses import JSONResponse

from src.core.result import Err, Result, StoreError, StoreErrorKind
from src.schemas.common import ErrorResponse

logger = logging.getLogger(__name__)

T = TypeVar("T")


class APIError(Exception):
    """Base exception for API errors.

    Use this class to raise application-specific errors that should
    be returned to the client with a specific status code and message.
    """

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        error_type: str = "api_error",
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        """Initialize API error.

        Args:
            message: Human-readable error message.
            status_code: HTTP status code to return.
            error_type: Error category/type for client handling.
            details: Optional additional error details.
        """
        self.message = message
        self.status_code = status_code
        self.error_type = error_type
        self.details = details
        super().__init__(message)


class NotFoundError(APIError):
    """Resource not found error."""

    def __init__(self, message: str = "Resource not found", details: list[dict[str, Any]] | None = None) -> None:
        super().__init__(
            message=message,
            status_code=status.HTTP_404_NOT_FOUND,
            error_type="not_found",
            details=details,
        )


class UpstreamError(APIError):
    """The database rejected or failed a request."""

    def __init__(self, message: str = "Upstream store error", details: list[dict[str, Any]] | None = None) -> None:
        super().__init__(
            message=message,
            status_code=status.HTTP_502_BAD_GATEWAY,
            error_type="upstream_error",
            details=details,
        )


class UpstreamTimeoutError(APIError):
    """The database did not answer in time."""

    def __init__(self, message: str = "Upstream store timed out", details: list[dict[str, Any]] | None = None) -> None:
        super().__init__(
            message=message,
            status_code=status.HTTP_504_GATEWAY_TIMEOUT,
            error_type="upstream_timeout",
            details=details,
        )


def api_error_from_store(error: StoreError) -> APIError:
    """Map a store error carried as data to the matching API error."""
    if error.kind is StoreErrorKind.NOT_FOUND:
        return NotFoundError(error.message)

    # Store messages stay in the logs; clients only see the code
    logger.error("Store error: %s (%s) %s", error.kind.value, error.code, error.message)
    details = [{"msg": "Store request failed", "type": error.code or error.kind.value}]
    if error.kind is StoreErrorKind.TIMEOUT:
        return UpstreamTimeoutError(details=details)
    return UpstreamError(details=details)


def unwrap(result: Result[T]) -> T:
    """Return the data of a successful result or raise the mapped API error."""
    if isinstance(result, Err):
        raise api_error_from_store(result.error)
    return result.data


def create_error_response(
    error_type: str,
    message: str,
    status_code: int,
    details: list[dict[str, Any]] | None = None,
    request_id: str | None = None,
) -> JSONResponse:
    """Create a standardized JSON error response.

    Args:
        error_type: Error category for client handling.
        message: Human-readable error description.
        status_code: HTTP status code.
        details: Optional error details.
        request_id: Optional request ID for tracing.

    Returns:
        JSONResponse: Formatted error response.
    """
    error_response = ErrorResponse.from_exception(
        error_type=error_type,
        message=message,
        details=details,
        request_id=request_id,
    )
    return JSONResponse(
        status_code=status_code,
        content=error_response.model_dump(mode="json", exclude_none=True),
    )


async def error_handler_middleware(request: Request, call_next: Callable[[Request], Any]) -> Response:
    """Middleware to catch and format all exceptions.

    Ensures consistent error response format across the application.
    Logs full stack traces for debugging while returning safe messages to clients.

    Args:
        request: The incoming request.
        call_next: Next middleware or route handler.

    Returns:
        Response: Either the successful response or formatted error response.
    """
    # Extract request ID if present (can be set by upstream middleware/load balancer)
    request_id = request.headers.get("X-Request-ID")

    try:
        response = await call_next(request)
        return response

    except APIError as e:
        if e.status_code >= 500:
            logger.error(
                "API error: %s - %s",
                e.error_type,
                e.message,
                extra={"request_id": request_id, "status_code": e.status_code},
            )
        else:
            logger.warning(
                "API error: %s - %s",
                e.error_type,
                e.message,
                extra={"request_id": request_id, "status_code": e.status_code},
            )
        return create_error_response(
            error_type=e.error_type,
            message=e.message,
            status_code=e.status_code,
            details=e.details,
            request_id=request_id,
        )

    except HTTPException as e:
        # FastAPI HTTP exceptions
        logger.warning(
            "HTTP exception: %s - %s",
            e.status_code,
            e.detail,
            extra={"request_id": request_id},
        )
        return create_error_response(
            error_type="http_error",
            message=str(e.detail),
            status_code=e.status_code,
            request_id=request_id,
        )

    except Exception as e:
        # Unexpected exceptions - log full stack trace
        logger.error(
            "Unhandled exception: %s\n%s",
            str(e),
            traceback.format_exc(),
            extra={"request_id": request_id},
        )
        return create_error_response(
            error_type="internal_error",
            message="An unexpected error occurred",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            request_id=request_id,
        )
