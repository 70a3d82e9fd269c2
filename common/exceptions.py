"""
common.exceptions
~~~~~~~~~~~~~~~~~
Application error taxonomy and the DRF exception handler that renders it.

HTML views catch these errors themselves (see :mod:`apps.cats.views`); the
JSON API lets them propagate to :func:`custom_exception_handler`.
"""
import structlog
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

logger = structlog.get_logger(__name__)


class AppError(Exception):
    """Base application error.  Subclass to define domain-specific errors."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    default_code: str = "error"
    default_detail: str = "An error occurred."

    def __init__(
        self,
        detail: str | None = None,
        code: str | None = None,
        errors: list[str] | None = None,
    ) -> None:
        self.detail = detail or self.default_detail
        self.code = code or self.default_code
        self.errors = list(errors or [])
        super().__init__(self.detail)

    def __str__(self) -> str:
        return self.detail


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_code = "not_found"
    default_detail = "The requested resource was not found."


class ValidationError(AppError):
    """
    One or more required fields were missing.

    ``errors`` holds the human-readable violation messages in the order the
    fields were checked, e.g. ``["breed can't be blank"]``.
    """

    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
    default_code = "validation_error"
    default_detail = "Validation failed."


def custom_exception_handler(exc: Exception, context: dict) -> Response | None:
    """
    Global DRF exception handler.

    Converts AppError subclasses to JSON responses of the shape
    ``{"code": ..., "detail": ...}`` (plus ``"errors"`` when the error carries
    violation messages) and delegates everything else to the default DRF
    handler so standard DRF exceptions still work.
    """
    if isinstance(exc, AppError):
        logger.warning(
            "app_error",
            code=exc.code,
            detail=exc.detail,
            status_code=exc.status_code,
            error_count=len(exc.errors),
        )
        payload = {"code": exc.code, "detail": exc.detail}
        if exc.errors:
            payload["errors"] = exc.errors
        return Response(payload, status=exc.status_code)

    response = drf_exception_handler(exc, context)
    if response is not None:
        logger.warning(
            "drf_error",
            detail=response.data,
            status_code=response.status_code,
        )
    else:
        logger.exception("unhandled_exception", exc_info=exc)

    return response
