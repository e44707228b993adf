from rest_framework.views import exception_handler as drf_exception_handler
from rest_framework.response import Response
from rest_framework import status
import logging

from core.errors import (
    CapacityExceeded,
    Conflict,
    DomainError,
    Forbidden,
    NotFound,
    StoreError,
    ValidationError,
)

logger = logging.getLogger("shramdaan.api")


DOMAIN_STATUS_CODES = [
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (NotFound, status.HTTP_404_NOT_FOUND),
    (Forbidden, status.HTTP_403_FORBIDDEN),
    (Conflict, status.HTTP_409_CONFLICT),
    (CapacityExceeded, status.HTTP_400_BAD_REQUEST),
]


def _error_body(status_code, message, errors):
    return {
        "success": False,
        "status_code": status_code,
        "message": message,
        "errors": errors,
    }


def _server_error():
    return Response(
        _error_body(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Internal server error.",
            {"detail": "Internal server error."},
        ),
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def custom_exception_handler(exc, context):
    """
    Wrap domain, DRF and Django exceptions into a consistent response format.

    Success responses (2xx) are not touched.
    Only errors come through here.
    """
    if isinstance(exc, DomainError):
        for exc_class, status_code in DOMAIN_STATUS_CODES:
            if isinstance(exc, exc_class):
                return Response(
                    _error_body(status_code, exc.message, exc.errors),
                    status=status_code,
                )

        # StoreError and anything unclassified: no internals leak out
        logger.error(f"Storage failure in {context.get('view').__class__.__name__}: {exc}")
        return _server_error()

    response = drf_exception_handler(exc, context)

    # If DRF handled it, wrap it
    if response is not None:
        data = response.data
        message = data.get("detail", "") if isinstance(data, dict) else ""
        # Keep DRF's headers (WWW-Authenticate, Retry-After)
        response.data = _error_body(response.status_code, str(message), data)
        return response

    # Unhandled exceptions -> 500
    logger.exception("Unhandled API exception", exc_info=exc)

    return _server_error()
