"""
Error category -> (HTTP status, title).

The table is literal so that its completeness can be reviewed and tested.
It is consulted on the failure path only; no entry is in the 2xx range.
"""
from __future__ import annotations

from typing import Any

from starlette import status

from outcome_http.schemas.outcome import ErrorCategory

DEFAULT_STATUS: tuple[int, str] = (status.HTTP_500_INTERNAL_SERVER_ERROR, "Error")

ERROR_CATEGORY_STATUS: dict[ErrorCategory, tuple[int, str]] = {
    ErrorCategory.validation:            (status.HTTP_400_BAD_REQUEST, "Bad Request"),
    ErrorCategory.problem_details:       (status.HTTP_400_BAD_REQUEST, "Bad Request"),
    ErrorCategory.unauthorized:          (status.HTTP_401_UNAUTHORIZED, "Unauthorized"),
    ErrorCategory.forbidden:             (status.HTTP_403_FORBIDDEN, "Forbidden"),
    ErrorCategory.not_found:             (status.HTTP_404_NOT_FOUND, "Not Found"),
    ErrorCategory.timeout:               (status.HTTP_408_REQUEST_TIMEOUT, "Request Timeout"),
    ErrorCategory.conflict:              (status.HTTP_409_CONFLICT, "Conflict"),
    ErrorCategory.concurrency:           (status.HTTP_409_CONFLICT, "Conflict"),
    ErrorCategory.too_many_requests:     (status.HTTP_429_TOO_MANY_REQUESTS, "Too Many Requests"),
    ErrorCategory.internal_server_error: (status.HTTP_500_INTERNAL_SERVER_ERROR, "Error"),
    ErrorCategory.service_unavailable:   (status.HTTP_503_SERVICE_UNAVAILABLE, "Service Unavailable"),
    ErrorCategory.general:               DEFAULT_STATUS,
}


def lookup_status(category: Any) -> tuple[int, str]:
    """Return `(status, title)` for `category`; unknown values map to 500."""
    try:
        return ERROR_CATEGORY_STATUS.get(category, DEFAULT_STATUS)
    except TypeError:
        # unhashable input
        return DEFAULT_STATUS
