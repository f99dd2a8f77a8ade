"""
ProblemDetailsMapper: one ErrorInfo (or none) + request context -> ProblemDescription.
"""
from __future__ import annotations

import logging
from typing import Any, Optional

from starlette import status

from outcome_http.schemas.outcome import ErrorInfo
from outcome_http.schemas.problem import ProblemDescription, RequestContext
from outcome_http.services.problem_type_uri import ProblemTypeUriGenerator
from outcome_http.services.status_table import lookup_status

logger = logging.getLogger(__name__)

EXT_ERROR_CODE = "ErrorCode"
EXT_DETAIL = "Detail"
EXT_TRACE_ID = "TraceId"
EXT_INNER_ERRORS = "InnerErrors"

RESERVED_EXTENSION_KEYS = frozenset({EXT_ERROR_CODE, EXT_DETAIL, EXT_TRACE_ID, EXT_INNER_ERRORS})

NO_ERROR_DETAIL = "No error information was provided."


class ProblemDetailsMapper:
    """
    Translates a classified `ErrorInfo` into a problem description.

    Status and title come from the category table, `detail` from the error
    message, `type` from the URI generator. The error's code, secondary
    detail, inner errors and the request trace id are exposed as
    extensions; caller-supplied extensions never overwrite those keys.
    """

    def __init__(self, uri_generator: Optional[ProblemTypeUriGenerator] = None):
        self.uri_generator = uri_generator or ProblemTypeUriGenerator()

    def map(self, error: Optional[ErrorInfo], context: RequestContext) -> ProblemDescription:
        if error is None:
            logger.debug("Mapping absent error info to a generic 500 problem")
            return ProblemDescription(
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
                title="Error",
                detail=NO_ERROR_DETAIL,
                type=self.uri_generator.generate_uri(None),
                instance=context.path,
                extensions={EXT_TRACE_ID: context.trace_id},
            )

        status_code, title = lookup_status(error.category)
        logger.debug(
            "Mapping error code=%r category=%s to status %d",
            error.code, error.category, status_code,
        )
        return ProblemDescription(
            status=status_code,
            title=title,
            detail=error.message,
            type=self.uri_generator.generate_uri(error.code),
            instance=context.path,
            extensions=self._build_extensions(error, context),
        )

    @staticmethod
    def _build_extensions(error: ErrorInfo, context: RequestContext) -> dict[str, Any]:
        extensions: dict[str, Any] = {}
        if error.code:
            extensions[EXT_ERROR_CODE] = error.code
        if error.detail:
            extensions[EXT_DETAIL] = error.detail
        extensions[EXT_TRACE_ID] = context.trace_id
        if error.inner_errors:
            extensions[EXT_INNER_ERRORS] = tuple(error.inner_errors)

        for key, value in error.extensions.items():
            if key in RESERVED_EXTENSION_KEYS:
                continue
            extensions[key] = value
        return extensions
