from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from outcome_http.core.config import settings
from outcome_http.core.handlers import (
    unhandled_exception_handler,
    validation_exception_handler,
)
from outcome_http.core.logging import configure_logging
from outcome_http.core.middleware import TraceIdMiddleware


def create_app() -> FastAPI:
    configure_logging(settings.LOG_LEVEL)

    application = FastAPI(
        title="Outcome HTTP API",
        description=(
            "**Outcome-to-transport mapping engine**\n\n"
            "Endpoints return protocol-agnostic outcomes which are mapped to HTTP "
            "status codes and RFC 7807 problem details.\n\n"
            "All error responses are `application/problem+json`."
        ),
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # --- Middleware ---
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[settings.TRACE_ID_HEADER],
    )
    application.add_middleware(TraceIdMiddleware, header_name=settings.TRACE_ID_HEADER)

    # --- Exception handlers (most specific first) ---
    application.add_exception_handler(RequestValidationError, validation_exception_handler)
    application.add_exception_handler(Exception, unhandled_exception_handler)

    @application.get("/health", tags=["health"], summary="Health check")
    def health():
        """Liveness check."""
        return {"status": "ok", "env": settings.APP_ENV}

    return application


app = create_app()
