"""
Structured logging for the stockroom service.

Log records are emitted as one JSON object per line so they can be shipped to
Cloud Logging unchanged. Request-scoped identifiers are carried in context
variables and attached to every record logged while the request is handled.
"""

import json
import logging
import sys
import time
import traceback
import uuid
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

request_id_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)

_service_info: Dict[str, str] = {
    "service": "stockroom",
    "version": "1.0.0",
    "environment": "development",
}


class StructuredFormatter(logging.Formatter):
    """Format log records as JSON."""

    def format(self, record: logging.LogRecord) -> str:
        log_obj: Dict[str, Any] = {
            "@timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **_service_info,
        }

        request_id = getattr(record, "request_id", None) or request_id_var.get()
        if request_id:
            log_obj["trace"] = {"request_id": request_id}

        log_obj["location"] = {
            "file": record.pathname,
            "line": record.lineno,
            "function": record.funcName,
        }

        if record.exc_info:
            log_obj["error"] = {
                "type": record.exc_info[0].__name__,
                "message": str(record.exc_info[1]),
                "stacktrace": traceback.format_exception(*record.exc_info),
            }

        if hasattr(record, "extra_fields"):
            log_obj["custom"] = record.extra_fields

        return json.dumps(log_obj, default=str)


def setup_logging(
    service_name: str,
    level: str = "INFO",
    version: str = "1.0.0",
    environment: str = "development",
) -> None:
    """
    Configure the root logger with a single JSON console handler.

    Args:
        service_name: Name reported in every log line
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        version: Service version reported in every log line
        environment: Deployment environment reported in every log line
    """
    _service_info.update(service=service_name, version=version, environment=environment)

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Replace only our own handler so re-running setup stays idempotent
    for handler in list(root_logger.handlers):
        if isinstance(handler.formatter, StructuredFormatter):
            root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(StructuredFormatter())
    root_logger.addHandler(console_handler)

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    # firebase_admin / google clients are chatty at INFO
    logging.getLogger("google").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    root_logger.info(
        "Logging initialized",
        extra={"extra_fields": {"service": service_name, "level": level}},
    )


class LoggerAdapter(logging.LoggerAdapter):
    """Inject the current request id into every log record."""

    def process(self, msg, kwargs):
        extra = kwargs.get("extra", {})
        request_id = request_id_var.get()
        if request_id:
            extra["request_id"] = request_id
        kwargs["extra"] = extra
        return msg, kwargs


def get_logger(name: str) -> LoggerAdapter:
    return LoggerAdapter(logging.getLogger(name), {})


def generate_request_id() -> str:
    return str(uuid.uuid4())


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Log every request and response, tagging both with a request id.

    The id is taken from the ``X-Request-ID`` header when the caller sends one
    and is echoed back on the response.
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = request.headers.get("X-Request-ID") or generate_request_id()
        token = request_id_var.set(request_id)

        logger = get_logger(__name__)
        logger.info(
            f"Request started: {request.method} {request.url.path}",
            extra={"extra_fields": {"method": request.method, "path": request.url.path}},
        )

        start_time = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            logger.error(
                f"Request failed: {request.method} {request.url.path}",
                exc_info=True,
                extra={
                    "extra_fields": {
                        "method": request.method,
                        "path": request.url.path,
                        "duration_ms": (time.perf_counter() - start_time) * 1000,
                    }
                },
            )
            request_id_var.reset(token)
            raise

        logger.info(
            f"Request completed: {request.method} {request.url.path}",
            extra={
                "extra_fields": {
                    "method": request.method,
                    "path": request.url.path,
                    "status_code": response.status_code,
                    "duration_ms": (time.perf_counter() - start_time) * 1000,
                }
            },
        )
        request_id_var.reset(token)
        response.headers["X-Request-ID"] = request_id
        return response
