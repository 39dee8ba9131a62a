"""
Structured JSON logging with correlation IDs.
"""

import logging
import sys
import uuid
from typing import Optional
from datetime import datetime, timezone
from pythonjsonlogger import jsonlogger
from contextvars import ContextVar
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

# Context variable for correlation ID (thread-safe)
correlation_id_var: ContextVar[Optional[str]] = ContextVar(
    "correlation_id", default=None
)


class CorrelationIdFilter(logging.Filter):
    """Add correlation ID to log records."""

    def filter(self, record):
        record.correlation_id = correlation_id_var.get() or "none"
        return True


class CatalogueJsonFormatter(jsonlogger.JsonFormatter):
    """JSON formatter with a fixed set of top-level fields."""

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = (
            datetime.fromtimestamp(record.created, tz=timezone.utc)
            .isoformat()
            .replace("+00:00", "Z")
        )
        log_record["level"] = record.levelname
        log_record["logger"] = record.name
        log_record["correlation_id"] = getattr(record, "correlation_id", "none")
        if record.levelno >= logging.WARNING:
            log_record["source"] = {
                "file": record.pathname,
                "line": record.lineno,
                "function": record.funcName,
            }


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Configure structured JSON logging on stdout."""

    formatter = CatalogueJsonFormatter()

    # Console handler with JSON formatting
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    console_handler.addFilter(CorrelationIdFilter())

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(level.upper())
    root_logger.handlers.clear()
    root_logger.addHandler(console_handler)

    # Configure uvicorn loggers to use JSON formatter
    for name in ("uvicorn", "uvicorn.access", "uvicorn.error"):
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers.clear()
        uvicorn_logger.addHandler(console_handler)
        uvicorn_logger.propagate = False

    # Dedicated logger for engagement events (views, copies, votes)
    events_logger = logging.getLogger("rules.events")
    events_logger.setLevel(logging.INFO)

    return events_logger


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Middleware to add correlation IDs to requests."""

    async def dispatch(self, request: Request, call_next):
        # Generate or extract correlation ID
        correlation_id = request.headers.get("X-Correlation-ID") or str(uuid.uuid4())

        # Set in context variable
        correlation_id_var.set(correlation_id)

        # Add to request state for easy access
        request.state.correlation_id = correlation_id

        # Process request
        response = await call_next(request)

        # Add correlation ID to response headers
        response.headers["X-Correlation-ID"] = correlation_id

        return response


def log_engagement_event(
    event_type: str,
    message: str,
    slug: str,
    level: int = logging.INFO,
    ip_address: Optional[str] = None,
    **extra_fields
):
    """
    Log an engagement event with structured data.

    Args:
        event_type: Type of event (e.g., "rule.vote.rejected")
        message: Human-readable message
        slug: Slug of the rule the event concerns
        level: Logging level (default: INFO)
        ip_address: Client IP address
        **extra_fields: Additional fields to include
    """
    logger = logging.getLogger("rules.events")

    extra = {"event_type": event_type, "rule_slug": slug}
    if ip_address:
        extra["ip_address"] = ip_address

    # Add any extra fields
    extra.update(extra_fields)

    logger.log(level, message, extra=extra)


def get_client_ip(request: Request) -> str:
    """Extract client IP address from request, considering proxies."""
    # Check X-Forwarded-For header (from proxy/load balancer)
    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        # Take the first IP (original client)
        return forwarded_for.split(",")[0].strip()

    # Check X-Real-IP header
    real_ip = request.headers.get("X-Real-IP")
    if real_ip:
        return real_ip

    # Fallback to direct connection IP
    if request.client:
        return request.client.host

    return "unknown"
