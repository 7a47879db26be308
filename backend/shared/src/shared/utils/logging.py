"""Structured logging utilities with correlation ID support.

Provides:
- Correlation ID context management for request tracing
- Structured logging formatter for consistent log output
- Helper functions for Stripe and remote data operation logging

Usage:
    from shared.utils.logging import configure_logging, set_correlation_id

    configure_logging()

    # In middleware/request handler:
    set_correlation_id(request.headers.get("X-Correlation-ID"))
"""

import logging
import uuid
from contextvars import ContextVar
from typing import Any

# Context variable for correlation ID - thread-safe and async-safe
_correlation_id: ContextVar[str | None] = ContextVar("correlation_id", default=None)


def generate_correlation_id() -> str:
    """Generate a new correlation ID.

    Returns:
        UUID-based correlation ID string
    """
    return str(uuid.uuid4())


def set_correlation_id(correlation_id: str | None = None) -> str:
    """Set the correlation ID for the current request context.

    Args:
        correlation_id: Optional existing correlation ID. If None, generates new one.

    Returns:
        The correlation ID that was set
    """
    cid = correlation_id or generate_correlation_id()
    _correlation_id.set(cid)
    return cid


def get_correlation_id() -> str | None:
    """Get the current correlation ID."""
    return _correlation_id.get()


def clear_correlation_id() -> None:
    """Clear the correlation ID context."""
    _correlation_id.set(None)


class CorrelationIdFilter(logging.Filter):
    """Logging filter that adds correlation_id to log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = get_correlation_id() or "no-correlation-id"
        return True


class StructuredFormatter(logging.Formatter):
    """Formatter for structured log output with correlation ID."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with structured fields.

        Args:
            record: Log record to format

        Returns:
            Formatted log string prefixed with the correlation ID
        """
        if not hasattr(record, "correlation_id"):
            record.correlation_id = get_correlation_id() or "no-correlation-id"

        base = super().format(record)

        # Prefix for easy grep/filtering
        return f"[{record.correlation_id}] {base}"


def configure_logging(level: int = logging.INFO) -> None:
    """Install the structured formatter on the root logger.

    Safe to call more than once; the handler is only added the first time.
    """
    root = logging.getLogger()
    root.setLevel(level)

    for handler in root.handlers:
        if isinstance(handler.formatter, StructuredFormatter):
            return

    handler = logging.StreamHandler()
    handler.addFilter(CorrelationIdFilter())
    handler.setFormatter(
        StructuredFormatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
    )
    root.addHandler(handler)


def log_stripe_operation(
    logger: logging.Logger,
    operation: str,
    *,
    viewer_id: str | None = None,
    stripe_user_id: str | None = None,
    error: str | None = None,
    **extra: Any,
) -> None:
    """Log a Stripe Connect operation with structured context.

    Args:
        logger: Logger instance
        operation: Operation name (e.g., "connect", "disconnect")
        viewer_id: Viewer performing the operation, if known
        stripe_user_id: Connected Stripe account ID, if available
        error: Error message if operation failed
        **extra: Additional context fields
    """
    context: dict[str, Any] = {"operation": operation}

    if viewer_id:
        context["viewer_id"] = viewer_id
    if stripe_user_id:
        context["stripe_user_id"] = stripe_user_id
    if error:
        context["error"] = error

    context.update(extra)

    msg_parts = [f"Stripe operation: {operation}"]
    for key, value in context.items():
        if key != "operation":
            msg_parts.append(f"{key}={value}")

    message = " | ".join(msg_parts)

    if error:
        logger.error(message, extra=context)
    else:
        logger.info(message, extra=context)


def log_remote_operation(
    logger: logging.Logger,
    operation_name: str,
    *,
    kind: str,
    variables: dict[str, Any] | None = None,
    result: str | None = None,
    error: str | None = None,
) -> None:
    """Log a GraphQL query or mutation issued by the client data layer.

    Variable values are not logged, only their names, since mutation inputs
    carry base64 images and authorization codes.
    """
    context: dict[str, Any] = {
        "operation_name": operation_name,
        "kind": kind,
        "variables": sorted(variables) if variables else [],
    }
    if result:
        context["result"] = result
    if error:
        context["error"] = error

    msg_parts = [f"Remote {kind}: {operation_name}"]
    if result:
        msg_parts.append(f"result={result}")
    if error:
        msg_parts.append(f"error={error}")

    message = " | ".join(msg_parts)

    if error:
        logger.warning(message, extra=context)
    else:
        logger.info(message, extra=context)
