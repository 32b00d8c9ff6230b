# soundchange\shared\logging_config.py
import sys
import logging
import structlog
from opentelemetry import trace
from soundchange.shared.config import settings

def add_open_telemetry_spans(_, __, event_dict):
    """
    Processor to inject the current TraceID and SpanID into the log entry.
    Outside of a recording span both ids are None.
    """
    span = trace.get_current_span()
    if not span.is_recording():
        event_dict["trace_id"] = None
        event_dict["span_id"] = None
        return event_dict

    ctx = span.get_span_context()
    event_dict["trace_id"] = format(ctx.trace_id, "032x")
    event_dict["span_id"] = format(ctx.span_id, "016x")
    return event_dict

def add_service_context(_, __, event_dict):
    """Processor to tag each log entry with the service name and environment."""
    event_dict.setdefault("service", settings.OTEL_SERVICE_NAME)
    event_dict.setdefault("env", settings.APP_ENV.value)
    return event_dict

def configure_logging(log_format=None, log_level=None):
    """
    Configures structlog and the standard logging library to emit
    structured JSON logs or colored console logs.

    Rule compilation logs at debug level; inventory misses
    (`phoneme_not_in_inventory`) log at warning level.
    """
    log_format = log_format or settings.LOG_FORMAT
    if log_level is None:
        log_level = "DEBUG" if settings.DEBUG else settings.LOG_LEVEL
    log_level = log_level.upper()

    # 1. Chain of processors
    processors = [
        structlog.contextvars.merge_contextvars,
        add_open_telemetry_spans,
        add_service_context,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    # 2. Output format
    if log_format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    # 3. Configure structlog
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(logging.getLevelName(log_level)),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # 4. Standard library logging from third-party packages
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
    )
