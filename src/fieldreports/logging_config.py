"""structlog setup for the field reports service.

Every record, whether emitted through structlog or a plain
``logging.getLogger(__name__)``, goes through the same processor chain and
leaves the process as one line on stdout. Reports embed photos and
attachments as data URLs, so those are shortened before rendering.
"""

import logging
import sys

import structlog

SERVICE_NAME = "fieldreports-api"

# Data URLs longer than this are cut down to their media-type header
_DATA_URL_PREVIEW = 48


def _shorten_data_urls(logger, method_name, event_dict):
    for key, value in event_dict.items():
        if isinstance(value, str) and value.startswith("data:") and len(value) > _DATA_URL_PREVIEW:
            header = value.split(",", 1)[0]
            event_dict[key] = f"{header},<{len(value)} chars>"
    return event_dict


def _add_service(logger, method_name, event_dict):
    event_dict.setdefault("service", SERVICE_NAME)
    return event_dict


def configure_logging(log_level: str = "info", json_output: bool = False) -> None:
    """Route stdlib and structlog records through one formatter.

    ``json_output`` selects JSON lines (Arabic text kept readable) over the
    colored dev console.
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    pre_chain = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        _add_service,
        _shorten_data_urls,
    ]

    if json_output:
        renderer = structlog.processors.JSONRenderer(ensure_ascii=False)
        pre_chain.append(structlog.processors.format_exc_info)
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=True)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *pre_chain,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
            foreign_pre_chain=pre_chain,
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

    for noisy in ("uvicorn.access", "sqlalchemy.engine", "aiosqlite"):
        logging.getLogger(noisy).setLevel(logging.WARNING)


def bind_request_context(trace_id: str, **extra: str) -> None:
    """Attach the request's trace id (and any extras) to every log line it emits."""
    structlog.contextvars.bind_contextvars(trace_id=trace_id, **extra)


def clear_request_context() -> None:
    structlog.contextvars.clear_contextvars()
