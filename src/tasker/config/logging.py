"""Logging setup for tasker.

Log lines go to stderr only; stdout carries command results (and the
``--json`` payload). Services log through structlog, storage and export
through stdlib loggers under ``tasker.*``; both end up in the same
stderr handler, rendered as console text or as JSON lines.
"""

from __future__ import annotations

import logging
import sys

import structlog

# Loggers whose level does not follow --verbose.
_PINNED_LEVELS = {"sqlalchemy": logging.WARNING}


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route structlog and ``tasker.*`` stdlib records to stderr.

    ``verbose`` lowers the ``tasker`` logger to DEBUG (otherwise WARNING).
    Calling this again replaces the previous handler.
    """
    stamp = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    structlog.configure(
        processors=[*stamp, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=stamp,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(logging.WARNING)

    logging.getLogger("tasker").setLevel(logging.DEBUG if verbose else logging.WARNING)
    for name, level in _PINNED_LEVELS.items():
        logging.getLogger(name).setLevel(level)
