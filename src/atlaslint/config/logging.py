"""Diagnostic logging for atlaslint, always on stderr.

stdout belongs to the report: the rich issue listing, the ``--json``
payload and GitHub workflow annotations. Log records therefore go to
stderr, either as console lines or, with ``--log-json``, as one JSON
object per line with tracebacks expanded into structured frames.

The domain layer logs through plain :mod:`logging` and the service layer
through structlog. Both end up in the same ``ProcessorFormatter``.

Levels:
- default: WARNING and up (unreadable files, crashes inside a pass)
- ``--verbose``: DEBUG for ``atlaslint.*`` (documents extracted, per-check
  totals, span timings). Third-party loggers stay at WARNING.
"""

from __future__ import annotations

import logging
import sys

import structlog

HANDLER_NAME = "atlaslint.stderr"


def _shared_processors(*, log_json: bool) -> list[structlog.types.Processor]:
    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]
    if log_json:
        processors.append(structlog.processors.dict_tracebacks)
    return processors


def _renderer(*, log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route structlog and stdlib records to stderr.

    Safe to call once per CLI invocation: the handler installed by an
    earlier call is replaced, and handlers owned by anyone else are left
    on the root logger.
    """
    shared = _shared_processors(log_json=log_json)

    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        # module-level loggers must pick up a reconfiguration
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json=log_json),
            ],
        )
    )

    root = logging.getLogger()
    for existing in [h for h in root.handlers if h.get_name() == HANDLER_NAME]:
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(logging.WARNING)

    logging.getLogger("atlaslint").setLevel(logging.DEBUG if verbose else logging.WARNING)
