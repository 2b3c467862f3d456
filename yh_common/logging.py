"""structlog-backed logging for the yh command.

Log lines go to stderr (and optionally a file) at WARNING by default so they
do not interleave with the picker. ``YH_LOG_LEVEL``, ``YH_LOG_JSON`` and
``YH_LOG_FILE`` override the defaults; ``--verbose`` forces DEBUG.
"""

from __future__ import annotations

import logging
import os
import sys
from contextlib import contextmanager
from typing import Any, Iterator

import structlog

from yh_common.config.env import parse_bool_env, parse_str_env

DEFAULT_LEVEL = logging.WARNING

_SHARED_PROCESSORS: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.processors.add_log_level,
    structlog.processors.TimeStamper(fmt="iso", utc=True),
]


def _level(value: str | int | None, debug: bool) -> int:
    if debug:
        return logging.DEBUG
    if value is None:
        return DEFAULT_LEVEL
    if isinstance(value, int):
        return value
    if value.strip().isdigit():
        return int(value)
    return logging.getLevelNamesMapping().get(value.strip().upper(), DEFAULT_LEVEL)


def _formatter(as_json: bool) -> logging.Formatter:
    renderer: structlog.types.Processor
    if as_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    return structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=_SHARED_PROCESSORS,
    )


def _configure_structlog() -> None:
    structlog.configure(
        processors=[
            *_SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def configure_logging(
    *,
    level: str | int | None = None,
    debug: bool = False,
    log_file: str | None = None,
    json: bool | None = None,
    force: bool = False,
) -> None:
    """Install stderr/file handlers on the root logger and configure structlog.

    Existing root handlers are left alone unless ``force`` is set.
    """
    _configure_structlog()
    root_logger = logging.getLogger()
    if root_logger.handlers and not force:
        return

    as_json = json if json is not None else bool(parse_bool_env(os.environ.get("YH_LOG_JSON")))
    target_file = log_file if log_file is not None else parse_str_env(os.environ.get("YH_LOG_FILE"))
    formatter = _formatter(as_json)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if target_file:
        handlers.append(logging.FileHandler(target_file, encoding="utf-8"))

    if force:
        for handler in list(root_logger.handlers):
            root_logger.removeHandler(handler)
    root_logger.setLevel(_level(level or os.environ.get("YH_LOG_LEVEL"), debug))
    for handler in handlers:
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)


@contextmanager
def log_context(**values: Any) -> Iterator[None]:
    """Attach ``values`` to every log line emitted inside the block."""
    with structlog.contextvars.bound_contextvars(**values):
        yield
