"""Runtime logging helpers.

All logging goes through loguru. Records carry an ``extra[source]`` field
naming the input being processed (a file name, ``<stdin>`` or ``<arg>``);
the driver binds it, everything else logs with the ``-`` placeholder.
"""

from __future__ import annotations

import inspect
import logging
import os
import sys
from dataclasses import dataclass, field
from logging import Handler
from typing import Any, Literal

from loguru import logger
from rich import get_console
from rich.logging import RichHandler

LogProfile = Literal["default", "repl"]

LOG_FILTER_ENV = "EXPRLANG_LOG_FILTER"
DEFAULT_LEVEL = "WARNING"

_DEFAULT_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<7} | {extra[source]} | {name}:{line} | {message}"
_CONFIGURED_PROFILE: LogProfile | None = None


@dataclass(frozen=True)
class LogFilter:
    """Global level plus per-module overrides; ``False`` silences a module."""

    level: str = DEFAULT_LEVEL
    modules: dict[str | None, str | bool] = field(default_factory=dict)


def parse_log_filter(raw: str | None = None) -> LogFilter:
    """Parse a filter of the form "level,module=level,module=false".

    Examples:
        - "info": everything at INFO
        - "debug,exprlang.surface=info": DEBUG, the surface package at INFO
        - "info,exprlang.cli=false": INFO, the cli package silenced

    ``raw`` defaults to the EXPRLANG_LOG_FILTER environment variable.
    """
    text = raw if raw is not None else os.getenv(LOG_FILTER_ENV, DEFAULT_LEVEL)

    level = DEFAULT_LEVEL
    modules: dict[str | None, str | bool] = {}
    for part in text.lower().split(","):
        module, sep, module_level = part.strip().partition("=")
        if not module:
            continue
        if not sep:
            level = module.upper()
            continue
        module_level = module_level.strip()
        modules[module.strip()] = False if module_level == "false" else module_level.upper()

    return LogFilter(level, modules)


def _is_logging_frame(filename: str) -> bool:
    return filename == logging.__file__ or ("importlib" in filename and "_bootstrap" in filename)


class InterceptHandler(logging.Handler):
    """Handler that forwards stdlib logging records to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        level: str | int
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Report the caller of the stdlib logger, not this handler
        frame, depth = inspect.currentframe(), 0
        while frame is not None and (depth == 0 or _is_logging_frame(frame.f_code.co_filename)):
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def _build_repl_handler() -> Handler:
    # Shares the REPL's console so log lines do not tear the prompt
    return RichHandler(
        console=get_console(),
        show_level=True,
        show_time=False,
        show_path=False,
        markup=False,
        rich_tracebacks=False,
    )


def _sink(profile: LogProfile) -> tuple[Any, str]:
    if profile == "repl":
        return _build_repl_handler(), "{message}"
    return sys.stderr, _DEFAULT_FORMAT


def _setup_stdlib_intercept() -> None:
    root_logger = logging.getLogger()
    if not any(isinstance(h, InterceptHandler) for h in root_logger.handlers):
        root_logger.addHandler(InterceptHandler())


def configure_logging(*, profile: LogProfile = "default") -> None:
    """Configure process-level logging once per profile.

    "default" writes formatted lines to stderr; "repl" renders through rich.
    Levels come from EXPRLANG_LOG_FILTER, WARNING when unset.
    """
    global _CONFIGURED_PROFILE
    if profile == _CONFIGURED_PROFILE:
        return

    log_filter = parse_log_filter()
    sink, fmt = _sink(profile)

    logger.remove()
    logger.configure(extra={"source": "-"})
    logger.add(
        sink,
        level=log_filter.level,
        format=fmt,
        filter=log_filter.modules,
        backtrace=False,
        diagnose=False,
    )
    _setup_stdlib_intercept()

    _CONFIGURED_PROFILE = profile
