"""Logging helpers for applications embedding PRESSUTILS.

PRESSUTILS only emits records through module loggers under the
``pressutils`` namespace, which carries a `logging.NullHandler` so nothing
is printed unless the embedding application asks for it. The helpers here are
opt-in: a Rich console handler that tags records by their origin, and an
in-memory "flight recorder" that buffers records and writes them to disk when
something goes wrong.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "pressutils"
HANDLER_MARKER = "_pressutils_handler"

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]


def _is_under(name: str, prefix: str) -> bool:
    return name == prefix or name.startswith(f"{prefix}.")


class OriginPrefixFilter(logging.Filter):
    """Tag each record with the top-level package it came from.

    Records from one of ``own_prefixes`` (the embedding application's loggers)
    get an empty prefix; everything else, PRESSUTILS included, gets a bracketed
    token like "[pressutils]" so host output and library output can be told
    apart on a shared console. The filter never drops a record.
    """

    def __init__(self, own_prefixes: Iterable[str] = ()) -> None:
        super().__init__()
        self.own_prefixes = tuple(own_prefixes)

    def filter(self, record: logging.LogRecord) -> bool:
        if any(_is_under(record.name, prefix) for prefix in self.own_prefixes):
            record.prefix = ""
        else:
            record.prefix = f"[{record.name.split('.')[0]}]"
        return True


def config_console_handler(
    level: int = logging.WARNING,
    *,
    debug_mode: bool = False,
    color: bool = True,
    own_prefixes: Iterable[str] = (),
    console: Console | None = None,
) -> RichHandler:
    """Configure and return a RichHandler for a host's console.

    Args:
        level: Minimum level for console output (overridden to DEBUG in debug_mode).
        debug_mode: When True, show timestamps, logger names and source paths.
        color: Enable color output when True. Ignored if ``console`` is given.
        own_prefixes: Logger prefixes belonging to the host; their records are
            printed without an origin tag.
        console: The host's Rich console, to share its output stream. A
            stderr console is created when omitted.

    Returns:
        RichHandler: Configured handler suitable to attach to a logger.
    """
    if console is None:
        color_system: ColorSystem | None = "auto" if color else None
        console = Console(color_system=color_system, stderr=True)

    if debug_mode:
        level = logging.DEBUG

    handler = RichHandler(
        level=level,
        console=console,
        rich_tracebacks=True,
        show_time=debug_mode,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    fmt = "%(name)s: %(message)s" if debug_mode else "%(prefix)s %(message)s"
    handler.setFormatter(logging.Formatter(fmt=fmt))
    handler.addFilter(OriginPrefixFilter(own_prefixes))
    return handler


def config_flight_recorder(
    path: Path,
    capacity: int = 500,
    flush_level: int = logging.ERROR,
    flush_on_close: bool = True,
) -> MemoryHandler:
    """Configure and return an in-memory flight recorder backed by a file.

    The recorder buffers up to `capacity` records and flushes them to `path`
    (appending, so a long-running host keeps its history) when a record at
    `flush_level` or higher arrives, when the buffer fills, or on close.

    Returns:
        MemoryHandler: A memory-backed handler with a FileHandler target.
    """
    file_handler = logging.FileHandler(path, mode="a", encoding="utf-8", delay=True)
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(process)d:%(threadName)s] %(levelname)s %(name)s:%(lineno)d: %(message)s"
        )
    )
    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=file_handler,
        flushOnClose=flush_on_close,
    )


def configure_logging(
    level: int = logging.WARNING,
    *,
    debug_mode: bool = False,
    color: bool = True,
    flight_recorder_path: Path | None = None,
    logger_name: str = PROJECT_PREFIX,
    propagate: bool = True,
) -> list[logging.Handler]:
    """Attach console (and optionally flight-recorder) handlers to a logger.

    Handlers previously attached by this function are closed and replaced,
    so calling it twice does not duplicate output. Handlers the host attached
    itself are left alone.

    Args:
        level: Console level.
        debug_mode: Verbose console formatting at DEBUG.
        color: Console color output.
        flight_recorder_path: When given, also buffer DEBUG records to this file.
        logger_name: Logger to configure; defaults to the PRESSUTILS namespace.
        propagate: Whether records continue to the host's root handlers.

    Returns:
        The handlers now attached.
    """
    target = logging.getLogger(logger_name)
    for handler in list(target.handlers):
        if getattr(handler, HANDLER_MARKER, False):
            target.removeHandler(handler)
            handler.close()

    handlers: list[logging.Handler] = [
        config_console_handler(level, debug_mode=debug_mode, color=color)
    ]
    if flight_recorder_path is not None:
        handlers.append(config_flight_recorder(flight_recorder_path))

    for handler in handlers:
        setattr(handler, HANDLER_MARKER, True)
        target.addHandler(handler)
    target.setLevel(logging.DEBUG if debug_mode or flight_recorder_path else level)
    target.propagate = propagate
    return handlers
