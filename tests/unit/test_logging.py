"""Unit tests for pressutils.logging."""

import io
import logging
from logging.handlers import MemoryHandler

import pytest
from rich.console import Console
from rich.logging import RichHandler

from pressutils.logging import (
    OriginPrefixFilter,
    config_console_handler,
    config_flight_recorder,
    configure_logging,
)

# pylint: disable=redefined-outer-name, magic-value-comparison


def make_record(name: str, level: int = logging.INFO) -> logging.LogRecord:
    """Build a bare record for logger ``name``."""
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)


@pytest.fixture
def clean_logger():
    """Detach whatever configure_logging attached to the test logger."""
    name = "pressutils.tests.logging"
    yield name
    target = logging.getLogger(name)
    for handler in list(target.handlers):
        target.removeHandler(handler)
        handler.close()
    target.setLevel(logging.NOTSET)
    target.propagate = True


def test_package_logger_is_silent_by_default():
    """The library installs a NullHandler so hosts see nothing unconfigured."""
    assert any(
        isinstance(h, logging.NullHandler)
        for h in logging.getLogger("pressutils").handlers
    )


@pytest.mark.parametrize(
    "name, prefix",
    [
        ("myhost", ""),
        ("myhost.themes", ""),
        ("myhostile.x", "[myhostile]"),
        ("pressutils.utilities.walker", "[pressutils]"),
        ("urllib3.connectionpool", "[urllib3]"),
    ],
)
def test_origin_prefix_filter(name, prefix):
    """Only records outside the host's own prefixes are tagged; none are dropped."""
    record = make_record(name)
    assert OriginPrefixFilter(["myhost"]).filter(record) is True
    assert record.prefix == prefix  # type: ignore[attr-defined]


def test_console_handler_defaults_to_warning():
    """Embedded use is quiet: WARNING and up, tagged by origin."""
    handler = config_console_handler(color=False)
    assert isinstance(handler, RichHandler)
    assert handler.level == logging.WARNING
    assert any(isinstance(f, OriginPrefixFilter) for f in handler.filters)

    debug = config_console_handler(logging.ERROR, debug_mode=True)
    assert debug.level == logging.DEBUG


def test_console_handler_writes_to_host_console():
    """A host-supplied console receives the output."""
    stream = io.StringIO()
    console = Console(file=stream, color_system=None, width=200)
    handler = config_console_handler(console=console, own_prefixes=["myhost"])
    record = make_record("pressutils.x", logging.WARNING)
    record.msg = "menu missing"
    handler.handle(record)
    assert "[pressutils] menu missing" in stream.getvalue()


def test_flight_recorder_flushes_on_error_and_close(tmp_path):
    """Buffered records reach the file on an error, later ones on close."""
    path = tmp_path / "flight.log"
    recorder = config_flight_recorder(path, capacity=10)
    assert isinstance(recorder, MemoryHandler)
    target = recorder.target
    recorder.handle(make_record("pressutils.a"))
    recorder.handle(make_record("pressutils.b", logging.ERROR))
    recorder.handle(make_record("pressutils.c", logging.WARNING))
    text = path.read_text(encoding="utf-8")
    assert "pressutils.a" in text and "pressutils.b" in text
    assert "pressutils.c" not in text
    recorder.close()
    target.close()  # type: ignore[union-attr]
    assert "WARNING pressutils.c" in path.read_text(encoding="utf-8")


def test_configure_logging_replaces_only_its_own_handlers(tmp_path, clean_logger):
    """Reconfiguring swaps prior pressutils handlers and keeps the host's."""
    target = logging.getLogger(clean_logger)
    host_handler = logging.NullHandler()
    target.addHandler(host_handler)

    configure_logging(logging.INFO, color=False, logger_name=clean_logger)
    handlers = configure_logging(
        logging.INFO,
        color=False,
        flight_recorder_path=tmp_path / "f.log",
        logger_name=clean_logger,
        propagate=False,
    )
    assert target.handlers == [host_handler, *handlers]
    assert len(handlers) == 2
    assert target.level == logging.DEBUG
    assert target.propagate is False
