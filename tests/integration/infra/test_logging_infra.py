from __future__ import annotations

"""
Integration tests for Logging Infrastructure.

Verifies the QueueListener architecture, idempotent configuration and
file output.
"""

import logging
from pathlib import Path

import pytest

from foldersnap.infra.logging import (
    _CONFIGURED_FLAG_ATTR,
    _HANDLER_TAG_ATTR,
    _QUEUE_LISTENER_ATTR,
    LoggingConfig,
    configure_logging,
    shutdown_logging,
)


@pytest.fixture(autouse=True)
def reset_logging():
    """Detach our handlers before and after each test."""
    shutdown_logging()
    yield
    shutdown_logging()


def _our_handlers():
    return [h for h in logging.getLogger().handlers if getattr(h, _HANDLER_TAG_ATTR, False)]


def test_logging_idempotency():
    cfg = LoggingConfig(level="INFO", console=True)

    configure_logging(cfg)
    first = _our_handlers()
    configure_logging(cfg)

    assert _our_handlers() == first
    assert len(first) == 1


def test_force_replaces_listener():
    configure_logging(LoggingConfig(level="INFO"))
    root = logging.getLogger()
    old_listener = getattr(root, _QUEUE_LISTENER_ATTR)

    configure_logging(LoggingConfig(level="DEBUG"), force=True)

    assert getattr(root, _QUEUE_LISTENER_ATTR) is not old_listener
    assert root.level == logging.DEBUG
    assert len(_our_handlers()) == 1


def test_file_logging_writes_records(tmp_path: Path):
    log_file = tmp_path / "logs" / "foldersnap.log"
    configure_logging(LoggingConfig(level="DEBUG", console=False, log_file=str(log_file)))

    logging.getLogger("foldersnap.test").info("snapshot written")
    shutdown_logging()  # stops the listener, flushing the queue

    content = log_file.read_text(encoding="utf-8")
    assert "INFO | foldersnap.test | snapshot written" in content


def test_unknown_level_defaults_to_info():
    configure_logging(LoggingConfig(level="LOUD"))
    assert logging.getLogger().level == logging.INFO


def test_no_handlers_leaves_root_unconfigured():
    configure_logging(LoggingConfig(console=False, log_file=None))
    assert not getattr(logging.getLogger(), _CONFIGURED_FLAG_ATTR, False)
