# File: tests/test_logging_config.py
"""
Test the package logger setup.
"""

import logging

from mount_stick.logging_config import setup_logging


def test_setup_logging_replaces_handlers(tmp_path):
    log_file = tmp_path / "run.log"
    setup_logging(logging.INFO)
    logger = setup_logging(logging.DEBUG, log_file=str(log_file))

    assert logger.name == "mount_stick"
    assert logger.level == logging.DEBUG
    # Console + file, nothing left over from the first call
    assert len(logger.handlers) == 2

    logging.getLogger("mount_stick.loader").info("hello from the loader")
    for handler in logger.handlers:
        handler.flush()
    assert "hello from the loader" in log_file.read_text(encoding="utf-8")

    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


def test_setup_logging_closes_previous_file_handler(tmp_path):
    setup_logging(logging.INFO, log_file=str(tmp_path / "first.log"))
    first = [h for h in logging.getLogger("mount_stick").handlers if isinstance(h, logging.FileHandler)]
    assert len(first) == 1

    logger = setup_logging(logging.INFO, log_file=str(tmp_path / "second.log"))

    # The old file handler is closed and gone, not just dropped
    assert first[0].stream is None
    assert first[0] not in logger.handlers

    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
