from __future__ import annotations

import logging

from nested_schema.utils.logging_utils import configure_split_stream_logging


def test_split_streams(capsys):
    logger = configure_split_stream_logging(
        level=logging.INFO,
        stderr_level=logging.WARNING,
        logger_name="nested_schema.tests.split",
    )
    logger.info("to stdout")
    logger.warning("to stderr")
    out, err = capsys.readouterr()
    assert "to stdout" in out and "to stdout" not in err
    assert "to stderr" in err and "to stderr" not in out


def test_reconfiguring_replaces_handlers():
    name = "nested_schema.tests.replace"
    configure_split_stream_logging(logger_name=name)
    logger = configure_split_stream_logging(logger_name=name)
    assert len(logger.handlers) == 2
