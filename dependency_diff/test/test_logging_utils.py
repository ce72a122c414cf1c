import logging
import sys

import pytest

from dependency_diff.utils.logging_utils import configure_split_stream_logging


@pytest.fixture(autouse=True)
def restore_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_split_streams():
    configure_split_stream_logging(level=logging.DEBUG, stderr_level=logging.WARNING)

    handlers = logging.getLogger().handlers
    assert [h.stream for h in handlers] == [sys.stdout, sys.stderr]
    assert handlers[1].level == logging.WARNING


def test_stderr_only():
    configure_split_stream_logging(level=logging.INFO, stdout_enabled=False)

    handlers = logging.getLogger().handlers
    assert len(handlers) == 1
    assert handlers[0].stream is sys.stderr
    assert logging.getLogger().level == logging.INFO
