"""Unit tests for logging initialization in logging.py.

Test coverage includes:

1. JsonFormatter
   - Ensures records are rendered as JSON with timestamp, level, logger and message.
   - Ensures `extra` fields are attached and exceptions are rendered.

2. initialize_logging()
   - Ensures the root logger gets a single stdout JSON handler at the requested level.
"""

import json
import sys
import logging

import pytest

from linkshortener.utils import initialize_logging
from linkshortener.utils.logging import JsonFormatter


# -------------------------------
# 1. JsonFormatter
# -------------------------------


def _record(msg='Short URL created.', level=logging.INFO, exc_info=None, **extra):
    record = logging.LogRecord('linkshortener.test', level, __file__, 10, msg, (), exc_info)
    record.created = 1760529600.5  # 2025-10-15T12:00:00.500Z
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_renders_standard_fields():
    log = json.loads(JsonFormatter().format(_record()))

    assert log == {
        'timestamp': '2025-10-15T12:00:00.500Z',
        'level': 'INFO',
        'logger': 'linkshortener.test',
        'message': 'Short URL created.',
    }


def test_json_formatter_attaches_extra_fields():
    log = json.loads(JsonFormatter().format(_record(shortcode='abc123', count=2)))

    assert log['shortcode'] == 'abc123'
    assert log['count'] == 2


def test_json_formatter_renders_exceptions():
    try:
        raise RuntimeError('boom')
    except RuntimeError:
        record = _record(msg='Unhandled error.', level=logging.ERROR, exc_info=sys.exc_info())

    log = json.loads(JsonFormatter().format(record))
    assert log['level'] == 'ERROR'
    assert 'RuntimeError: boom' in log['exception']


# -------------------------------
# 2. initialize_logging()
# -------------------------------


@pytest.fixture
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.mark.usefixtures('_restore_root_logger')
def test_initialize_logging():
    initialize_logging('debug')
    root = logging.getLogger()

    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, JsonFormatter)
