"""Tests for utility modules."""

import logging
import logging.handlers
import pytest

from src.utils.formatting import format_bytes
from src.utils.logger import (
    EndpointContextFilter, get_logger, suppress_console_logging, update_logger_endpoint_context
)


class TestFormatBytes:
    """Test cases for format_bytes."""

    @pytest.mark.unit
    @pytest.mark.parametrize('value, expected', [
        (0, '0 Bytes'),
        (1, '1 Bytes'),
        (1023, '1023 Bytes'),
        (1024, '1 KB'),
        (1536, '1.5 KB'),
        (1048576, '1 MB'),
        (1073741824, '1 GB'),
        (1099511627776, '1 TB'),
        (1234567, '1.18 MB'),
    ])
    def test_format(self, value, expected):
        assert format_bytes(value) == expected

    @pytest.mark.unit
    def test_larger_than_largest_unit_stays_in_tb(self):
        assert format_bytes(2048 * 1024 ** 4) == '2048 TB'


class TestLogger:
    """Test cases for logger helpers."""

    @pytest.mark.unit
    def test_get_logger_is_cached(self):
        first = get_logger('tests.cached')
        second = get_logger('tests.cached')
        assert first is second
        assert first.handlers

    @pytest.mark.unit
    def test_endpoint_context_added_to_records(self):
        log_filter = EndpointContextFilter()
        record = logging.LogRecord('x', logging.INFO, __file__, 1, 'msg', None, None)

        log_filter.filter(record)
        assert record.endpoint == '-'

        log_filter.set_endpoint_context('http://metrics/data')
        log_filter.filter(record)
        assert record.endpoint == 'http://metrics/data'

    @pytest.mark.unit
    def test_update_endpoint_context(self):
        logger = get_logger('tests.context')
        update_logger_endpoint_context(logger, 'http://other/data')

        filters = [f for h in logger.handlers for f in h.filters if isinstance(f, EndpointContextFilter)]
        assert filters
        assert all(f.endpoint == 'http://other/data' for f in filters)

    @pytest.mark.unit
    def test_suppress_console_logging_keeps_file_handler(self):
        logger = get_logger('tests.suppress')
        suppress_console_logging()

        assert not any(type(h) is logging.StreamHandler for h in logger.handlers)
        assert any(isinstance(h, logging.handlers.RotatingFileHandler) for h in logger.handlers)
