"""Tests for logging module."""
import logging

import diapy
from diapy.core.logging import get_logger


class TestGetLogger:
    """Test suite for get_logger function."""

    def test_get_logger_with_name(self):
        """Test getting logger with name."""
        assert get_logger('diapy.request').name == 'diapy.request'

    def test_get_logger_returns_logger_instance(self):
        """Test returns logging.Logger instance."""
        assert isinstance(get_logger('diapy.test'), logging.Logger)

    def test_get_logger_nests_bare_names(self):
        """Test names without the prefix are nested under diapy."""
        assert get_logger('request') is get_logger('diapy.request')

    def test_get_logger_without_name(self):
        """Test getting the package logger."""
        assert get_logger().name == 'diapy'

    def test_get_logger_propagates(self):
        """Test loggers propagate to root."""
        assert get_logger('diapy.test').propagate is True


class TestSetupLogging:
    """Test suite for setup_logging."""

    def test_sets_level(self):
        """Test package loggers get the level."""
        diapy.setup_logging(logging.DEBUG)

        try:
            assert logging.getLogger('diapy.request').level == logging.DEBUG
            assert logging.getLogger('diapy.response').level == logging.DEBUG
        finally:
            diapy.setup_logging(logging.WARNING)

    def test_builder_never_logs_password(self, credentials, caplog):
        """Test debug logs leave credentials out."""
        from diapy.core.api.request import RequestBuilder
        from diapy.core.api.session import SessionState

        diapy.setup_logging(logging.DEBUG)
        try:
            with caplog.at_level(logging.DEBUG, logger='diapy.request'):
                RequestBuilder(credentials, SessionState(['a=1'])).build('https://example.org/dia/api/get.jsp')
        finally:
            diapy.setup_logging(logging.WARNING)

        assert 'Built POST /dia/api/get.jsp with 1 cookie(s)' in caplog.text
        assert credentials.password not in caplog.text
