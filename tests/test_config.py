"""
Tests for configuration and validation
"""

import io
import logging
from datetime import timedelta

import pytest

from masterstat.config import DEFAULT_MASTERS, ConfigValidationError, QueryConfig
from masterstat.config.validation import (
    validate_master_address,
    validate_timeout,
)
from masterstat.utils.logging_config import PACKAGE_LOGGER, LayerTagFormatter, configure_logging, module_tag


class TestValidation:
    """Test validation helpers"""

    def test_master_address(self):
        assert validate_master_address(" master.quakeworld.nu:27000 ") == ("master.quakeworld.nu", 27000)

    @pytest.mark.parametrize("address", ["", "host", "host:", ":27000", "host:0", "host:99999", 27000])
    def test_invalid_master_address(self, address):
        with pytest.raises(ConfigValidationError):
            validate_master_address(address)

    def test_timeout(self):
        assert validate_timeout(2) == 2.0
        assert validate_timeout(timedelta(milliseconds=1500)) == 1.5

    @pytest.mark.parametrize("timeout", [0, -0.5, timedelta(0), "1", True])
    def test_invalid_timeout(self, timeout):
        with pytest.raises(ConfigValidationError):
            validate_timeout(timeout)


class TestQueryConfig:
    """Test QueryConfig"""

    def test_defaults(self):
        config = QueryConfig()
        assert config.masters == DEFAULT_MASTERS
        assert config.masters is not DEFAULT_MASTERS
        assert config.timeout == 2.0

    def test_round_trip_dict(self):
        config = QueryConfig(masters=["a:1"], timeout=1.0, json_output=True)
        assert QueryConfig.from_dict(config.to_dict()) == config

    def test_from_dict_ignores_unknown(self):
        assert QueryConfig.from_dict({"timeout": 3.0, "color": "red"}).timeout == 3.0

    def test_no_buffer_size_setting(self):
        """Test the receive buffer is fixed by the query, not configurable"""
        config = QueryConfig.from_dict({"buffer_size": 1024})
        assert "buffer_size" not in config.to_dict()
        assert not hasattr(config, "buffer_size")

    def test_update(self):
        config = QueryConfig()
        config.update(timeout=5.0, unknown=1)
        assert config.timeout == 5.0
        assert not hasattr(config, "unknown")

    def test_validate_normalises(self):
        config = QueryConfig(timeout=timedelta(seconds=3), log_level="debug").validate()
        assert config.timeout == 3.0
        assert config.log_level == "DEBUG"

    @pytest.mark.parametrize("changes", [
        {"masters": []},
        {"masters": ["nope"]},
        {"timeout": 0},
        {"log_level": "LOUD"},
    ])
    def test_validate_rejects(self, changes):
        config = QueryConfig()
        config.update(**changes)
        with pytest.raises(ConfigValidationError):
            config.validate()


class TestLoggingConfig:
    """Test layer-tagged logging"""

    @pytest.fixture
    def package_logger(self):
        """Restore the package logger after a test configures it"""
        logger = logging.getLogger(PACKAGE_LOGGER)
        saved = (list(logger.handlers), logger.level, logger.propagate)
        logger.handlers = []
        yield logger
        logger.handlers, logger.level, logger.propagate = saved

    def test_module_tags(self):
        assert module_tag("masterstat.transport") == "[UDP]"
        assert module_tag("masterstat.query_multiple") == "[MULTI]"
        assert module_tag("masterstat.query") == "[QUERY]"
        assert module_tag("masterstat.testing.mock_server") == "[MOCK]"
        assert module_tag("masterstat.queryish") == "[MASTERSTAT]"
        assert module_tag("elsewhere") == "[MASTERSTAT]"

    def test_formatter(self):
        record = logging.LogRecord("masterstat.transport", logging.DEBUG, __file__, 1, "sent", None, None)
        assert "[UDP] DEBUG - sent" in LayerTagFormatter().format(record)

    def test_configure_logging_routes_module_records(self, package_logger):
        """Test module loggers reach the package handler with their tag"""
        stream = io.StringIO()
        configure_logging(logging.DEBUG, stream)
        logging.getLogger("masterstat.protocol").debug("Parsed 2 server addresses")
        assert "[PROTO] DEBUG - Parsed 2 server addresses" in stream.getvalue()

    def test_configure_logging_installs_one_handler(self, package_logger):
        """Test repeated calls only change the level"""
        configure_logging(logging.INFO, io.StringIO())
        logger = configure_logging(logging.WARNING, io.StringIO())
        assert logger is package_logger
        assert len(logger.handlers) == 1
        assert logger.level == logging.WARNING
        assert not logger.propagate
