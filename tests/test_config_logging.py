"""Tests for config and logging."""

import json
import logging
import sys

import pytest

from realty_ledger.config import GeneratorConfig, LedgerConfig
from realty_ledger.exceptions import ConfigurationError
from realty_ledger.logging import (
    JsonFormatter,
    StandardFormatter,
    get_logger,
    log_fields,
    record_fields,
    setup_logging,
)

ENV_VARS = ["LEDGER_SEED", "LEDGER_LOCALE", "LEDGER_SAMPLE_SIZE", "LOG_LEVEL", "LOG_FORMAT"]


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove ledger-related environment variables."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestGeneratorConfig:
    """Tests for GeneratorConfig."""

    def test_default_values(self) -> None:
        config = GeneratorConfig()

        assert config.seed is None
        assert config.locale == "en_US"
        assert config.num_properties == 5

    def test_custom_values(self) -> None:
        config = GeneratorConfig(seed=7, locale="en_GB", num_properties=20)

        assert config.seed == 7
        assert config.locale == "en_GB"
        assert config.num_properties == 20


class TestLedgerConfig:
    """Tests for LedgerConfig."""

    def test_default_values(self) -> None:
        config = LedgerConfig()

        assert isinstance(config.generator, GeneratorConfig)
        assert config.log_level == "WARNING"
        assert config.log_format == "standard"

    def test_from_env_default(self, clean_env: pytest.MonkeyPatch) -> None:
        config = LedgerConfig.from_env()

        assert config.generator.seed is None
        assert config.generator.locale == "en_US"
        assert config.generator.num_properties == 5
        assert config.log_level == "WARNING"
        assert config.log_format == "standard"

    def test_from_env_custom(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("LEDGER_SEED", "12345")
        clean_env.setenv("LEDGER_LOCALE", "en_CA")
        clean_env.setenv("LEDGER_SAMPLE_SIZE", "12")
        clean_env.setenv("LOG_LEVEL", "DEBUG")
        clean_env.setenv("LOG_FORMAT", "json")

        config = LedgerConfig.from_env()

        assert config.generator.seed == 12345
        assert config.generator.locale == "en_CA"
        assert config.generator.num_properties == 12
        assert config.log_level == "DEBUG"
        assert config.log_format == "json"

    def test_from_env_bad_seed(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("LEDGER_SEED", "forty-two")

        with pytest.raises(ConfigurationError, match="LEDGER_SEED"):
            LedgerConfig.from_env()

    def test_from_env_bad_format(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("LOG_FORMAT", "xml")

        with pytest.raises(ConfigurationError, match="LOG_FORMAT"):
            LedgerConfig.from_env()


@pytest.mark.usefixtures("restore_logging")
class TestSetupLogging:
    """Tests for setup_logging."""

    def test_standard_format(self) -> None:
        setup_logging(level="DEBUG", format_type="standard")

        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, StandardFormatter)
        assert logging.getLogger("realty_ledger").level == logging.DEBUG
        assert logging.getLogger("faker").level == logging.WARNING

    def test_json_format(self) -> None:
        setup_logging(level="INFO", format_type="json")

        root = logging.getLogger()
        assert isinstance(root.handlers[0].formatter, JsonFormatter)

    def test_unknown_level_falls_back(self) -> None:
        setup_logging(level="chatty")
        assert logging.getLogger().level == logging.WARNING

    def test_replaces_handlers(self) -> None:
        setup_logging()
        setup_logging()
        assert len(logging.getLogger().handlers) == 1


class TestJsonFormatter:
    """Tests for JsonFormatter."""

    def _record(self, **kwargs) -> logging.LogRecord:
        return logging.LogRecord(
            name="realty_ledger.store.ledger",
            level=logging.INFO,
            pathname=__file__,
            lineno=1,
            msg="Added property #%d",
            args=(3,),
            exc_info=kwargs.get("exc_info"),
        )

    def test_format(self) -> None:
        data = json.loads(JsonFormatter().format(self._record()))

        assert data["level"] == "INFO"
        assert data["logger"] == "realty_ledger.store.ledger"
        assert data["message"] == "Added property #3"
        assert "timestamp" in data

    def test_format_with_exception(self) -> None:
        try:
            raise ValueError("boom")
        except ValueError:
            record = self._record(exc_info=sys.exc_info())

        data = json.loads(JsonFormatter().format(record))
        assert "ValueError: boom" in data["exception"]

    def test_format_with_extra(self) -> None:
        record = self._record()
        record.extra = {"property_id": 3}

        data = json.loads(JsonFormatter().format(record))
        assert data["property_id"] == 3


class TestStandardFormatter:
    """Tests for StandardFormatter."""

    def _record(self) -> logging.LogRecord:
        return logging.LogRecord(
            name="realty_ledger.store.ledger",
            level=logging.DEBUG,
            pathname=__file__,
            lineno=1,
            msg="Updated property #%d: %s",
            args=(3, "rent_monthly"),
            exc_info=None,
        )

    def test_format(self) -> None:
        line = StandardFormatter().format(self._record())

        assert " | DEBUG    | realty_ledger.store.ledger | " in line
        assert line.endswith("Updated property #3: rent_monthly")

    def test_format_with_fields(self) -> None:
        record = self._record()
        record.__dict__.update(log_fields(property_id=3, rent_monthly="1250.00"))

        line = StandardFormatter().format(record)
        assert line.endswith("rent_monthly | property_id=3 rent_monthly=1250.00")


class TestLogFields:
    """Tests for log_fields and record_fields."""

    def test_log_fields(self) -> None:
        assert log_fields(property_id=1) == {"extra": {"property_id": 1}}

    def test_fields_reach_record(self, caplog: pytest.LogCaptureFixture) -> None:
        logger = get_logger("realty_ledger.test")
        with caplog.at_level(logging.INFO, logger="realty_ledger"):
            logger.info("Rent updated", extra=log_fields(property_id=4))
            logger.info("No fields")

        assert record_fields(caplog.records[0]) == {"property_id": 4}
        assert record_fields(caplog.records[1]) == {}


class TestGetLogger:
    """Tests for get_logger."""

    def test_returns_named_logger(self) -> None:
        logger = get_logger("realty_ledger.test")
        assert logger.name == "realty_ledger.test"
