"""Tests for config and logging."""

import json
import logging
import os
import sys
from decimal import Decimal
from pathlib import Path
from unittest.mock import patch

import pytest

from atm_ledger.config import AtmConfig, GeneratorConfig, LedgerConfig
from atm_ledger.exceptions import ConfigurationError
from atm_ledger.logging import JsonFormatter, get_logger, setup_logging
from atm_ledger.store import Atm

ENV_VARS = [
    "LEDGER_OUTPUT_DIR",
    "LEDGER_ENCODING",
    "FAKER_LOCALE",
    "NUM_ACCOUNTS",
    "OPERATIONS_PER_ACCOUNT",
    "SEED",
    "LOG_LEVEL",
    "LOG_FORMAT",
]


@pytest.fixture
def clean_env():
    """Environment without any atm-ledger variables."""
    env = {k: v for k, v in os.environ.items() if k not in ENV_VARS}
    with patch.dict(os.environ, env, clear=True):
        yield


class TestLedgerConfig:
    """Tests for LedgerConfig."""

    def test_default_values(self) -> None:
        config = LedgerConfig()

        assert config.output_dir == Path("ledgers")
        assert config.encoding == "utf-8"

    def test_path_for(self) -> None:
        config = LedgerConfig(output_dir=Path("/tmp/out"))

        assert config.path_for(12345678) == Path("/tmp/out/ledger_12345678.txt")


class TestGeneratorConfig:
    """Tests for GeneratorConfig."""

    def test_default_values(self) -> None:
        config = GeneratorConfig()

        assert config.locale == "en_US"
        assert config.num_accounts == 10
        assert config.operations_per_account == 5


class TestAtmConfig:
    """Tests for AtmConfig."""

    def test_default_values(self) -> None:
        config = AtmConfig()

        assert isinstance(config.ledger, LedgerConfig)
        assert isinstance(config.generator, GeneratorConfig)
        assert config.seed is None
        assert config.log_level == "INFO"
        assert config.log_format == "standard"

    def test_from_env_default(self, clean_env) -> None:
        config = AtmConfig.from_env()

        assert config == AtmConfig()

    def test_from_env_custom(self, clean_env) -> None:
        custom = {
            "LEDGER_OUTPUT_DIR": "/data/ledgers",
            "LEDGER_ENCODING": "latin-1",
            "FAKER_LOCALE": "pt_BR",
            "NUM_ACCOUNTS": "25",
            "OPERATIONS_PER_ACCOUNT": "12",
            "SEED": "12345",
            "LOG_LEVEL": "DEBUG",
            "LOG_FORMAT": "json",
        }
        with patch.dict(os.environ, custom):
            config = AtmConfig.from_env()

        assert config.ledger.output_dir == Path("/data/ledgers")
        assert config.ledger.encoding == "latin-1"
        assert config.generator.locale == "pt_BR"
        assert config.generator.num_accounts == 25
        assert config.generator.operations_per_account == 12
        assert config.seed == 12345
        assert config.log_level == "DEBUG"
        assert config.log_format == "json"

    def test_from_env_invalid_integer(self, clean_env) -> None:
        with patch.dict(os.environ, {"NUM_ACCOUNTS": "many"}):
            with pytest.raises(ConfigurationError, match="NUM_ACCOUNTS"):
                AtmConfig.from_env()


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_setup_logging_default(self) -> None:
        setup_logging()

        assert logging.getLogger("atm_ledger").level == logging.INFO

    def test_setup_logging_debug(self) -> None:
        setup_logging(level="DEBUG")

        assert logging.getLogger().level == logging.DEBUG

    def test_setup_logging_invalid_level(self) -> None:
        setup_logging(level="INVALID")

        assert logging.getLogger().level == logging.INFO

    def test_setup_logging_json_format(self) -> None:
        setup_logging(format_type="json")

        assert any(isinstance(h.formatter, JsonFormatter) for h in logging.getLogger().handlers)

    def test_setup_logging_replaces_handlers(self) -> None:
        logger = logging.getLogger()
        logger.addHandler(logging.StreamHandler())
        logger.addHandler(logging.StreamHandler())

        setup_logging()

        assert len(logger.handlers) == 1

    def test_faker_logger_quieted(self) -> None:
        setup_logging(level="DEBUG")

        assert logging.getLogger("faker").level == logging.WARNING


class TestJsonFormatter:
    """Tests for JsonFormatter."""

    def _record(self, **kwargs) -> logging.LogRecord:
        defaults = dict(
            name="atm_ledger.store.atm",
            level=logging.INFO,
            pathname=__file__,
            lineno=1,
            msg="Registered account %d",
            args=(12345678,),
            exc_info=None,
        )
        defaults.update(kwargs)
        return logging.LogRecord(**defaults)

    def test_format_basic(self) -> None:
        data = json.loads(JsonFormatter().format(self._record()))

        assert data["level"] == "INFO"
        assert data["logger"] == "atm_ledger.store.atm"
        assert data["message"] == "Registered account 12345678"
        assert "timestamp" in data

    def test_format_with_exception(self) -> None:
        try:
            raise ValueError("Test error")
        except ValueError:
            exc_info = sys.exc_info()

        data = json.loads(JsonFormatter().format(self._record(level=logging.ERROR, exc_info=exc_info)))

        assert data["level"] == "ERROR"
        assert "ValueError" in data["exception"]

    def test_format_with_ledger_fields(self) -> None:
        record = self._record()
        record.account_number = 12345678
        record.amount = Decimal("20.00")

        data = json.loads(JsonFormatter().format(record))

        assert data["account_number"] == 12345678
        assert data["amount"] == "20.00"
        assert "balance" not in data

    def test_ignores_other_attributes(self) -> None:
        record = self._record()
        record.pin = 1234

        data = json.loads(JsonFormatter().format(record))

        assert "pin" not in data

    def test_atm_operations_log_ledger_fields(self, caplog: pytest.LogCaptureFixture) -> None:
        atm = Atm()
        with caplog.at_level(logging.DEBUG, logger="atm_ledger"):
            atm.register_account(12345678, 1234, "Sam Sepiol", Decimal("300.30"))
            atm.withdraw(12345678, 1234, 20)

        data = json.loads(JsonFormatter().format(caplog.records[-1]))

        assert data["account_number"] == 12345678
        assert data["transaction_type"] == "Withdrawal"
        assert data["amount"] == "20"
        assert data["balance"] == "280.30"
        assert "1234," not in data["message"]


class TestGetLogger:
    """Tests for get_logger function."""

    def test_get_logger(self) -> None:
        logger = get_logger("atm_ledger.test")

        assert isinstance(logger, logging.Logger)
        assert logger.name == "atm_ledger.test"

    def test_get_logger_same_instance(self) -> None:
        assert get_logger("atm_ledger.same") is get_logger("atm_ledger.same")


class TestPackageInit:
    """Tests for atm_ledger __init__.py."""

    def test_version_exported(self) -> None:
        from atm_ledger import Atm, __version__

        assert isinstance(__version__, str)
        assert Atm.__name__ == "Atm"
