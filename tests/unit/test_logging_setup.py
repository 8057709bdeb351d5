"""Unit tests for logging configuration."""
from __future__ import annotations

import logging

import pytest

from wallet_factory.logging_setup import configure_logging


def _root_handler() -> logging.Handler:
    handlers = logging.getLogger().handlers
    assert handlers, "configure_logging installed no root handler"
    return handlers[-1]


class TestRootLevel:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("INFO", logging.INFO),
            ("DEBUG", logging.DEBUG),
            ("warning", logging.WARNING),
            ("Error", logging.ERROR),
        ],
    )
    def test_level_name_resolved(self, name: str, expected: int) -> None:
        configure_logging(name)
        assert logging.getLogger().level == expected

    @pytest.mark.parametrize("name", ["NONEXISTENT", "", "verbose"])
    def test_unknown_name_falls_back_to_info(self, name: str) -> None:
        configure_logging(name)
        assert logging.getLogger().level == logging.INFO


class TestThirdPartyLoggers:
    @pytest.mark.parametrize("library", ["aiohttp", "urllib3", "asyncio"])
    def test_quieted_even_in_debug(self, library: str) -> None:
        configure_logging("DEBUG")
        assert logging.getLogger(library).level == logging.WARNING

    def test_package_loggers_follow_root(self) -> None:
        configure_logging("DEBUG")
        assert logging.getLogger("wallet_factory.factory").getEffectiveLevel() == logging.DEBUG


class TestFormat:
    def test_repeated_calls_keep_one_handler(self) -> None:
        configure_logging("INFO")
        configure_logging("DEBUG")
        assert len(logging.getLogger().handlers) == 1

    def test_record_rendering(self) -> None:
        configure_logging("INFO")
        record = logging.LogRecord(
            "wallet_factory.factory",
            logging.INFO,
            __file__,
            1,
            "Created %s client on %s",
            ("near", "testnet"),
            None,
        )
        line = _root_handler().format(record)
        assert line.endswith("INFO     wallet_factory.factory: Created near client on testnet")
        # asctime leads the line
        assert line[:4].isdigit()
