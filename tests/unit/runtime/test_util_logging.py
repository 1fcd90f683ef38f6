# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for configure_logging."""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest

from fleet_dispatch.runtime.util_logging import ENV_LOG_LEVEL, configure_logging

pytestmark = [pytest.mark.unit]


class TestConfigureLogging:
    def test_uses_environment_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(ENV_LOG_LEVEL, "debug")
        with patch("logging.basicConfig") as basic_config:
            configure_logging()

        assert basic_config.call_args.kwargs["level"] == logging.DEBUG
        assert "%(name)s" in basic_config.call_args.kwargs["format"]

    def test_explicit_level_wins(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(ENV_LOG_LEVEL, "DEBUG")
        with patch("logging.basicConfig") as basic_config:
            configure_logging("ERROR")

        assert basic_config.call_args.kwargs["level"] == logging.ERROR

    def test_defaults_to_info(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(ENV_LOG_LEVEL, raising=False)
        with patch("logging.basicConfig") as basic_config:
            configure_logging()

        assert basic_config.call_args.kwargs["level"] == logging.INFO

    def test_invalid_level_warns_and_falls_back(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setenv(ENV_LOG_LEVEL, "verbose")
        with patch("logging.basicConfig") as basic_config:
            configure_logging()

        assert basic_config.call_args.kwargs["level"] == logging.INFO
        assert "Invalid FLEET_DISPATCH_LOG_LEVEL 'VERBOSE'" in capsys.readouterr().err
