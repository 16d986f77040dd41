"""Unit tests for settings loading."""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from chronoseal.config import DEFAULT_CONTRACT_ADDRESS, ConfigurationError, Settings

_KEYS = [
    "CHRONOSEAL_CONTRACT_ADDRESS",
    "CHRONOSEAL_CHAIN",
    "CHRONOSEAL_ACTION_PATH",
    "CHRONOSEAL_TX_FORMAT",
    "CHRONOSEAL_PORT",
]


@pytest.fixture()
def clean_env():
    with patch.dict(os.environ, {}):
        for key in _KEYS:
            os.environ.pop(key, None)
        yield


class TestSettings:
    """Tests for Settings validation."""

    def test_defaults(self) -> None:
        settings = Settings()
        assert settings.contract_address.lower() == DEFAULT_CONTRACT_ADDRESS.lower()
        assert settings.chain.id == 43113
        assert settings.action_path == "/api/my-app"
        assert settings.tx_format == "rlp"

    def test_address_is_checksummed(self) -> None:
        settings = Settings(contract_address=DEFAULT_CONTRACT_ADDRESS.lower())
        assert settings.contract_address != DEFAULT_CONTRACT_ADDRESS.lower()
        assert settings.contract_address.lower() == DEFAULT_CONTRACT_ADDRESS.lower()

    @pytest.mark.parametrize(
        "overrides",
        [
            {"contract_address": "0x1234"},
            {"chain_tag": "mainnet-of-dreams"},
            {"action_path": "api/my-app"},
            {"tx_format": "xml"},
        ],
    )
    def test_invalid_values(self, overrides: dict) -> None:
        with pytest.raises(ConfigurationError):
            Settings(**overrides)

    def test_compiler_config(self) -> None:
        config = Settings(chain_tag="avalanche").compiler_config()
        assert config.chain.id == 43114
        assert config.function_name == "storeMessage"


class TestFromEnv:
    """Tests for Settings.from_env."""

    def test_reads_environment(self, clean_env: None) -> None:
        os.environ["CHRONOSEAL_CHAIN"] = "monad-testnet"
        os.environ["CHRONOSEAL_TX_FORMAT"] = "JSON"
        os.environ["CHRONOSEAL_PORT"] = "8080"
        settings = Settings.from_env()
        assert settings.chain.name == "Monad Testnet"
        assert settings.tx_format == "json"
        assert settings.port == 8080

    def test_reads_dotenv_file(self, clean_env: None, tmp_path: Path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("CHRONOSEAL_ACTION_PATH=/from-dotenv\n", encoding="utf-8")
        settings = Settings.from_env(env_path=env_file)
        assert settings.action_path == "/from-dotenv"

    def test_environment_wins_over_dotenv(self, clean_env: None, tmp_path: Path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("CHRONOSEAL_CHAIN=celo\n", encoding="utf-8")
        os.environ["CHRONOSEAL_CHAIN"] = "avalanche"
        assert Settings.from_env(env_path=env_file).chain_tag == "avalanche"

    def test_invalid_port(self, clean_env: None) -> None:
        os.environ["CHRONOSEAL_PORT"] = "eighty"
        with pytest.raises(ConfigurationError, match="port"):
            Settings.from_env()
