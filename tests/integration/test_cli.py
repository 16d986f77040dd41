"""
CLI integration tests using Click's test runner.

Tests verify that the CLI commands work end-to-end via the Click
CliRunner, without requiring network access or chain interaction.
"""

from __future__ import annotations

import json
import os
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from chronoseal.cli import cli
from chronoseal.pneuma.tx import decode_legacy_transaction

NOW = 1_700_000_000


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture(autouse=True)
def clean_env():
    with patch.dict(os.environ, {}):
        for key in [k for k in os.environ if k.startswith("CHRONOSEAL_")]:
            del os.environ[key]
        yield


class TestVersionAndInfo:
    """Test basic CLI commands."""

    def test_version(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "1.0.0" in result.output

    def test_info(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["info"])
        assert result.exit_code == 0
        assert "Avalanche Fuji (43113, tag fuji)" in result.output
        assert "/api/my-app" in result.output

    def test_invalid_configuration(self, runner: CliRunner) -> None:
        with patch.dict(os.environ, {"CHRONOSEAL_CHAIN": "atlantis"}):
            result = runner.invoke(cli, ["info"])
        assert result.exit_code == 1
        assert "Unknown chain tag" in result.output


class TestManifest:
    def test_prints_manifest(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["manifest", "--base-url", "https://actions.example.org"])
        assert result.exit_code == 0
        body = json.loads(result.output)
        assert body["baseUrl"] == "https://actions.example.org"
        assert body["actions"][0]["path"] == "/api/my-app"

    def test_rejected_manifest(self, runner: CliRunner) -> None:
        with patch.dict(os.environ, {"CHRONOSEAL_ICON_URL": "not-a-url"}):
            result = runner.invoke(cli, ["manifest"])
        assert result.exit_code == 3
        assert "icon" in result.output


class TestCompileAndDecode:
    def test_compile_round_trip(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["compile", "hi", "--timestamp", str(NOW)])
        assert result.exit_code == 0
        body = json.loads(result.output)
        assert body["chainId"] == "Avalanche Fuji"

        tx = decode_legacy_transaction(body["serializedTransaction"])
        assert tx.chain_id == 43113

        decoded = runner.invoke(cli, ["decode", body["serializedTransaction"]])
        assert decoded.exit_code == 0
        assert "Function: storeMessage" in decoded.output
        assert "'hi'" in decoded.output
        assert str(NOW + 314) in decoded.output

    def test_compile_json_format(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["compile", "hi", "--timestamp", str(NOW), "--format", "json"])
        assert result.exit_code == 0
        payload = json.loads(json.loads(result.output)["serializedTransaction"])
        assert payload["type"] == "legacy"

    def test_compile_empty_message(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["compile", ""])
        assert result.exit_code == 2
        assert "Message parameter is required" in result.output

    def test_decode_garbage(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["decode", "0xnothex"])
        assert result.exit_code == 1
        assert "ERROR" in result.output
