"""Unit tests for utils.py functions."""

from __future__ import annotations

from chronoseal.utils import base_url_from_headers


class TestBaseUrlFromHeaders:
    """Tests for base_url_from_headers."""

    def test_defaults(self) -> None:
        assert base_url_from_headers({}) == "http://localhost:3000"

    def test_forwarded_proto(self) -> None:
        headers = {"host": "actions.example.org", "x-forwarded-proto": "https"}
        assert base_url_from_headers(headers) == "https://actions.example.org"

    def test_forwarded_proto_is_lowercased(self) -> None:
        headers = {"host": "actions.example.org", "x-forwarded-proto": "HTTPS"}
        assert base_url_from_headers(headers) == "https://actions.example.org"

    def test_first_hop_wins(self) -> None:
        headers = {"host": "actions.example.org", "x-forwarded-proto": "https, http"}
        assert base_url_from_headers(headers) == "https://actions.example.org"
