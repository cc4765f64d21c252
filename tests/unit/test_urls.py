"""
Tests for bookmark URL helpers.
"""

from __future__ import annotations

import pytest

from src.domain.urls import (
    base_url,
    extract_domain,
    favicon_url,
    large_icon_url,
    normalize_url,
    title_from_url,
)


class TestNormalizeUrl:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("example.com", "https://example.com"),
            ("  example.com/a?b=1  ", "https://example.com/a?b=1"),
            ("http://example.com", "http://example.com"),
            ("https://example.com", "https://example.com"),
            ("localhost:3000", "https://localhost:3000"),
            ("example.com:8080/path", "https://example.com:8080/path"),
            ("", ""),
        ],
    )
    def test_normalize(self, raw: str, expected: str) -> None:
        assert normalize_url(raw) == expected

    def test_other_scheme_untouched(self) -> None:
        assert normalize_url("ftp://files.example.com") == "ftp://files.example.com"

    @pytest.mark.parametrize(
        "raw", ["javascript:alert(1)", "mailto:me@example.com", "ftp:files.example.com"]
    )
    def test_non_web_scheme_kept_for_rejection(self, raw: str) -> None:
        assert normalize_url(raw) == raw


class TestIcons:
    def test_favicon_drops_path_and_query(self) -> None:
        assert favicon_url("https://github.com/dashboard?tab=1") == "https://github.com/favicon.ico"

    def test_favicon_keeps_scheme(self) -> None:
        assert favicon_url("http://example.com/x") == "http://example.com/favicon.ico"

    def test_large_icon(self) -> None:
        assert large_icon_url("https://www.google.com/search") == (
            "https://www.google.com/apple-touch-icon.png"
        )

    def test_base_url_invalid_returns_input(self) -> None:
        assert base_url("not a url") == "not a url"


class TestDomainAndTitle:
    def test_extract_domain(self) -> None:
        assert extract_domain("https://chat.openai.com/c/123") == "chat.openai.com"

    def test_extract_domain_invalid(self) -> None:
        assert extract_domain("nope") == "nope"

    @pytest.mark.parametrize(
        ("url", "title"),
        [
            ("https://www.github.com/x", "Github"),
            ("https://youtube.com", "Youtube"),
            ("https://chat.openai.com", "Chat"),
            ("http://localhost:8000/docs", "Localhost"),
        ],
    )
    def test_title_from_url(self, url: str, title: str) -> None:
        assert title_from_url(url) == title

    def test_title_fallback(self) -> None:
        assert title_from_url("not a url") == "Website"
        assert title_from_url("") == "Website"
