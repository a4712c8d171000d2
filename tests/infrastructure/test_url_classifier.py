"""Tests for UrlClassifier."""

import pytest

from autoselect.domain.errors import InvalidHostError, InvalidURIError


class TestParseAsUri:
    @pytest.mark.parametrize(
        "text",
        ["http://example.com", "https://example.com/a?b=c#d", "about:config", "mailto:someone@example.com"],
    )
    def test_accepts_scheme(self, uri, text):
        assert uri.parse_as_uri(text) == text

    @pytest.mark.parametrize("text", ["example.com", "cats", "", "1http://x", "/path/only"])
    def test_rejects_missing_scheme(self, uri, text):
        with pytest.raises(InvalidURIError):
            uri.parse_as_uri(text)

    def test_error_is_a_value_error(self, uri):
        with pytest.raises(ValueError):
            uri.parse_as_uri("cats")


class TestParseBaseDomain:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("example.com", "example.com"),
            ("www.example.com", "example.com"),
            ("example.com/page", "example.com"),
            ("News.Example.ORG/a?b#c", "example.org"),
            ("site.co.uk", "site.co.uk"),
            ("example.com.", "example.com"),
        ],
    )
    def test_extracts_registrable_domain(self, uri, text, expected):
        assert uri.parse_base_domain(text) == expected

    @pytest.mark.parametrize(
        "text",
        ["cats", "localhost", "com", "co.uk", "foo.notarealtld", "", "/path", "bad_label.com", "-x.com"],
    )
    def test_rejects_non_domains(self, uri, text):
        with pytest.raises(InvalidHostError):
            uri.parse_base_domain(text)
