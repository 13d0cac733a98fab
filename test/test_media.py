"""
Tests for media type negotiation
"""

import pytest

from negotiation.exceptions import NotAcceptableError
from negotiation.media import select_media_type

SUPPORTED = ["application/json", "text/html", "text/plain"]


class TestSelectMediaType:
    def test_exact_match(self):
        assert select_media_type("text/plain", SUPPORTED) == "text/plain"

    def test_highest_quality_wins(self):
        assert select_media_type("text/html;q=0.4, text/plain;q=0.9", SUPPORTED) == "text/plain"

    def test_concrete_value_beats_wildcard_of_same_quality(self):
        assert select_media_type("*;q=0.8, text/html;q=0.8", SUPPORTED) == "text/html"

    def test_browser_accept(self):
        accept = "*;q=0.8, text/plain;q=0.8, text/html, application/json;q=0.5"
        assert select_media_type(accept, SUPPORTED) == "text/html"

    def test_subtype_wildcard(self):
        assert select_media_type("text/*", SUPPORTED) == "text/html"

    def test_full_wildcard_takes_server_preference(self):
        assert select_media_type("*/*", SUPPORTED) == "application/json"

    def test_case_insensitive_match(self):
        assert select_media_type("TEXT/HTML", SUPPORTED) == "text/html"

    def test_parameters_ignored(self):
        assert select_media_type("text/plain; charset=utf-8", SUPPORTED) == "text/plain"

    def test_missing_header_uses_default(self):
        assert select_media_type(None, SUPPORTED, default="text/html") == "text/html"
        assert select_media_type("", SUPPORTED) == "application/json"

    def test_zero_quality_excluded_from_wildcard(self):
        assert select_media_type("application/json;q=0, */*;q=0.1", SUPPORTED) == "text/html"

    def test_nothing_acceptable(self):
        with pytest.raises(NotAcceptableError) as exc_info:
            select_media_type("image/png", SUPPORTED)
        assert exc_info.value.status_code == 406
        assert exc_info.value.details == {"header": "Accept", "supported": SUPPORTED}

    def test_only_refusals(self):
        with pytest.raises(NotAcceptableError):
            select_media_type("*/*;q=0", SUPPORTED)

    def test_no_supported_types(self):
        with pytest.raises(NotAcceptableError):
            select_media_type("text/html", [])
