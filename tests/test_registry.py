"""Tests for crates.io search parameters and result parsing."""

from __future__ import annotations

import pytest

from docs_rs.registry import MAX_PER_PAGE, NO_DESCRIPTION, build_search_params, parse_crates


class TestBuildSearchParams:
    """Tests for build_search_params."""

    def test_defaults(self) -> None:
        """Defaults to ten results ranked by relevance."""
        assert build_search_params("http client") == {"q": "http client", "per_page": 10, "sort": "relevance"}

    def test_per_page_clamped_high(self) -> None:
        """Page size never exceeds the API maximum."""
        assert build_search_params("x", per_page=500)["per_page"] == MAX_PER_PAGE

    def test_per_page_clamped_low(self) -> None:
        """Page size is at least one."""
        assert build_search_params("x", per_page=0)["per_page"] == 1

    @pytest.mark.parametrize("sort", ["relevance", "downloads", "recent-downloads", "recent-updates", "new"])
    def test_valid_sorts(self, sort: str) -> None:
        """All documented sort orders are accepted."""
        assert build_search_params("x", sort=sort)["sort"] == sort

    def test_invalid_sort(self) -> None:
        """Unknown sort orders are rejected."""
        with pytest.raises(ValueError, match="Invalid sort order"):
            build_search_params("x", sort="stars")


class TestParseCrates:
    """Tests for parse_crates."""

    def test_parses_fields(self) -> None:
        """Maps the API fields onto summaries in rank order."""
        payload = {
            "crates": [
                {
                    "name": "reqwest",
                    "description": "higher level HTTP client library\n",
                    "downloads": 250000000,
                    "newest_version": "0.12.8",
                    "documentation": "https://docs.rs/reqwest",
                },
                {"name": "ureq", "description": None, "downloads": 10, "newest_version": "2.10.1", "documentation": None},
            ]
        }
        crates = parse_crates(payload)
        assert [c.name for c in crates] == ["reqwest", "ureq"]
        assert crates[0].description == "higher level HTTP client library"
        assert crates[0].version == "0.12.8"
        assert crates[1].description == NO_DESCRIPTION
        assert crates[1].documentation is None

    def test_missing_crates_key(self) -> None:
        """A payload without crates yields nothing."""
        assert parse_crates({}) == []
