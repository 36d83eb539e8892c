#!/usr/bin/env python3
"""
crates.io search request parameters and result model.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

CRATES_IO_API_URL = "https://crates.io/api/v1/crates"
SORT_OPTIONS = ("relevance", "downloads", "recent-downloads", "recent-updates", "new")
DEFAULT_SORT = "relevance"
DEFAULT_PER_PAGE = 10
MAX_PER_PAGE = 100
NO_DESCRIPTION = "No description available"


@dataclass(frozen=True)
class CrateSummary:
    name: str
    description: str
    downloads: int
    version: str
    documentation: Optional[str] = None


def build_search_params(query: str, per_page: Optional[int] = None, sort: Optional[str] = None) -> Dict[str, Any]:
    """
    Build the query string for a crates.io search.

    ``per_page`` is clamped to 1..100 and ``sort`` must be one of SORT_OPTIONS.

    Raises:
        ValueError: If ``sort`` is not a recognised sort order
    """
    sort = sort or DEFAULT_SORT
    if sort not in SORT_OPTIONS:
        raise ValueError(f"Invalid sort order '{sort}', expected one of: {', '.join(SORT_OPTIONS)}")

    if per_page is None:
        per_page = DEFAULT_PER_PAGE
    per_page = max(1, min(int(per_page), MAX_PER_PAGE))

    return {'q': query, 'per_page': per_page, 'sort': sort}


def parse_crates(payload: Dict[str, Any]) -> List[CrateSummary]:
    """Turn a crates.io ``/api/v1/crates`` response body into summaries, keeping rank order."""
    summaries = []
    for crate in payload.get('crates') or []:
        summaries.append(CrateSummary(
            name=crate.get('name', ""),
            description=(crate.get('description') or "").strip() or NO_DESCRIPTION,
            downloads=int(crate.get('downloads') or 0),
            version=crate.get('newest_version') or crate.get('max_version') or "",
            documentation=crate.get('documentation') or None,
        ))
    return summaries
