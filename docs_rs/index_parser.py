#!/usr/bin/env python3
"""
Parser for a crate's ``all.html`` item index.

Every link in the index's main content is a candidate item. Its kind comes
from the rustdoc file-name prefix in the link target (``struct.Foo.html``,
``fn.bar.html``, ...). The table below is scanned top to bottom and the
first matching prefix wins. Links that match no prefix, such as module
directories and section anchors, are never returned.
"""

from dataclasses import dataclass
from typing import List, Optional, Set, Tuple
from urllib.parse import urljoin

from bs4 import BeautifulSoup

from .extractor import MAIN_CONTENT_SELECTOR
from .resolver import CrateIdentifier, crate_docs_root

UNKNOWN_KIND = "unknown"

KIND_PATTERNS: Tuple[Tuple[str, str], ...] = (
    ("struct.", "struct"),
    ("trait.", "trait"),
    ("fn.", "function"),
    ("enum.", "enum"),
    ("type.", "type"),
    ("constant.", "constant"),
    ("static.", "static"),
    ("macro.", "macro"),
)


@dataclass(frozen=True)
class IndexedItem:
    name: str
    type: str
    link: str

    @property
    def key(self) -> Tuple[str, str]:
        return (self.name, self.type)


def classify(href: str) -> str:
    for pattern, kind in KIND_PATTERNS:
        if pattern in href:
            return kind
    return UNKNOWN_KIND


def matches_name(item: IndexedItem, name_query: Optional[str]) -> bool:
    if not name_query:
        return True
    return name_query.lower() in item.name.lower()


def matches_type(item: IndexedItem, type_query: Optional[str]) -> bool:
    """
    Exact kind match, or the type query appearing in the item's name.

    The name fallback lets free-text queries like "error" narrow results
    even though it is not a kind.
    """
    if not type_query:
        return True
    return item.type == type_query or type_query.lower() in item.name.lower()


def normalize_link(href: str, crate: CrateIdentifier) -> str:
    # urljoin passes absolute targets through untouched
    return urljoin(crate_docs_root(crate), href)


def iter_index_items(page_html: str, crate: CrateIdentifier):
    """Yield every classified item link on the page in document order, duplicates included."""
    soup = BeautifulSoup(page_html or "", 'html.parser')
    main_content = soup.select_one(MAIN_CONTENT_SELECTOR)
    if main_content is None:
        return

    for link in main_content.find_all('a'):
        name = link.get_text().strip()
        href = (link.get('href') or "").strip()
        if not name or not href:
            continue

        kind = classify(href)
        if kind == UNKNOWN_KIND:
            continue

        yield IndexedItem(name=name, type=kind, link=normalize_link(href, crate))


def parse_index(
    page_html: str,
    crate: CrateIdentifier,
    name_query: Optional[str] = None,
    type_query: Optional[str] = None,
) -> List[IndexedItem]:
    """
    Parse an ``all.html`` page into filtered, deduplicated items.

    Args:
        page_html: HTML of the crate's all-items page
        crate: Crate the page belongs to, used to absolutize links
        name_query: Case-insensitive substring to match against item names
        type_query: Kind to keep (see ``matches_type`` for the loose matching)

    Returns:
        Items in first-seen order, unique by (name, type)
    """
    items = []
    seen: Set[Tuple[str, str]] = set()

    for item in iter_index_items(page_html, crate):
        if not (matches_name(item, name_query) and matches_type(item, type_query)):
            continue
        if item.key in seen:
            continue
        seen.add(item.key)
        items.append(item)

    return items
