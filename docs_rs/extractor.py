#!/usr/bin/env python3
"""
Fragment extraction from rustdoc-generated HTML.

Rustdoc emits different markup depending on page kind and generator
version. Full item pages carry a ``#main-content`` section, while minimal or
older pages only expose a declaration block and a docblock. Each selector
is a small strategy taking the parsed page and returning the fragment or
None. A chain tries its strategies in order and the first non-empty
fragment wins.
"""

from typing import Callable, Optional, Sequence

from bs4 import BeautifulSoup, Tag

Strategy = Callable[[BeautifulSoup], Optional[str]]

MAIN_CONTENT_SELECTOR = "#main-content"
DECLARATION_SELECTOR = ".rustdoc .item-decl"
DESCRIPTION_SELECTOR = ".rustdoc .docblock"
ALTERNATE_DECLARATION_SELECTOR = ".rustdoc-main .item-decl"


def _inner_html(node: Optional[Tag]) -> str:
    if node is None:
        return ""
    return node.decode_contents()


def _non_blank(fragment: str) -> Optional[str]:
    return fragment if fragment.strip() else None


def main_content_section(soup: BeautifulSoup) -> Optional[str]:
    return _non_blank(_inner_html(soup.select_one(MAIN_CONTENT_SELECTOR)))


def declaration_and_description(soup: BeautifulSoup) -> Optional[str]:
    """Item signature followed by its prose, when either one is on the page."""
    declaration = soup.select_one(DECLARATION_SELECTOR)
    description = soup.select_one(DESCRIPTION_SELECTOR)
    if declaration is None and description is None:
        return None
    return _non_blank(_inner_html(declaration) + _inner_html(description))


def alternate_declaration(soup: BeautifulSoup) -> Optional[str]:
    # Only consulted when neither node above exists.
    if soup.select_one(DECLARATION_SELECTOR) or soup.select_one(DESCRIPTION_SELECTOR):
        return None
    return _non_blank(_inner_html(soup.select_one(ALTERNATE_DECLARATION_SELECTOR)))


def description_block(soup: BeautifulSoup) -> Optional[str]:
    return _non_blank(_inner_html(soup.select_one(DESCRIPTION_SELECTOR)))


ITEM_CHAIN = (main_content_section, declaration_and_description, alternate_declaration)
README_CHAIN = (description_block,)


def extract(page_html: str, chain: Sequence[Strategy] = ITEM_CHAIN) -> str:
    """
    Return the first fragment ``chain`` finds in ``page_html``.

    Args:
        page_html: Full HTML of a docs.rs page
        chain: Ordered strategies to try

    Returns:
        The fragment's inner HTML, or an empty string when nothing matched
    """
    if not page_html:
        return ""

    soup = BeautifulSoup(page_html, 'html.parser')
    for strategy in chain:
        fragment = strategy(soup)
        if fragment:
            return fragment
    return ""


def extract_item(page_html: str) -> str:
    return extract(page_html, ITEM_CHAIN)


def extract_readme(page_html: str) -> str:
    return extract(page_html, README_CHAIN)
