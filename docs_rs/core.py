#!/usr/bin/env python3
"""
Core business logic for the docs.rs MCP server.

Each ``*_impl`` function is one tool's whole pipeline. It resolves the URL,
performs a single fetch, extracts or parses the page, renders it and
formats the Markdown payload. None of them depend on MCP wiring. A scraper
may be passed in, which is how the tests run them against fixture HTML.

Empty extraction results and zero search hits are ordinary payloads. Fetch
failures and invalid arguments raise QueryError.
"""

from contextlib import asynccontextmanager
from typing import List, Optional

from fastmcp import Context

from .extractor import extract_item, extract_readme
from .index_parser import IndexedItem, parse_index
from .markdown import render
from .registry import CrateSummary
from .resolver import (
    CrateIdentifier,
    ItemIdentifier,
    resolve_all_items_url,
    resolve_crate_url,
    resolve_item_url,
)
from .scraper import DocsRsScraper, FetchError

NOT_FOUND_TEMPLATE = "No documentation content found at {url}"
NO_MATCHES = "No matching items found."


class QueryError(Exception):
    """A tool call failed; the message names the operation and the cause."""


@asynccontextmanager
async def _scraper_session(scraper=None):
    if scraper is not None:
        yield scraper
        return
    async with DocsRsScraper() as owned:
        yield owned


def format_crate_results(query: str, crates: List[CrateSummary]) -> str:
    sections = [
        f"## {crate.name} ({crate.version})\n\n"
        f"**Description:** {crate.description}\n\n"
        f"**Downloads:** {crate.downloads:,}\n\n"
        f"**Documentation:** {crate.documentation or 'N/A'}\n\n---\n"
        for crate in crates
    ]
    return f'# Crate Search Results for "{query}"\n\n' + "\n".join(sections)


def format_readme(crate: CrateIdentifier, url: str, markdown: Optional[str]) -> str:
    body = NOT_FOUND_TEMPLATE.format(url=url) if markdown is None else markdown
    return f"# {crate.name} Documentation\n\n{body}"


def format_item(item: ItemIdentifier, url: str, markdown: Optional[str]) -> str:
    heading = f"# {item.qualified_name} ({item.item_type})"
    if markdown is None:
        return f"{heading}\n\n{NOT_FOUND_TEMPLATE.format(url=url)}"
    return f"{heading}\n\n**Documentation URL:** {url}\n\n{markdown}"


def format_index_results(crate: CrateIdentifier, query: Optional[str], items: List[IndexedItem]) -> str:
    header = f'# Search Results for "{query or "all items"}" in {crate.name}\n\nFound {len(items)} items\n\n'
    if not items:
        return header + NO_MATCHES

    sections = [
        f"## {item.name} ({item.type})\n\n"
        f"**Type:** {item.type}\n\n"
        f"**Link:** [View Documentation]({item.link})\n\n---\n"
        for item in items
    ]
    return header + "\n".join(sections)


async def search_crates_impl(
    query: str,
    logger,
    per_page: Optional[int] = None,
    sort: Optional[str] = None,
    ctx: Optional[Context] = None,
    scraper=None,
) -> str:
    """
    Core implementation for searching crates.io.

    Args:
        query: Free-text search keywords
        logger: Logger instance
        per_page: Number of results (clamped to 1..100)
        sort: One of relevance, downloads, recent-downloads, recent-updates, new
        ctx: Optional FastMCP context for user feedback
        scraper: Optional transport; a DocsRsScraper is opened when omitted

    Returns:
        Markdown list of matching crates in ranked order
    """
    logger.info("Searching crates", extra={'extra_data': {'query': query, 'per_page': per_page, 'sort': sort}})
    try:
        async with _scraper_session(scraper) as session:
            crates = await session.search_crates(query, logger, per_page=per_page, sort=sort, ctx=ctx)
    except (FetchError, ValueError) as e:
        if ctx:
            await ctx.error(f"Failed to search crates: {e}")
        logger.error("Crate search failed", extra={'extra_data': {'query': query, 'error': str(e)}})
        raise QueryError(f"Failed to search crates: {e}") from e

    if ctx:
        await ctx.info(f"Found {len(crates)} crates")
    return format_crate_results(query, crates)


async def get_readme_impl(
    crate_name: str,
    logger,
    version: Optional[str] = None,
    ctx: Optional[Context] = None,
    scraper=None,
) -> str:
    """
    Core implementation for fetching a crate's overview (README) page.

    Only the page's docblock is used; declaration selectors have no
    meaning on a crate overview.

    Args:
        crate_name: Name of the crate
        logger: Logger instance
        version: Specific version, defaults to latest
        ctx: Optional FastMCP context for user feedback
        scraper: Optional transport; a DocsRsScraper is opened when omitted

    Returns:
        Markdown overview, or a not-found message naming the URL tried
    """
    crate = CrateIdentifier.create(crate_name, version)
    url = resolve_crate_url(crate)
    logger.info("Getting crate README", extra={'extra_data': {'crate': crate.name, 'version': crate.version, 'url': url}})

    try:
        async with _scraper_session(scraper) as session:
            page = await session.fetch_html(url, logger, ctx)
    except FetchError as e:
        if ctx:
            await ctx.error(f"Failed to get README for {crate.name}: {e}")
        raise QueryError(f"Failed to get README for {crate.name}: {e}") from e

    # a docblock holding only page chrome renders to nothing
    markdown = render(extract_readme(page))
    if not markdown:
        logger.warning("No README content found", extra={'extra_data': {'crate': crate.name, 'url': url}})
        return format_readme(crate, url, None)

    return format_readme(crate, url, markdown)


async def get_item_impl(
    crate_name: str,
    item_type: str,
    item_path: str,
    logger,
    version: Optional[str] = None,
    ctx: Optional[Context] = None,
    scraper=None,
) -> str:
    """
    Core implementation for fetching the documentation of a single item.

    Args:
        crate_name: Name of the crate
        item_type: Rustdoc kind such as 'module', 'struct', 'trait', 'fn'
        item_path: Full ``::``-separated path, e.g. 'tokio::sync::Mutex'
        logger: Logger instance
        version: Specific version, defaults to latest
        ctx: Optional FastMCP context for user feedback
        scraper: Optional transport; a DocsRsScraper is opened when omitted

    Returns:
        Markdown documentation, or a not-found message naming the URL tried
    """
    crate = CrateIdentifier.create(crate_name, version)
    try:
        item = ItemIdentifier.from_path(crate, item_type, item_path)
    except ValueError as e:
        raise QueryError(f"Failed to get item documentation for '{item_path}': {e}") from e

    url = resolve_item_url(item)
    logger.info(
        "Getting item documentation",
        extra={'extra_data': {'crate': crate.name, 'version': crate.version, 'item': item.qualified_name, 'kind': item.item_type, 'url': url}}
    )

    try:
        async with _scraper_session(scraper) as session:
            page = await session.fetch_html(url, logger, ctx)
    except FetchError as e:
        if ctx:
            await ctx.error(f"Failed to get item documentation for {item.qualified_name}: {e}")
        raise QueryError(f"Failed to get item documentation for {item.qualified_name}: {e}") from e

    markdown = render(extract_item(page))
    if not markdown:
        logger.warning("No item content found", extra={'extra_data': {'item': item.qualified_name, 'url': url}})
        return format_item(item, url, None)

    return format_item(item, url, markdown)


async def search_in_crate_impl(
    crate_name: str,
    query: Optional[str],
    logger,
    version: Optional[str] = None,
    item_type: Optional[str] = None,
    ctx: Optional[Context] = None,
    scraper=None,
) -> str:
    """
    Core implementation for searching a crate's all-items page.

    Args:
        crate_name: Name of the crate
        query: Name substring to look for; empty lists every item
        logger: Logger instance
        version: Specific version, defaults to latest
        item_type: Optional kind filter (struct, trait, function, ...)
        ctx: Optional FastMCP context for user feedback
        scraper: Optional transport; a DocsRsScraper is opened when omitted

    Returns:
        Markdown listing of matching items
    """
    crate = CrateIdentifier.create(crate_name, version)
    url = resolve_all_items_url(crate)
    logger.info(
        "Searching items in crate",
        extra={'extra_data': {'crate': crate.name, 'version': crate.version, 'query': query, 'item_type': item_type, 'url': url}}
    )

    try:
        async with _scraper_session(scraper) as session:
            page = await session.fetch_html(url, logger, ctx)
    except FetchError as e:
        if ctx:
            await ctx.error(f"Failed to search items in {crate.name}: {e}")
        raise QueryError(f"Failed to search items in {crate.name}: {e}") from e

    items = parse_index(page, crate, name_query=query, type_query=item_type)
    if ctx:
        await ctx.info(f"Found {len(items)} matching items in {crate.name}")
    logger.info(
        "Crate item search complete",
        extra={'extra_data': {'crate': crate.name, 'query': query, 'result_count': len(items)}}
    )
    return format_index_results(crate, query, items)
