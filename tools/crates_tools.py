#!/usr/bin/env python3
"""
MCP tools for crates.io registry operations.

This module provides MCP tool wrappers around the core crate search.
"""

from pathlib import Path

from fastmcp import FastMCP, Context
from fastmcp.exceptions import ToolError

from docs_rs.core import QueryError, search_crates_impl
from docs_rs.logger import setup_logging
from docs_rs.registry import DEFAULT_PER_PAGE, DEFAULT_SORT

# Configuration
LOGS_DIR = Path("./logs")

logger = setup_logging(LOGS_DIR)


def register_crates_tools(mcp: FastMCP):
    """Register crates.io related MCP tools."""

    @mcp.tool
    async def docs_rs_search_crates(
        query: str,
        ctx: Context,
        per_page: int = DEFAULT_PER_PAGE,
        sort: str = DEFAULT_SORT,
    ) -> str:
        """
        Search for Rust crates by keywords on crates.io.

        Args:
            query: Search keywords for finding relevant crates. Keywords should be in English.
            per_page: Number of results per page (default: 10, max: 100)
            sort: Sort order: 'relevance', 'downloads', 'recent-downloads', 'recent-updates', 'new' (default: relevance)

        Returns:
            Markdown list of matching crates
        """
        try:
            return await search_crates_impl(query, logger, per_page=per_page, sort=sort, ctx=ctx)
        except QueryError as e:
            logger.error("Tool failed", exc_info=True, extra={'extra_data': {'tool': 'docs_rs_search_crates'}})
            raise ToolError(f"Error executing tool docs_rs_search_crates: {e}") from e
