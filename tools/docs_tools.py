#!/usr/bin/env python3
"""
MCP tools for docs.rs documentation lookups.

This module provides MCP tool wrappers around the core documentation functionality.
"""

from pathlib import Path
from typing import Optional

from fastmcp import FastMCP, Context
from fastmcp.exceptions import ToolError

from docs_rs.core import QueryError, get_item_impl, get_readme_impl, search_in_crate_impl
from docs_rs.logger import setup_logging

# Configuration
LOGS_DIR = Path("./logs")

logger = setup_logging(LOGS_DIR)


def _tool_error(tool_name: str, error: QueryError) -> ToolError:
    logger.error("Tool failed", exc_info=error, extra={'extra_data': {'tool': tool_name}})
    return ToolError(f"Error executing tool {tool_name}: {error}")


def register_docs_tools(mcp: FastMCP):
    """Register documentation related MCP tools."""

    @mcp.tool
    async def docs_rs_readme(crate_name: str, ctx: Context, version: Optional[str] = None) -> str:
        """
        Get README/overview content of the specified crate.

        Args:
            crate_name: Name of the crate to get README for
            version: Specific version (optional, defaults to latest)

        Returns:
            The crate overview as markdown
        """
        try:
            return await get_readme_impl(crate_name, logger, version=version, ctx=ctx)
        except QueryError as e:
            raise _tool_error("docs_rs_readme", e) from e

    @mcp.tool
    async def docs_rs_get_item(
        crate_name: str,
        item_type: str,
        item_path: str,
        ctx: Context,
        version: Optional[str] = None,
    ) -> str:
        """
        Get documentation content of a specific item (module, struct, trait, enum, function, etc.) within a crate.

        Args:
            crate_name: Name of the crate
            item_type: Type of item: 'module' for modules, 'struct', 'trait', 'enum', 'type', 'fn', etc.
            item_path: The full path of the item, including the module name (e.g. wasmtime::component::Component)
            version: Specific version (optional, defaults to latest)

        Returns:
            The item documentation as markdown
        """
        try:
            return await get_item_impl(crate_name, item_type, item_path, logger, version=version, ctx=ctx)
        except QueryError as e:
            raise _tool_error("docs_rs_get_item", e) from e

    @mcp.tool
    async def docs_rs_search_in_crate(
        crate_name: str,
        query: str,
        ctx: Context,
        version: Optional[str] = None,
        item_type: Optional[str] = None,
    ) -> str:
        """
        Search for traits, structs, methods, etc. from the crate's all.html page.
        To get a module, use docs_rs_get_item instead.

        Args:
            crate_name: Name of the crate to search
            query: Search keyword (trait name, struct name, function name, etc.)
            version: Specific version (optional, defaults to latest)
            item_type: Filter by item type (struct | trait | function | enum | type | macro | constant | static)

        Returns:
            Markdown listing of matching items with links
        """
        try:
            return await search_in_crate_impl(crate_name, query, logger, version=version, item_type=item_type, ctx=ctx)
        except QueryError as e:
            raise _tool_error("docs_rs_search_in_crate", e) from e
