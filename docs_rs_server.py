#!/usr/bin/env python3
"""
FastMCP server for Rust crate documentation lookups.

This server provides tools to:
1. Search crates.io for crates by keyword
2. Read a crate's README/overview from docs.rs
3. Read the documentation of a single item (module, struct, trait, fn, ...)
4. Search a crate's item index for matching names and kinds

Usage:
    python docs_rs_server.py [stdio|sse|http]
"""

import sys

from fastmcp import FastMCP

from tools.crates_tools import register_crates_tools
from tools.docs_tools import register_docs_tools
from docs_rs.logger import setup_logging

HOST = "127.0.0.1"
PORT = 8604

# Initialize the FastMCP server
mcp = FastMCP("Docs.rs Server 🦀")

# Setup logging
logger = setup_logging()

# Register all tool modules
register_crates_tools(mcp)
register_docs_tools(mcp)


def main():
    logger.info("Docs.rs Server starting up")

    transport = sys.argv[1].lower() if len(sys.argv) > 1 else "stdio"

    if transport == "sse":
        logger.info(f"Running with SSE transport on http://{HOST}:{PORT}")
        mcp.run(transport="sse", host=HOST, port=PORT)
    elif transport == "http":
        logger.info(f"Running with HTTP transport on http://{HOST}:{PORT}/mcp")
        mcp.run(transport="http", host=HOST, port=PORT, path="/mcp")
    elif transport == "stdio":
        logger.info("Running with STDIO transport")
        mcp.run(transport="stdio")
    else:
        # stdout belongs to the stdio transport, so usage goes to stderr
        print("Usage: docs-rs-mcp [stdio|sse|http]", file=sys.stderr)
        print("Default: stdio", file=sys.stderr)
        logger.info("Running with default STDIO transport")
        mcp.run()


if __name__ == "__main__":
    main()
