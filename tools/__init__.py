"""
MCP tools for the docs.rs server.

This package contains MCP tool wrappers organized by functionality:
- crates_tools: crates.io registry search
- docs_tools: docs.rs README, item and in-crate lookups
"""
