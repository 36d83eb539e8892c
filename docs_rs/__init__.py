"""
Core modules for the docs.rs MCP server.

This package contains the core business logic modules:
- logger: Logging infrastructure
- resolver: docs.rs URL construction
- extractor: Documentation fragment extraction
- markdown: HTML to Markdown rendering
- index_parser: all.html item index parsing
- registry: crates.io search parameters and results
- scraper: HTTP transport
- core: Main business logic functions
"""
