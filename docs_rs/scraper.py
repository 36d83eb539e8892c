#!/usr/bin/env python3
"""
HTTP transport for docs.rs pages and crates.io searches.

Every request is bounded by a total timeout. Any failure (timeout,
connection error, non-200 status, unreadable body) surfaces as a
FetchError. Nothing is retried.
"""

import asyncio
from typing import List, Optional

import aiohttp
from fastmcp import Context

from .registry import CRATES_IO_API_URL, CrateSummary, build_search_params, parse_crates

REQUEST_TIMEOUT_SECONDS = 30
USER_AGENT = 'docs-rs-mcp/1.0 (https://github.com/docs-rs-mcp)'


class FetchError(Exception):
    """A page or API response could not be retrieved."""


class DocsRsScraper:
    """Scraper for fetching pages from docs.rs and search results from crates.io."""

    def __init__(self, timeout: float = REQUEST_TIMEOUT_SECONDS):
        self.timeout = timeout
        self.session = None

    async def __aenter__(self):
        self.session = aiohttp.ClientSession(
            timeout=aiohttp.ClientTimeout(total=self.timeout),
            headers={
                'User-Agent': USER_AGENT
            }
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if self.session:
            await self.session.close()

    async def fetch_html(self, url: str, logger, ctx: Optional[Context] = None) -> str:
        """
        Fetch a documentation page.

        Args:
            url: Absolute docs.rs URL
            logger: Logger instance
            ctx: Optional FastMCP context

        Returns:
            The response body as text

        Raises:
            FetchError: On timeout, transport error, a non-200 status or an undecodable body
        """
        if ctx:
            await ctx.info(f"Fetching {url}")
        logger.info("Fetching page", extra={'extra_data': {'url': url}})

        try:
            async with self.session.get(url) as response:
                if response.status != 200:
                    logger.error(
                        "Unexpected status fetching page",
                        extra={'extra_data': {'url': url, 'status': response.status}}
                    )
                    raise FetchError(f"HTTP {response.status} from {url}")
                return await response.text()
        except asyncio.TimeoutError as e:
            logger.error("Timed out fetching page", extra={'extra_data': {'url': url, 'timeout': self.timeout}})
            raise FetchError(f"Timed out after {self.timeout}s fetching {url}") from e
        except aiohttp.ClientError as e:
            logger.error("Error fetching page", exc_info=True, extra={'extra_data': {'url': url}})
            raise FetchError(f"Request to {url} failed: {e}") from e
        except UnicodeDecodeError as e:
            logger.error("Undecodable page body", extra={'extra_data': {'url': url, 'error': str(e)}})
            raise FetchError(f"Could not decode response from {url}: {e}") from e

    async def search_crates(
        self,
        query: str,
        logger,
        per_page: Optional[int] = None,
        sort: Optional[str] = None,
        ctx: Optional[Context] = None,
    ) -> List[CrateSummary]:
        """
        Search crates.io for crates matching ``query``.

        Raises:
            ValueError: If ``sort`` is not a recognised sort order
            FetchError: On timeout, transport error, a non-200 status or a non-JSON body
        """
        params = build_search_params(query, per_page, sort)
        if ctx:
            await ctx.info(f"Searching crates.io for '{query}'")
        logger.info("Searching crates.io", extra={'extra_data': params})

        try:
            async with self.session.get(CRATES_IO_API_URL, params=params) as response:
                if response.status != 200:
                    logger.error(
                        "Unexpected status from crates.io",
                        extra={'extra_data': {'status': response.status, 'query': query}}
                    )
                    raise FetchError(f"HTTP {response.status} from {CRATES_IO_API_URL}")
                payload = await response.json()
        except asyncio.TimeoutError as e:
            logger.error("Timed out searching crates.io", extra={'extra_data': {'query': query, 'timeout': self.timeout}})
            raise FetchError(f"Timed out after {self.timeout}s searching crates.io") from e
        except aiohttp.ClientError as e:
            # ContentTypeError (non-JSON body) is a ClientError too
            logger.error("Error searching crates.io", exc_info=True, extra={'extra_data': {'query': query}})
            raise FetchError(f"Request to {CRATES_IO_API_URL} failed: {e}") from e
        except ValueError as e:
            # undecodable bytes or malformed JSON behind a JSON content type
            logger.error("Malformed crates.io response", extra={'extra_data': {'query': query, 'error': str(e)}})
            raise FetchError(f"Malformed response from {CRATES_IO_API_URL}: {e}") from e

        if not isinstance(payload, dict):
            raise FetchError(f"Unexpected response shape from {CRATES_IO_API_URL}")

        crates = parse_crates(payload)
        logger.info(
            "crates.io search complete",
            extra={'extra_data': {'query': query, 'result_count': len(crates)}}
        )
        return crates
