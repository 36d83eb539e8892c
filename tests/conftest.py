"""Shared fixtures: docs.rs page fixtures and an in-memory scraper."""

from __future__ import annotations

import logging

import pytest

from docs_rs.registry import CrateSummary, build_search_params
from docs_rs.scraper import FetchError


STRUCT_PAGE = """
<!DOCTYPE html>
<html lang="en"><head><title>Mutex in tokio::sync - Rust</title></head>
<body class="rustdoc struct">
<nav class="sidebar"><a href="../index.html">tokio</a></nav>
<main><div class="width-limiter">
<section id="main-content" class="content">
<div class="main-heading"><h1>Struct <span class="struct">Mutex</span></h1></div>
<pre class="rust item-decl"><code>pub struct Mutex&lt;T: ?Sized&gt; { /* private fields */ }</code></pre>
<details class="toggle top-doc" open><summary class="hideme"><span>Expand description</span></summary>
<div class="docblock"><p>An asynchronous <code>Mutex</code>-like type.</p>
<h2 id="examples"><a class="doc-anchor" href="#examples">§</a>Examples</h2>
<pre class="rust rust-example-rendered"><code>let data = Mutex::new(0);</code></pre>
</div></details>
</section>
</div></main>
</body></html>
"""

MINIMAL_FN_PAGE = """
<html><body class="rustdoc fn">
<pre class="rust item-decl"><code>pub fn spawn&lt;F&gt;(future: F) -&gt; JoinHandle&lt;F::Output&gt;</code></pre>
<div class="docblock"><p>Spawns a new asynchronous task.</p></div>
</body></html>
"""

ALTERNATE_DECL_PAGE = """
<html><body>
<div class="rustdoc-main"><pre class="rust item-decl"><code>pub const MAX_PERMITS: usize</code></pre></div>
</body></html>
"""

EMPTY_PAGE = """
<html><body><div class="wrapper"><p>Nothing documented here.</p></div></body></html>
"""

CRATE_PAGE = """
<html><body class="rustdoc mod crate">
<main><section id="main-content" class="content">
<div class="main-heading"><h1>Crate <span>tokio</span></h1></div>
<details class="toggle top-doc" open><summary class="hideme"><span>Expand description</span></summary>
<div class="docblock">
<p>A runtime for writing reliable network applications.</p>
<h2 id="getting-started"><a class="doc-anchor" href="#getting-started">§</a>Getting started</h2>
<pre class="language-toml"><code>[dependencies]
tokio = { version = "1", features = ["full"] }</code></pre>
<p>Then spawn tasks with <code>tokio::spawn</code>.</p>
</div></details>
<h2 id="modules" class="section-header">Modules</h2>
<ul class="item-table"><li><div class="item-name"><a class="mod" href="sync/index.html">sync</a></div></li></ul>
</section></main>
</body></html>
"""

ALL_ITEMS_PAGE = """
<html><body class="rustdoc mod">
<nav class="sidebar"><a href="struct.Sidebar.html">Sidebar</a></nav>
<main><section id="main-content" class="content">
<h1>List of all items</h1>
<h3 id="structs"><a href="#structs">Structs</a></h3>
<ul class="all-items">
<li><a href="sync/struct.Mutex.html">sync::Mutex</a></li>
<li><a href="sync/struct.RwLock.html">sync::RwLock</a></li>
<li><a href="runtime/struct.Runtime.html">runtime::Runtime</a></li>
</ul>
<h3 id="traits">Traits</h3>
<ul class="all-items"><li><a href="io/trait.AsyncRead.html">io::AsyncRead</a></li></ul>
<h3 id="functions">Functions</h3>
<ul class="all-items">
<li><a href="fn.spawn.html">spawn</a></li>
<li><a href="task/fn.spawn_blocking.html">task::spawn_blocking</a></li>
</ul>
<h3 id="enums">Enums</h3>
<ul class="all-items"><li><a href="sync/mpsc/error/enum.TryRecvError.html">sync::mpsc::error::TryRecvError</a></li></ul>
<h3 id="types">Type Aliases</h3>
<ul class="all-items"><li><a href="io/type.Result.html">io::Result</a></li></ul>
<h3 id="macros">Macros</h3>
<ul class="all-items"><li><a href="macro.select.html">select</a></li></ul>
<h3 id="constants">Constants</h3>
<ul class="all-items"><li><a href="sync/constant.MAX_PERMITS.html">sync::MAX_PERMITS</a></li></ul>
<h3 id="statics">Statics</h3>
<ul class="all-items"><li><a href="static.GLOBAL.html">GLOBAL</a></li></ul>
<h3 id="other">Other</h3>
<ul class="all-items">
<li><a href="sync/mutex/struct.Mutex.html">sync::Mutex</a></li>
<li><a href="sync/index.html">sync</a></li>
<li><a href="">empty::Target</a></li>
<li><a href="struct.Blank.html">   </a></li>
<li><a href="https://docs.rs/bytes/latest/bytes/struct.Bytes.html">bytes::Bytes</a></li>
</ul>
</section></main>
</body></html>
"""

EXPECTED_ALL_ITEMS = [
    ("sync::Mutex", "struct"),
    ("sync::RwLock", "struct"),
    ("runtime::Runtime", "struct"),
    ("io::AsyncRead", "trait"),
    ("spawn", "function"),
    ("task::spawn_blocking", "function"),
    ("sync::mpsc::error::TryRecvError", "enum"),
    ("io::Result", "type"),
    ("select", "macro"),
    ("sync::MAX_PERMITS", "constant"),
    ("GLOBAL", "static"),
    ("bytes::Bytes", "struct"),
]


class FakeScraper:
    """In-memory stand-in for DocsRsScraper serving fixture pages by URL."""

    def __init__(self, pages=None, crates=None, error=None):
        self.pages = pages or {}
        self.crates = crates or []
        self.error = error
        self.requested = []

    async def fetch_html(self, url, logger, ctx=None):
        self.requested.append(url)
        if self.error is not None:
            raise self.error
        if url not in self.pages:
            raise FetchError(f"HTTP 404 from {url}")
        return self.pages[url]

    async def search_crates(self, query, logger, per_page=None, sort=None, ctx=None):
        self.requested.append(build_search_params(query, per_page, sort))
        if self.error is not None:
            raise self.error
        return self.crates


@pytest.fixture
def logger() -> logging.Logger:
    return logging.getLogger("docs_rs.tests")


@pytest.fixture
def sample_crates() -> list[CrateSummary]:
    return [
        CrateSummary(
            name="serde",
            description="A generic serialization/deserialization framework",
            downloads=512345678,
            version="1.0.210",
            documentation="https://docs.rs/serde",
        ),
        CrateSummary(
            name="serde_tiny",
            description="No description available",
            downloads=42,
            version="0.1.0",
            documentation=None,
        ),
    ]
