#!/usr/bin/env python3
"""
HTML to Markdown rendering for documentation fragments.

Built on markdownify and configured for rustdoc output. It emits ATX
headings and fenced code blocks that keep their language hints, and it
drops the page chrome (section anchors, copy buttons) that only makes sense
in a browser.
"""

from bs4 import BeautifulSoup
from markdownify import ATX, MarkdownConverter

LANGUAGE_CLASS_PREFIX = "language-"
KNOWN_LANGUAGES = frozenset({"rust", "toml", "sh", "bash", "shell", "json", "text", "c", "console"})
CHROME_SELECTORS = "a.anchor, a.doc-anchor, .hideme, button, script, style, .rustdoc-toolbar"


def code_language(element) -> str:
    """Pick a fence language from the classes on a ``<pre>`` or its ``<code>`` child."""
    classes = list(element.get('class') or [])
    code = element.find('code')
    if code is not None:
        classes.extend(code.get('class') or [])

    for cls in classes:
        if cls.startswith(LANGUAGE_CLASS_PREFIX):
            return cls[len(LANGUAGE_CLASS_PREFIX):]
    for cls in classes:
        if cls in KNOWN_LANGUAGES:
            return cls
    return ""


def _converter() -> MarkdownConverter:
    return MarkdownConverter(
        heading_style=ATX,
        bullets='-',
        code_language_callback=code_language,
        escape_underscores=False,
        escape_asterisks=False,
    )


def render(fragment_html: str) -> str:
    """Convert an HTML fragment to Markdown. Empty input gives empty output."""
    if not fragment_html or not fragment_html.strip():
        return ""

    soup = BeautifulSoup(fragment_html, 'html.parser')
    for node in soup.select(CHROME_SELECTORS):
        node.decompose()

    return _converter().convert_soup(soup).strip()
