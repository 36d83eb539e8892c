#!/usr/bin/env python3
"""
URL resolution for docs.rs pages.

Maps crate and item identifiers onto the docs.rs URL scheme. Everything
here is pure string work; nothing touches the network.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

DOCS_RS_BASE_URL = "https://docs.rs"
DEFAULT_VERSION = "latest"
PATH_SEPARATOR = "::"
MODULE_KIND = "module"


@dataclass(frozen=True)
class CrateIdentifier:
    """A crate name plus a version, where "latest" lets docs.rs redirect to the newest release."""

    name: str
    version: str = DEFAULT_VERSION

    @classmethod
    def create(cls, name: str, version: Optional[str] = None) -> "CrateIdentifier":
        return cls(name=name.strip(), version=(version or "").strip() or DEFAULT_VERSION)


@dataclass(frozen=True)
class ItemIdentifier:
    """
    A documented item inside a crate.

    ``item_path`` holds the full path segments, e.g. ``("tokio", "sync", "Mutex")``.
    The last segment is the item's simple name and the rest is its module path.
    """

    crate: CrateIdentifier
    item_type: str
    item_path: Tuple[str, ...]

    def __post_init__(self):
        if not self.item_path:
            raise ValueError("item path must contain at least one segment")

    @classmethod
    def from_path(cls, crate: CrateIdentifier, item_type: str, item_path: str) -> "ItemIdentifier":
        """Build an identifier from a ``::``-separated path such as ``tokio::sync::Mutex``."""
        segments = tuple(part.strip() for part in item_path.split(PATH_SEPARATOR) if part.strip())
        return cls(crate=crate, item_type=item_type.strip(), item_path=segments)

    @property
    def name(self) -> str:
        return self.item_path[-1]

    @property
    def module_path(self) -> Tuple[str, ...]:
        return self.item_path[:-1]

    @property
    def qualified_name(self) -> str:
        return PATH_SEPARATOR.join(self.item_path)


def _version_root(crate: CrateIdentifier) -> str:
    return f"{DOCS_RS_BASE_URL}/{crate.name}/{crate.version}"


def crate_docs_root(crate: CrateIdentifier) -> str:
    """Directory URL every relative link on a crate's pages is relative to."""
    return f"{_version_root(crate)}/{crate.name}/"


def resolve_crate_url(crate: CrateIdentifier) -> str:
    return f"{crate_docs_root(crate)}index.html"


def resolve_all_items_url(crate: CrateIdentifier) -> str:
    return f"{crate_docs_root(crate)}all.html"


def resolve_item_url(item: ItemIdentifier) -> str:
    """
    Resolve the page documenting ``item``.

    Modules live in their own directory (``.../tokio/sync/index.html``);
    every other kind is a ``{kind}.{name}.html`` leaf inside its module
    directory. A bare name with no module prefix (``spawn``) is a leaf in the
    crate's own documentation root.
    """
    leaf = f"{item.item_type}.{item.name}.html"
    if item.item_type == MODULE_KIND:
        segments = [_version_root(item.crate), *item.item_path, "index.html"]
    elif not item.module_path:
        return crate_docs_root(item.crate) + leaf
    else:
        segments = [_version_root(item.crate), *item.module_path, leaf]
    return "/".join(segments)
