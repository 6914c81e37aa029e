# sitemanifest/compiler.py
"""
Compile a declared ``SiteConfig`` into an immutable ``CompiledSite``.

Single depth-first pass over the sidebar in declaration order. The first
defect found is raised as a ``ConfigError`` subclass; there is no partial
result. The function reads nothing but its arguments and keeps no state,
so calling it twice on the same config yields equal results.
"""

from __future__ import annotations

import re
from typing import Dict, List, Tuple
from urllib.parse import urlparse

from .assets import compile_asset_plan
from .errors import (
    DuplicateSlugError,
    InvalidLabelError,
    InvalidLinkError,
    InvalidSlugError,
    InvalidTargetError,
    NestingTooDeepError,
)
from .schema import (
    CompiledSite,
    NavigationGroup,
    NavigationItem,
    NavigationNode,
    RouteEntry,
    SiteConfig,
    SocialLink,
)

DEFAULT_MAX_DEPTH = 3
INDEX_SLUG = "index"

_SLUG_SEGMENT = re.compile(r"^[A-Za-z0-9._-]+$")


def _clean_label(label: str, path: str) -> str:
    text = label.strip() if isinstance(label, str) else ""
    if not text:
        raise InvalidLabelError(path)
    return text


def _clean_slug(slug: str, path: str) -> str:
    s = slug.strip().strip("/")
    segments = s.split("/")
    if not s or any(seg in (".", "..") or not _SLUG_SEGMENT.match(seg) for seg in segments):
        raise InvalidSlugError(slug, path)
    return s


def check_link(value: str, path: str = "") -> str:
    """Accept only absolute http(s) URLs with a host."""
    try:
        parsed = urlparse(value)
        host = parsed.hostname
    except ValueError:
        # e.g. unterminated IPv6 authority "http://[::1"
        raise InvalidLinkError(value, path) from None
    if parsed.scheme not in ("http", "https") or not host or value != value.strip():
        raise InvalidLinkError(value, path)
    return value


def _base_prefix(base: str) -> str:
    b = base.strip().strip("/")
    return f"/{b}" if b else ""


def href_for(slug: str, base: str = "/") -> str:
    prefix = _base_prefix(base)
    if slug == INDEX_SLUG:
        return f"{prefix}/"
    return f"{prefix}/{slug}/"


class _Walk:
    """Per-call traversal state; discarded when compile_site returns."""

    def __init__(self, base: str, max_depth: int):
        self.base = base
        self.max_depth = max_depth
        self.routes: List[RouteEntry] = []
        self.owners: Dict[str, str] = {}  # slug -> location of first owner

    def group(self, group: NavigationGroup, depth: int, section: Tuple[str, ...], path: str) -> None:
        if depth > self.max_depth:
            raise NestingTooDeepError(depth, self.max_depth, path)
        label = _clean_label(group.label, path)
        for i, child in enumerate(group.items):
            self.node(child, depth, (*section, label), f"{path}.items[{i}]")

    def node(self, node: NavigationNode, depth: int, section: Tuple[str, ...], path: str) -> None:
        if isinstance(node, NavigationGroup):
            self.group(node, depth + 1, section, path)
        elif isinstance(node, NavigationItem):
            self.item(node, section, path)
        else:
            raise TypeError(f"{path}: unexpected navigation node {type(node).__name__}")

    def item(self, item: NavigationItem, section: Tuple[str, ...], path: str) -> None:
        label = _clean_label(item.label, path)
        has_slug, has_link = item.slug is not None, item.link is not None
        if has_slug and has_link:
            raise InvalidTargetError(path, "item sets both 'slug' and 'link'; use exactly one")
        if not has_slug and not has_link:
            raise InvalidTargetError(path, "item needs a 'slug' or a 'link'")

        if has_link:
            self.routes.append(
                RouteEntry(label=label, href=check_link(item.link, path), external=True, section=section)
            )
            return

        slug = _clean_slug(item.slug, path)
        where = f"{path} ({label!r})"
        if slug in self.owners:
            raise DuplicateSlugError(slug, (self.owners[slug], where))
        self.owners[slug] = where
        self.routes.append(
            RouteEntry(label=label, href=href_for(slug, self.base), external=False, slug=slug, section=section)
        )


def compile_site(config: SiteConfig, *, max_depth: int = DEFAULT_MAX_DEPTH) -> CompiledSite:
    """
    Validate ``config`` and return its routing table and asset plan.

    Raises the first ConfigError found: NestingTooDeepError, InvalidLabelError
    (InvalidTargetError for slug/link misuse), InvalidSlugError,
    DuplicateSlugError, InvalidLinkError or InvalidAssetPatternError.
    """
    if max_depth < 1:
        raise ValueError("max_depth must be at least 1")

    title = _clean_label(config.title, "title")

    walk = _Walk(config.base, max_depth)
    for i, group in enumerate(config.sidebar):
        walk.group(group, 1, (), f"sidebar[{i}]")

    social = tuple(
        SocialLink(name=name, href=check_link(url, f"social.{name}"))
        for name, url in config.social.items()
    )

    return CompiledSite(
        title=title,
        logo=config.logo,
        social=social,
        custom_css=config.custom_css,
        routes=tuple(walk.routes),
        asset_plan=compile_asset_plan(config.adapter.include_files),
        adapter_target=config.adapter.target,
        image_service=config.adapter.image_service,
    )
