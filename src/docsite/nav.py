# docsite/nav.py
import streamlit as st
from pathlib import Path
from typing import Dict, Iterable, Optional, Tuple
from urllib.parse import quote, unquote

from sitemanifest.schema import CompiledSite, RouteEntry

PAGE_SUFFIXES = (".md", ".mdx")


def _strip_frontmatter(text: str) -> str:
    if text.startswith("---"):
        end = text.find("\n---", 3)
        if end != -1:
            return text[end + 4:].lstrip("\n")
    return text


def find_page(slug: str, content_dir: Path) -> Optional[Path]:
    """content/<slug>.md(x), or content/<slug>/index.md(x) for folder pages."""
    for suffix in PAGE_SUFFIXES:
        for candidate in (content_dir / f"{slug}{suffix}", content_dir / slug / f"index{suffix}"):
            if candidate.is_file():
                return candidate
    return None


def link_markdown(r: RouteEntry) -> str:
    """Markdown link for a route; internal pages go through ?view=<slug>."""
    if r.external:
        return f"[{r.label} ↗]({r.href})"
    return f"[{r.label}](?view={quote(r.slug)})"


def _walk(routes: Iterable[RouteEntry], slug_map: Dict[str, RouteEntry]) -> None:
    """Render sidebar sections and links; fill slug->route for internal pages."""
    shown: Tuple[str, ...] = ()
    for r in routes:
        # section headers: print only the part of the trail that changed
        common = 0
        while common < min(len(shown), len(r.section)) and shown[common] == r.section[common]:
            common += 1
        for depth in range(common, len(r.section)):
            pad = "&nbsp;" * (depth * 2)
            st.sidebar.markdown(f"{pad}**{r.section[depth]}**")
        shown = r.section

        pad = "&nbsp;" * (len(r.section) * 2)
        st.sidebar.markdown(f"{pad}- {link_markdown(r)}")
        if not r.external:
            slug_map[r.slug] = r


def render_sidebar(site: CompiledSite) -> Dict[str, RouteEntry]:
    slug_map: Dict[str, RouteEntry] = {}
    _walk(site.routes, slug_map)
    if site.social:
        st.sidebar.markdown(" · ".join(f"[{s.name}]({s.href})" for s in site.social))
    return slug_map


def route(slug_map: Dict[str, RouteEntry], content_dir: Path) -> bool:
    """Render the page named by ?view=; return True if a routed page was rendered."""
    view = unquote(st.query_params.get("view", "")).strip("/")
    if not view:
        return False

    target = slug_map.get(view)
    if not target:
        st.error(f"Unknown page: {view}")
        return True

    page = find_page(target.slug, content_dir)
    if page is None:
        st.error(f"No content for '{target.label}' (looked for {content_dir / target.slug}.md)")
        return True

    st.session_state["ROUTED"] = True
    st.markdown(_strip_frontmatter(page.read_text(encoding="utf-8")))
    st.sidebar.markdown("[← Back to Home](./)")
    return True
