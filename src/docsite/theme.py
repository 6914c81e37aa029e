# docsite/theme.py
from __future__ import annotations
import base64
import mimetypes
from pathlib import Path
from typing import Iterable

import streamlit as st

from sitemanifest.schema import CompiledSite, LogoOptions
from .autostart_api import ensure_manifest_api
from .settings import flag
from .ui import inject_styles as base_styles

# ---- Theme tokens (edit here to restyle the whole site) ----------------------
THEME = {
    "font_family": "Rubik, system-ui, -apple-system, Segoe UI, Roboto",
    "bg": "#FBFAFC",            # page background
    "panel": "#FFFFFF",         # card background
    "primary": "#6C5FC7",       # links + active items
    "text": "#2B1D38",
    "muted": "#80708F",
    "radius": "10px",
}


def _read_custom_css(paths: Iterable[str]) -> str:
    chunks = []
    for p in paths:
        f = Path(p)
        if f.is_file():
            chunks.append(f.read_text(encoding="utf-8"))
        else:
            st.warning(f"⚠️ Custom CSS not found: {p}")
    return "\n".join(chunks)


def _inject_theme_css(custom_css: Iterable[str] = ()) -> None:
    """Define global CSS variables, then base component styles, then the site's own CSS."""
    st.markdown(
        f"""
        <style>
          :root {{
            --ds-bg: {THEME['bg']};
            --ds-panel: {THEME['panel']};
            --ds-primary: {THEME['primary']};
            --ds-text: {THEME['text']};
            --ds-muted: {THEME['muted']};
            --ds-radius: {THEME['radius']};
            --ds-font: {THEME['font_family']};
          }}
          html, body, [data-testid="stAppViewContainer"] {{
            background: var(--ds-bg) !important;
            color: var(--ds-text);
            font-family: var(--ds-font);
          }}
          .ds-header h1 {{ font-size:2.0rem; line-height:1.1; font-weight:800; margin:.25rem 0; }}
          .ds-header .tag {{ opacity:.75; margin-top:.15rem; }}
        </style>
        """,
        unsafe_allow_html=True,
    )
    base_styles()
    extra = _read_custom_css(custom_css)
    if extra:
        st.markdown(f"<style>{extra}</style>", unsafe_allow_html=True)


def logo_data_uri(logo: LogoOptions) -> str | None:
    """Inline the logo file as a data: URI so it renders without a static file server."""
    p = Path(logo.src)
    if not p.is_file():
        return None
    mime = mimetypes.guess_type(p.name)[0] or "application/octet-stream"
    return f"data:{mime};base64," + base64.b64encode(p.read_bytes()).decode("ascii")


def render_brand(site: CompiledSite) -> None:
    """Sidebar brand block: logo, title, or both (replacesTitle hides the title text)."""
    uri = logo_data_uri(site.logo) if site.logo else None
    img = f'<img src="{uri}" alt="{site.title}"/>' if uri else ""
    title = "" if (uri and site.logo.replaces_title) else f"<h3>{site.title}</h3>"
    st.sidebar.markdown(f'<div class="ds-brand">{img}{title}</div>', unsafe_allow_html=True)


def page_setup(site: CompiledSite) -> None:
    st.set_page_config(page_title=site.title, page_icon="📘", layout="wide")
    _inject_theme_css(site.custom_css)
    render_brand(site)

    # 🔌 Auto-start FastAPI (idempotent; cached)
    api = ensure_manifest_api()
    if flag("DOCS_API_SHOW_STATUS"):
        st.sidebar.caption(api.caption())


def page_header(title: str, tag: str = "") -> None:
    """Uniform page header for all non-landing pages."""
    st.markdown(
        f'<div class="ds-header"><h1>{title}</h1><div class="tag">{tag}</div></div>',
        unsafe_allow_html=True,
    )
