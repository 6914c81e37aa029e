# docsite/settings.py
"""
Settings helper + site loader.

Resolution order for settings:
1) st.secrets (Streamlit Cloud / local .streamlit/secrets.toml)
2) Environment variables (.env, CI, Docker)

Recognized names:
- DOCS_SITE_CONFIG    path to a .json/.toml manifest (default: bundled docsite.menu.SITE)
- DOCS_CONTENT_DIR    directory with <slug>.md pages (default: content)
- DOCS_NAV_MAX_DEPTH  sidebar nesting limit (default: 3)
"""

from __future__ import annotations

import os
from pathlib import Path

import streamlit as st
from dotenv import load_dotenv

from sitemanifest.compiler import DEFAULT_MAX_DEPTH, compile_site
from sitemanifest.loader import load_site_config, parse_site_config
from sitemanifest.schema import CompiledSite, SiteConfig

from .menu import SITE

# local .env (no-op when absent)
load_dotenv()


def sget(*names: str) -> str | None:
    """
    Return the first non-empty value among names,
    checking Streamlit secrets first, then environment.
    """
    for n in names:
        try:
            if n in st.secrets:
                v = st.secrets[n]
                if v:
                    return str(v)
        except Exception:
            # no secrets.toml outside a Streamlit deployment
            pass
        v = os.getenv(n)
        if v:
            return v
    return None


def flag(name: str, default: str = "0") -> bool:
    return (sget(name) or default).lower() in ("1", "true", "yes", "y")


def get_max_depth() -> int:
    raw = sget("DOCS_NAV_MAX_DEPTH")
    if not raw:
        return DEFAULT_MAX_DEPTH
    try:
        depth = int(raw)
    except ValueError:
        depth = 0
    if depth < 1:
        raise RuntimeError(f"DOCS_NAV_MAX_DEPTH must be an integer >= 1, got {raw!r}")
    return depth


def get_content_dir() -> Path:
    return Path(sget("DOCS_CONTENT_DIR") or "content")


def load_config() -> SiteConfig:
    """Manifest from DOCS_SITE_CONFIG, else the bundled one."""
    path = sget("DOCS_SITE_CONFIG")
    if path:
        return load_site_config(path)
    return parse_site_config(SITE, "docsite.menu.SITE")


def load_site() -> CompiledSite:
    """Load and compile the configured manifest. Raises ConfigError on any defect."""
    return compile_site(load_config(), max_depth=get_max_depth())
