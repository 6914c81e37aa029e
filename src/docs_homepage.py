# src/docs_homepage.py
import sys, os
import streamlit as st

sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))          # /app/src

from sitemanifest.errors import ConfigError
from docsite.settings import get_content_dir, load_site
from docsite.theme import page_header, page_setup
from docsite.ui import card
from docsite.nav import link_markdown, render_sidebar, route

# --- Compile the manifest; a broken manifest never renders a partial site ---
try:
    site = load_site()
except (ConfigError, RuntimeError) as e:
    st.set_page_config(page_title="Site configuration error", layout="centered")
    st.error(f"Site manifest is invalid: {e}")
    st.caption("Fix the manifest (DOCS_SITE_CONFIG or docsite/menu.py) or the DOCS_* settings and reload.")
    st.stop()

page_setup(site)
slug_map = render_sidebar(site)


def landing():
    page_header(site.title, "Workshop guides and reference links")
    sections = {}
    for r in site.routes:
        key = r.section[0] if r.section else ""
        sections.setdefault(key, []).append(r)

    cols = st.columns(max(1, len(sections)))
    for col, (name, entries) in zip(cols, sections.items()):
        with col:
            with card(name or "Pages", f"{len(entries)} entries"):
                for r in entries:
                    st.markdown(f"- {link_markdown(r)}")


if not route(slug_map, get_content_dir()):
    landing()
