# docsite/ui.py
from __future__ import annotations
import streamlit as st
from contextlib import contextmanager


def inject_styles() -> None:
    """Base styles shared by all pages (sidebar + cards)."""
    st.markdown(
        """
        <style>
          /* Card header/subtitle (the box is provided by st.container(border=True)) */
          .ds-card-header { font-weight: 700; margin: .15rem 0 .35rem; }
          .ds-card-sub { color: var(--ds-muted); font-size:.95rem; margin-top:-.2rem; margin-bottom:.35rem; }

          /* Sidebar look */
          [data-testid="stSidebar"] { padding-top: .8rem; }
          [data-testid="stSidebar"] a { text-decoration: none; color: var(--ds-text); }
          [data-testid="stSidebar"] a:hover { color: var(--ds-primary); }
          .ds-brand { display:flex; align-items:center; gap:.5rem; margin-bottom:.75rem; }
          .ds-brand img { max-height: 40px; }
          .ds-brand h3 { margin: 0; font-size: 1.1rem; letter-spacing:.02em; }
        </style>
        """,
        unsafe_allow_html=True,
    )


@contextmanager
def card(title: str, subtitle: str | None = None, *, border: bool = True):
    """
    Consistent panel used across pages.
    Uses Streamlit's bordered container to avoid stray empty <div>s.
    """
    with st.container(border=border):
        st.markdown(f'<div class="ds-card-header">{title}</div>', unsafe_allow_html=True)
        if subtitle:
            st.markdown(f'<div class="ds-card-sub">{subtitle}</div>', unsafe_allow_html=True)
        yield
