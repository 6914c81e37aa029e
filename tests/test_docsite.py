from pathlib import Path

import pytest

from docsite import settings
from docsite.nav import _strip_frontmatter, find_page, link_markdown
from docsite.theme import logo_data_uri
from sitemanifest.compiler import DEFAULT_MAX_DEPTH
from sitemanifest.schema import LogoOptions, RouteEntry


def test_find_page_prefers_flat_markdown(tmp_path: Path) -> None:
    (tmp_path / "guides").mkdir()
    (tmp_path / "guides" / "index.mdx").write_text("# Guides", encoding="utf-8")
    (tmp_path / "quickstart.md").write_text("# Quick", encoding="utf-8")

    assert find_page("quickstart", tmp_path) == tmp_path / "quickstart.md"
    assert find_page("guides", tmp_path) == tmp_path / "guides" / "index.mdx"
    assert find_page("missing", tmp_path) is None


def test_frontmatter_stripped() -> None:
    assert _strip_frontmatter("---\ntitle: Quickstart\n---\n\n# Quickstart\n") == "# Quickstart\n"
    assert _strip_frontmatter("# No frontmatter") == "# No frontmatter"


def test_bundled_content_covers_every_internal_route(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DOCS_SITE_CONFIG", raising=False)
    content = Path(__file__).resolve().parents[1] / "content"
    site = settings.load_site()
    for r in site.internal_routes:
        assert find_page(r.slug, content) is not None, r.slug


def test_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DOCS_NAV_MAX_DEPTH", raising=False)
    assert settings.get_max_depth() == DEFAULT_MAX_DEPTH

    monkeypatch.setenv("DOCS_NAV_MAX_DEPTH", "5")
    monkeypatch.setenv("DOCS_CONTENT_DIR", "/srv/docs")
    assert settings.get_max_depth() == 5
    assert settings.get_content_dir() == Path("/srv/docs")

    monkeypatch.setenv("DOCS_NAV_MAX_DEPTH", "deep")
    with pytest.raises(RuntimeError):
        settings.get_max_depth()


def test_flag_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DOCS_API_SHOW_STATUS", "yes")
    assert settings.flag("DOCS_API_SHOW_STATUS") is True
    monkeypatch.setenv("DOCS_API_SHOW_STATUS", "off")
    assert settings.flag("DOCS_API_SHOW_STATUS") is False
    monkeypatch.delenv("DOCS_API_AUTOSTART", raising=False)
    assert settings.flag("DOCS_API_AUTOSTART", "1") is True


def test_logo_inlined_as_data_uri(tmp_path: Path) -> None:
    svg = tmp_path / "logo.svg"
    svg.write_text("<svg/>", encoding="utf-8")
    uri = logo_data_uri(LogoOptions(src=str(svg), replaces_title=True))
    assert uri is not None and uri.startswith("data:image/svg+xml;base64,")
    assert logo_data_uri(LogoOptions(src=str(tmp_path / "nope.png"))) is None


@pytest.mark.parametrize("raw", ["0", "-2"])
def test_non_positive_depth_rejected(monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
    monkeypatch.setenv("DOCS_NAV_MAX_DEPTH", raw)
    with pytest.raises(RuntimeError, match=">= 1"):
        settings.get_max_depth()


def test_link_markdown_for_internal_and_external_routes() -> None:
    internal = RouteEntry(label="Setup", href="/guides/setup/", external=False, slug="guides/setup")
    external = RouteEntry(label="Docs", href="https://docs.sentry.io/", external=True)
    assert link_markdown(internal) == "[Setup](?view=guides/setup)"
    assert link_markdown(external) == "[Docs ↗](https://docs.sentry.io/)"
