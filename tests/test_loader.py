import json
from pathlib import Path

import pytest

from sitemanifest.compiler import compile_site
from sitemanifest.errors import ManifestLoadError
from sitemanifest.loader import load_site_config, parse_site_config
from sitemanifest.schema import NavigationGroup, NavigationItem

TOML = """
[site]
title = "Sentry Build"
customCss = ["./src/styles/custom.css"]

[site.logo]
src = "./src/assets/placeholder.svg"
replacesTitle = true

[[site.sidebar]]
label = "Workshop"
items = [
  { label = "Quickstart", slug = "quickstart" },
  { label = "Advanced", items = [ { label = "Tracing", slug = "tracing" } ] },
]

[[site.sidebar]]
label = "Resources"
items = [ { label = "Docs", link = "https://docs.sentry.io/" } ]

[site.adapter]
imageService = true
includeFiles = ["./src/assets/**/*"]
"""


def test_load_toml_with_camel_case_keys(tmp_path: Path) -> None:
    p = tmp_path / "site.toml"
    p.write_text(TOML, encoding="utf-8")
    config = load_site_config(p)

    assert config.logo is not None and config.logo.replaces_title is True
    assert config.custom_css == ("./src/styles/custom.css",)
    assert config.adapter.image_service is True
    workshop = config.sidebar[0]
    assert isinstance(workshop.items[0], NavigationItem)
    assert isinstance(workshop.items[1], NavigationGroup)

    site = compile_site(config)
    assert [r.slug for r in site.routes] == ["quickstart", "tracing", None]


def test_load_json(tmp_path: Path) -> None:
    p = tmp_path / "site.json"
    p.write_text(
        json.dumps({"title": "T", "sidebar": [{"label": "G", "items": [{"label": "A", "slug": "a"}]}]}),
        encoding="utf-8",
    )
    assert load_site_config(p).sidebar[0].items[0].slug == "a"


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ManifestLoadError, match="file not found"):
        load_site_config(tmp_path / "nope.json")


def test_unsupported_suffix(tmp_path: Path) -> None:
    p = tmp_path / "site.yaml"
    p.write_text("title: x", encoding="utf-8")
    with pytest.raises(ManifestLoadError, match="unsupported"):
        load_site_config(p)


def test_unparsable_json(tmp_path: Path) -> None:
    p = tmp_path / "site.json"
    p.write_text("{not json", encoding="utf-8")
    with pytest.raises(ManifestLoadError, match="cannot parse"):
        load_site_config(p)


def test_schema_violation_reports_location() -> None:
    with pytest.raises(ManifestLoadError) as exc:
        parse_site_config({"sidebar": []}, "inline")
    assert "title" in str(exc.value)
    assert exc.value.source == "inline"


def test_unknown_keys_rejected() -> None:
    with pytest.raises(ManifestLoadError):
        parse_site_config({"title": "T", "sidebar": [{"label": "G", "items": [], "collapsed": True}]})


def test_non_mapping_rejected() -> None:
    with pytest.raises(ManifestLoadError, match="mapping"):
        parse_site_config(["title"])  # type: ignore[arg-type]


@pytest.mark.parametrize("name, raw", [("site.json", b'{"title": "\xff"}'), ("site.toml", b'title = "\xff"')])
def test_non_utf8_manifest(tmp_path: Path, name: str, raw: bytes) -> None:
    p = tmp_path / name
    p.write_bytes(raw)
    with pytest.raises(ManifestLoadError, match="not valid UTF-8"):
        load_site_config(p)


def test_directory_instead_of_file(tmp_path: Path) -> None:
    d = tmp_path / "site.json"
    d.mkdir()
    with pytest.raises(ManifestLoadError, match="cannot read"):
        load_site_config(d)
