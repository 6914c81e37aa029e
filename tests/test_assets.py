from pathlib import Path

import pytest

from sitemanifest.assets import compile_asset_plan, normalize_pattern, resolve_asset_files
from sitemanifest.errors import InvalidAssetPatternError


def _touch(root: Path, rel: str) -> None:
    p = root / rel
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_bytes(b"x")


def test_equivalent_spellings_collapse() -> None:
    plan = compile_asset_plan(["src/assets//img/*.png", "./src/assets/img/*.png", " ./src/./assets/img/*.png "])
    assert plan == ("./src/assets/img/*.png",)


def test_first_seen_order_kept() -> None:
    plan = compile_asset_plan(["./b/*", "./a/*", "./b/*"])
    assert plan == ("./b/*", "./a/*")


def test_overlapping_patterns_are_not_merged_in_plan() -> None:
    plan = compile_asset_plan(["./src/assets/**/*", "./src/assets/img/**/*"])
    assert len(plan) == 2


@pytest.mark.parametrize(
    "pattern, reason",
    [
        ("", "empty"),
        ("   ", "empty"),
        ("/etc/passwd", "relative"),
        ("C:/assets/*", "relative"),
        ("./../secrets/*", "escapes"),
        ("src\\assets\\*", "separator"),
        ("./src/[ab/*", "unbalanced"),
        ("./src/ab]/*", "unbalanced"),
        ("./src/*.{png,gif}", "brace"),
        ("./", "root"),
    ],
)
def test_malformed_patterns(pattern: str, reason: str) -> None:
    with pytest.raises(InvalidAssetPatternError) as exc:
        normalize_pattern(pattern)
    assert exc.value.pattern == pattern
    assert reason in exc.value.reason


def test_character_class_allowed() -> None:
    assert normalize_pattern("img/[ab]*.png") == "./img/[ab]*.png"


def test_resolve_packages_overlapping_matches_once(tmp_path: Path) -> None:
    _touch(tmp_path, "src/assets/logo.svg")
    _touch(tmp_path, "src/assets/img/a.gif")
    _touch(tmp_path, "src/assets/img/nested/b.png")
    _touch(tmp_path, "src/other/c.txt")

    plan = compile_asset_plan(
        ["./src/assets/**/*", "./src/assets/img/**/*", "./src/assets/img/**/*.gif", "./src/assets/logo.svg"]
    )
    files = resolve_asset_files(plan, tmp_path)
    assert files == (
        "src/assets/img/a.gif",
        "src/assets/img/nested/b.png",
        "src/assets/logo.svg",
    )


def test_resolve_skips_directories_and_missing(tmp_path: Path) -> None:
    (tmp_path / "empty").mkdir()
    assert resolve_asset_files(compile_asset_plan(["./empty", "./missing/**/*"]), tmp_path) == ()
