# sitemanifest/assets.py
"""
Asset plan: the include-globs handed to the deployment adapter.

Patterns are relative to the project root and normalized to a ``./``-prefixed
POSIX form so that ``src/a//b``, ``./src/a/b`` and ``src/./a/b`` count as one
entry. ``resolve_asset_files`` expands the plan on disk; files matched by more
than one overlapping pattern are packaged once.
"""

from __future__ import annotations

import glob
import posixpath
import re
from pathlib import Path
from typing import Iterable, List, Tuple

from .errors import InvalidAssetPatternError

_DRIVE = re.compile(r"^[A-Za-z]:")


def _check_balanced(pattern: str, raw: str) -> None:
    depth = 0
    for ch in pattern:
        if ch == "[":
            depth += 1
        elif ch == "]":
            depth -= 1
            if depth < 0:
                raise InvalidAssetPatternError(raw, "unbalanced ']'")
    if depth:
        raise InvalidAssetPatternError(raw, "unbalanced '['")
    if "{" in pattern or "}" in pattern:
        raise InvalidAssetPatternError(raw, "brace expansion is not supported")


def normalize_pattern(raw: str) -> str:
    """Return the canonical form of one include pattern or raise InvalidAssetPatternError."""
    p = raw.strip()
    if not p:
        raise InvalidAssetPatternError(raw, "empty pattern")
    if "\x00" in p:
        raise InvalidAssetPatternError(raw, "contains a NUL byte")
    if "\\" in p:
        raise InvalidAssetPatternError(raw, "use '/' as the path separator")
    if p.startswith("/") or _DRIVE.match(p):
        raise InvalidAssetPatternError(raw, "must be relative to the project root")
    if ".." in p.split("/"):
        raise InvalidAssetPatternError(raw, "escapes the project root")
    _check_balanced(p, raw)

    norm = posixpath.normpath(p)
    if norm == ".":
        raise InvalidAssetPatternError(raw, "selects the project root itself")
    return "./" + norm


def compile_asset_plan(patterns: Iterable[str]) -> Tuple[str, ...]:
    """Normalize every pattern and drop exact duplicates, keeping first-seen order."""
    plan: List[str] = []
    seen = set()
    for raw in patterns:
        norm = normalize_pattern(raw)
        if norm in seen:
            continue
        seen.add(norm)
        plan.append(norm)
    return tuple(plan)


def resolve_asset_files(plan: Iterable[str], root: str | Path) -> Tuple[str, ...]:
    """
    Expand a compiled plan against ``root``.
    Returns sorted POSIX paths (relative to root) of regular files, each once.
    """
    root = Path(root)
    found = set()
    for pattern in plan:
        rel = pattern[2:] if pattern.startswith("./") else pattern
        for match in glob.glob(rel, root_dir=root, recursive=True):
            if (root / match).is_file():
                found.add(Path(match).as_posix())
    return tuple(sorted(found))
