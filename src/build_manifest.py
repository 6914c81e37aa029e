#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from sitemanifest.assets import resolve_asset_files
from sitemanifest.compiler import DEFAULT_MAX_DEPTH, compile_site
from sitemanifest.errors import ConfigError
from sitemanifest.loader import load_site_config, parse_site_config


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Validate a docs site manifest and write the compiled site.")
    p.add_argument("--config", type=Path, default=None, help="Manifest (.json/.toml). Default: bundled site.")
    p.add_argument("--root", type=Path, default=Path("."), help="Project root for asset globs.")
    p.add_argument("--max-depth", type=int, default=DEFAULT_MAX_DEPTH, help="Sidebar nesting limit.")
    p.add_argument("--output", type=Path, default=None, help="Write compiled site JSON here.")
    p.add_argument(
        "--resolve",
        action="store_true",
        help="Also expand the asset plan and list the matched files.",
    )
    return p


def _load(config: Path | None):
    if config is not None:
        return load_site_config(config)
    from docsite.menu import SITE

    return parse_site_config(SITE, "docsite.menu.SITE")


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        site = compile_site(_load(args.config), max_depth=args.max_depth)
    except ConfigError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    payload = site.model_dump(mode="json")
    files: tuple[str, ...] = ()
    if args.resolve:
        files = resolve_asset_files(site.asset_plan, args.root)
        payload["files"] = list(files)

    if args.output is not None:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")

    internal = len(site.internal_routes)
    summary = (
        f"compiled {site.title!r}: {len(site.routes)} routes "
        f"({internal} internal, {len(site.routes) - internal} external), "
        f"{len(site.asset_plan)} asset patterns"
    )
    if args.resolve:
        summary += f", {len(files)} files"
    if args.output is not None:
        summary += f" -> {args.output}"
    print(summary)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
