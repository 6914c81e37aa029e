# sitemanifest/loader.py
from __future__ import annotations

import json
import tomllib
from pathlib import Path
from typing import Any, Dict

from pydantic import ValidationError

from .errors import ManifestLoadError
from .schema import SiteConfig


def _read(path: Path) -> Dict[str, Any]:
    suffix = path.suffix.lower()
    try:
        if suffix == ".json":
            with path.open("r", encoding="utf-8") as f:
                return json.load(f)
        if suffix == ".toml":
            with path.open("rb") as f:
                data = tomllib.load(f)
            # allow the manifest either at top level or under [site]
            return data.get("site", data)
    except FileNotFoundError:
        raise ManifestLoadError(str(path), "file not found") from None
    except UnicodeDecodeError as e:
        raise ManifestLoadError(str(path), f"not valid UTF-8: {e}") from e
    except OSError as e:
        raise ManifestLoadError(str(path), f"cannot read: {e.strerror or e}") from e
    except (json.JSONDecodeError, tomllib.TOMLDecodeError) as e:
        raise ManifestLoadError(str(path), f"cannot parse: {e}") from e
    raise ManifestLoadError(str(path), f"unsupported manifest type {suffix or '(none)'!r}; use .json or .toml")


def parse_site_config(data: Dict[str, Any], source: str = "<manifest>") -> SiteConfig:
    """Validate a raw mapping; schema problems become ManifestLoadError."""
    if not isinstance(data, dict):
        raise ManifestLoadError(source, "manifest must be a mapping")
    try:
        return SiteConfig.model_validate(data)
    except ValidationError as e:
        first = e.errors()[0]
        loc = ".".join(str(p) for p in first["loc"]) or "(root)"
        raise ManifestLoadError(source, f"{loc}: {first['msg']}") from e


def load_site_config(path: str | Path) -> SiteConfig:
    """Read a JSON or TOML manifest file into a SiteConfig."""
    p = Path(path)
    return parse_site_config(_read(p), str(p))
