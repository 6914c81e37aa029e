# sitemanifest/errors.py
"""
Configuration errors raised while loading or compiling a site manifest.

Every error is a defect in the manifest itself, so nothing here is retried.
Each variant keeps enough context (path, slug, value) to point the author
at the offending node; ``str(err)`` is the message shown by the portal,
the API and the build command.
"""

from __future__ import annotations

from typing import Sequence


class ConfigError(Exception):
    """Base class for every manifest defect."""


class DuplicateSlugError(ConfigError):
    def __init__(self, slug: str, locations: Sequence[str]):
        self.slug = slug
        self.locations = tuple(locations)
        super().__init__(
            f"duplicate slug {slug!r}: used by " + " and ".join(self.locations)
        )


class InvalidLabelError(ConfigError):
    def __init__(self, path: str, message: str | None = None):
        self.path = path
        super().__init__(message or f"{path}: label must be a non-empty string")


class InvalidTargetError(InvalidLabelError):
    """An item must carry exactly one of ``slug`` or ``link``."""

    def __init__(self, path: str, reason: str):
        self.reason = reason
        super().__init__(path, f"{path}: {reason}")


class InvalidSlugError(ConfigError):
    def __init__(self, slug: str, path: str):
        self.slug = slug
        self.path = path
        super().__init__(f"{path}: slug {slug!r} is not a URL-path-safe identifier")


class InvalidLinkError(ConfigError):
    def __init__(self, value: str, path: str = ""):
        self.value = value
        self.path = path
        where = f"{path}: " if path else ""
        super().__init__(f"{where}link {value!r} must be an absolute http(s) URL")


class InvalidAssetPatternError(ConfigError):
    def __init__(self, pattern: str, reason: str = "malformed pattern"):
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"adapter.includeFiles: {pattern!r}: {reason}")


class NestingTooDeepError(ConfigError):
    def __init__(self, depth: int, limit: int, path: str = ""):
        self.depth = depth
        self.limit = limit
        self.path = path
        where = f"{path}: " if path else ""
        super().__init__(f"{where}group nested at depth {depth} exceeds limit {limit}")


class ManifestLoadError(ConfigError):
    """The manifest file could not be read, parsed or matched to the schema."""

    def __init__(self, source: str, detail: str):
        self.source = source
        self.detail = detail
        super().__init__(f"{source}: {detail}")
