# docsite/autostart_api.py
"""
Background launcher for the manifest API (``docsite.api:app``).

The portal calls ``ensure_manifest_api()`` once per server process. The
manifest is compiled locally first: a manifest the API could only answer
with 422 is reported instead of launched. Once the API answers, its
``/routes`` and ``/assets`` counts are compared with the local compile so a
server left running on an older manifest shows up as ``stale``.

Overrides (secrets or env):
  DOCS_API_AUTOSTART=1|0
  DOCS_API_APP=docsite.api:app
  DOCS_API_HOST=127.0.0.1
  DOCS_API_PORT=7000
  DOCS_API_RELOAD=0|1
"""

from __future__ import annotations

import atexit
import contextlib
import os
import subprocess
import sys
import time
from dataclasses import dataclass
from typing import Optional, Tuple

import requests
import streamlit as st

from sitemanifest.errors import ConfigError
from sitemanifest.schema import CompiledSite
from .settings import flag, load_site, sget

LOG_PATH = os.path.join("logs", "uvicorn.log")


@dataclass(frozen=True)
class ApiStatus:
    status: str  # disabled | manifest-error | already-running | stale | started | failed
    url: Optional[str] = None
    pid: Optional[int] = None
    routes: Optional[int] = None
    assets: Optional[int] = None
    detail: str = ""

    def caption(self) -> str:
        if self.status == "disabled":
            return "API: disabled"
        if self.status == "manifest-error":
            return f"API: not started ({self.detail})"
        text = f"API: {self.status} → {self.url}"
        if self.routes is not None:
            text += f" · {self.routes} routes, {self.assets} asset patterns"
        return text


def api_url() -> str:
    host = sget("DOCS_API_HOST") or "127.0.0.1"
    port = int(sget("DOCS_API_PORT") or "7000")
    return f"http://{host}:{port}"


def _healthy(url: str, timeout: float = 0.5) -> bool:
    try:
        return requests.get(f"{url}/health", timeout=timeout).ok
    except requests.RequestException:
        return False


def manifest_counts(url: str, timeout: float = 2.0) -> Optional[Tuple[int, int]]:
    """(route count, asset pattern count) as served by the API, or None if it can't say."""
    try:
        routes = requests.get(f"{url}/routes", timeout=timeout)
        assets = requests.get(f"{url}/assets", timeout=timeout)
        routes.raise_for_status()
        assets.raise_for_status()
        return routes.json()["count"], len(assets.json()["includeFiles"])
    except (requests.RequestException, ValueError, KeyError):
        return None


def _wait_for_manifest(url: str, timeout: float = 10.0) -> Optional[Tuple[int, int]]:
    deadline = time.time() + timeout
    while time.time() < deadline:
        counts = manifest_counts(url)
        if counts is not None:
            return counts
        time.sleep(0.15)
    return None


def _spawn(url: str) -> subprocess.Popen:
    host, port = url.rsplit("//", 1)[1].rsplit(":", 1)
    cmd = [
        sys.executable, "-m", "uvicorn", sget("DOCS_API_APP") or "docsite.api:app",
        "--host", host, "--port", port,
        "--workers", "1", "--log-level", "info",
    ]
    if flag("DOCS_API_RELOAD"):
        cmd.append("--reload")

    os.makedirs(os.path.dirname(LOG_PATH), exist_ok=True)
    log_file = open(LOG_PATH, "a", encoding="utf-8")

    # the API imports docsite/sitemanifest from src/
    env = dict(os.environ)
    src_dir = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
    env["PYTHONPATH"] = os.pathsep.join(p for p in (src_dir, env.get("PYTHONPATH")) if p)

    proc = subprocess.Popen(cmd, stdout=log_file, stderr=log_file, close_fds=True, env=env)

    def _cleanup():
        with contextlib.suppress(Exception):
            proc.terminate()
        log_file.close()
    atexit.register(_cleanup)
    return proc


def _status_for(site: CompiledSite, url: str, counts: Tuple[int, int], status: str, pid: Optional[int] = None) -> ApiStatus:
    expected = (len(site.routes), len(site.asset_plan))
    if counts != expected:
        return ApiStatus(
            "stale", url, pid, *counts,
            detail=f"serving {counts[0]} routes / {counts[1]} assets, manifest has {expected[0]} / {expected[1]}",
        )
    return ApiStatus(status, url, pid, *counts)


def start_manifest_api() -> ApiStatus:
    if not flag("DOCS_API_AUTOSTART", "1"):
        return ApiStatus("disabled")

    try:
        site = load_site()
    except (ConfigError, RuntimeError) as e:
        return ApiStatus("manifest-error", detail=str(e))

    url = api_url()
    if _healthy(url):
        counts = manifest_counts(url)
        if counts is None:
            return ApiStatus("already-running", url, detail="manifest endpoints unavailable")
        return _status_for(site, url, counts, "already-running")

    proc = _spawn(url)
    counts = _wait_for_manifest(url)
    if counts is None:
        st.error(f"Manifest API failed to start on {url}. Check {LOG_PATH} and verify DOCS_API_APP (module:app).")
        return ApiStatus("failed", url, proc.pid, detail=LOG_PATH)
    return _status_for(site, url, counts, "started", proc.pid)


@st.cache_resource(show_spinner=False)
def ensure_manifest_api() -> ApiStatus:
    """Idempotent per server process."""
    return start_manifest_api()
