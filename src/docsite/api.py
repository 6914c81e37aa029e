# docsite/api.py
from __future__ import annotations
from datetime import datetime, timezone

from fastapi import FastAPI, HTTPException

from sitemanifest.errors import ConfigError
from sitemanifest.schema import CompiledSite
from .settings import load_site

app = FastAPI(title="Docs Manifest API")


def _now() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def _compiled() -> CompiledSite:
    # recompiled per request so manifest edits show up without a restart
    try:
        return load_site()
    except (ConfigError, RuntimeError) as e:
        raise HTTPException(status_code=422, detail=str(e)) from e


@app.get("/health")
def root_health():
    return {"ok": True, "service": "docs-manifest-api", "time": _now()}


@app.get("/site")
def site():
    return _compiled().model_dump(mode="json")


@app.get("/routes")
def routes():
    compiled = _compiled()
    return {
        "ok": True,
        "count": len(compiled.routes),
        "routes": [
            {"label": r.label, "href": r.href, "external": r.external, "section": list(r.section)}
            for r in compiled.routes
        ],
    }


@app.get("/assets")
def assets():
    compiled = _compiled()
    return {
        "ok": True,
        "target": compiled.adapter_target,
        "imageService": compiled.image_service,
        "includeFiles": list(compiled.asset_plan),
    }
