# sitemanifest/schema.py
from __future__ import annotations

from typing import Dict, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

# Declared input (what authors write). Frozen so a compiled config can be shared read-only.


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)


class NavigationItem(_Frozen):
    label: str
    slug: Optional[str] = None   # internal content page
    link: Optional[str] = None   # external absolute URL


class NavigationGroup(_Frozen):
    label: str
    items: Tuple["NavigationNode", ...]


NavigationNode = Union[NavigationItem, NavigationGroup]


class LogoOptions(_Frozen):
    src: str
    replaces_title: bool = Field(False, alias="replacesTitle")


class AdapterOptions(_Frozen):
    target: str = "vercel"
    image_service: bool = Field(False, alias="imageService")
    include_files: Tuple[str, ...] = Field((), alias="includeFiles")


class SiteConfig(_Frozen):
    title: str
    logo: Optional[LogoOptions] = None
    social: Dict[str, str] = Field(default_factory=dict)
    custom_css: Tuple[str, ...] = Field((), alias="customCss")
    base: str = "/"
    sidebar: Tuple[NavigationGroup, ...] = ()
    adapter: AdapterOptions = Field(default_factory=AdapterOptions)


NavigationGroup.model_rebuild()
SiteConfig.model_rebuild()


# Compiled output (what the portal, API and build step consume).


class RouteEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    href: str
    external: bool
    slug: Optional[str] = None
    section: Tuple[str, ...] = ()  # enclosing group labels, outermost first


class SocialLink(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    href: str


class CompiledSite(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    logo: Optional[LogoOptions] = None
    social: Tuple[SocialLink, ...] = ()
    custom_css: Tuple[str, ...] = ()
    routes: Tuple[RouteEntry, ...] = ()
    asset_plan: Tuple[str, ...] = ()
    adapter_target: str = "vercel"
    image_service: bool = False

    def route_for(self, slug: str) -> Optional[RouteEntry]:
        """Internal route for ``slug`` (surrounding slashes ignored), or None."""
        wanted = slug.strip("/")
        for r in self.routes:
            if not r.external and r.slug == wanted:
                return r
        return None

    @property
    def internal_routes(self) -> Tuple[RouteEntry, ...]:
        return tuple(r for r in self.routes if not r.external)
