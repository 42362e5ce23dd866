"""Load site configuration YAML into typed dataclasses."""

from __future__ import annotations

import collections.abc as cabc
import datetime as dt
import typing as typ

from ruamel.yaml import YAML

from .helpers import (
    _build_colors,
    _build_doc_links,
    _build_header_links,
    _build_social_links,
    _optional_str,
    _render_copyright,
)
from .models import SiteConfig, SiteConfigError

if typ.TYPE_CHECKING:
    from pathlib import Path


def load_site_config(path: Path, *, now: dt.datetime | None = None) -> SiteConfig:
    """Load the YAML configuration describing the documentation site.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``config/site.yaml``).
    now : datetime, optional
        Timestamp used to fill the ``{year}`` placeholder in ``copyright``.
        Defaults to the current UTC time.

    Returns
    -------
    SiteConfig
        Immutable site configuration ready to be shared across renders.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    SiteConfigError
        If required fields are missing or a link entry is malformed.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from leanprops_site.config import load_site_config
    >>> config = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
    >>> config.base_url  # doctest: +SKIP
    '/leanprops/'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):  # pragma: no cover - config error guard
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    return build_site_config(loaded, now=now)


def build_site_config(
    payload: cabc.Mapping[str, typ.Any], *, now: dt.datetime | None = None
) -> SiteConfig:
    """Build a :class:`SiteConfig` from an already parsed mapping.

    Every shape error is reported here, before any page is rendered.
    """
    match payload:
        case cabc.Mapping() as raw:
            pass
        case _:
            msg = "Site configuration must be a mapping."
            raise SiteConfigError(msg)

    title = _optional_str(raw.get("title"))
    tagline = _optional_str(raw.get("tagline"))
    for key, value in {"title": title, "tagline": tagline}.items():
        if not value:
            msg = f"Site configuration is missing '{key}'."
            raise SiteConfigError(msg)

    footer = raw.get("footer", {}) or {}
    if not isinstance(footer, cabc.Mapping):
        msg = "'footer' must be a mapping."
        raise SiteConfigError(msg)

    clean_url = raw.get("clean_url", False)
    if not isinstance(clean_url, bool):
        msg = f"'clean_url' must be a boolean, got {clean_url!r}."
        raise SiteConfigError(msg)

    scripts = raw.get("scripts") or []
    if not isinstance(scripts, list | tuple):
        msg = "'scripts' must be a list of URLs."
        raise SiteConfigError(msg)

    return SiteConfig(
        title=str(title),
        tagline=str(tagline),
        base_url=str(raw.get("base_url", "/") or "/"),
        docs_url=str(raw.get("docs_url", "") or ""),
        header_links=_build_header_links(raw.get("header_links")),
        social_links=_build_social_links(
            footer.get("social_links", raw.get("social_links"))
        ),
        module_links=_build_doc_links(
            footer.get("module_links", raw.get("module_links")),
            group="module_links",
        ),
        docs_links=_build_doc_links(
            footer.get("docs_links", raw.get("docs_links")), group="docs_links"
        ),
        colors=_build_colors(raw.get("colors")),
        copyright=_render_copyright(raw.get("copyright"), now=now),
        url=_optional_str(raw.get("url")),
        project_name=_optional_str(raw.get("project_name")),
        organization_name=_optional_str(raw.get("organization_name")),
        custom_docs_path=_optional_str(raw.get("custom_docs_path")),
        highlight_theme=_optional_str(raw.get("highlight_theme")) or "default",
        on_page_nav=_optional_str(raw.get("on_page_nav")),
        clean_url=clean_url,
        og_image=_optional_str(raw.get("og_image")),
        twitter_image=_optional_str(raw.get("twitter_image")),
        scripts=tuple(str(item) for item in scripts),
    )


__all__ = ["build_site_config", "load_site_config"]
