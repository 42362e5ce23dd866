"""Resolve documentation slugs into base-path-aware site URLs.

:class:`LinkResolver` is the only place that knows how ``base_url``,
``docs_url``, an optional language tag, and a slug are stitched together.
``base_url`` is used as normalized by :class:`~leanprops_site.config.SiteConfig`;
the language and slug are trimmed of surrounding separators per call, so a
slug like ``"/overview"`` never produces a doubled separator.

Examples
--------
>>> from leanprops_site.config import build_site_config
>>> from leanprops_site.links import LinkResolver
>>> site = build_site_config(
...     {
...         "title": "LeanProps",
...         "tagline": "Testing",
...         "base_url": "/leanprops/",
...         "docs_url": "docs",
...     }
... )
>>> resolver = LinkResolver(site)
>>> resolver.doc_url("leanprops-core", "ja")
'/leanprops/docs/ja/leanprops-core'
>>> resolver.page_url("help")
'/leanprops/help'
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from ._constants import URL_SEPARATOR

if typ.TYPE_CHECKING:
    from .config import SiteConfig


@dc.dataclass(frozen=True, slots=True)
class LinkResolver:
    """Turn slugs and language tags into URLs for a single site configuration."""

    config: SiteConfig

    def doc_url(self, slug: str, language: str | None = None) -> str:
        """Return the URL of a documentation page.

        Parameters
        ----------
        slug : str
            Document identifier. An empty slug yields the prefix alone.
        language : str, optional
            Language tag inserted after the docs segment. ``None`` and ``""``
            both mean no language segment.

        Returns
        -------
        str
            ``base_url`` followed by ``docs_url/`` (when configured),
            ``language/`` (when given), and ``slug``.
        """
        return _join(self.config.base_url, self.config.docs_url, language, slug)

    def page_url(self, slug: str, language: str | None = None) -> str:
        """Return the URL of a non-documentation page, skipping ``docs_url``."""
        return _join(self.config.base_url, None, language, slug)


def _join(base_url: str, docs_url: str | None, language: str | None, slug: str) -> str:
    """Concatenate URL segments with a single separator between each."""
    prefix = base_url
    for segment in (docs_url, language):
        cleaned = _strip_separators(segment)
        if cleaned:
            prefix = f"{prefix}{cleaned}{URL_SEPARATOR}"
    return prefix + (slug or "").lstrip(URL_SEPARATOR)


def _strip_separators(segment: str | None) -> str:
    """Return ``segment`` without leading or trailing separators."""
    return (segment or "").strip().strip(URL_SEPARATOR)


__all__ = ["LinkResolver"]
