"""Assemble the footer render tree for a single page render."""

from __future__ import annotations

import typing as typ

from leanprops_site._constants import DOCS_HEADING, MODULES_HEADING, SOCIAL_HEADING
from leanprops_site.links import LinkResolver

from .models import FooterLink, FooterTree, SitemapSection

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from leanprops_site.config import DocLinkConfig, SiteConfig, SocialLinkConfig


def build_footer(config: SiteConfig, language: str | None = None) -> FooterTree:
    """Return the footer sitemap and copyright for ``config``.

    Parameters
    ----------
    config : SiteConfig
        Shared site configuration.
    language : str, optional
        Language of the page being rendered; applied to every internal link.

    Returns
    -------
    FooterTree
        "Docs", "Modules", and "Social" sections, in that order, followed by
        the copyright text. A section whose configured link group is empty is
        left out.
    """
    resolver = LinkResolver(config)
    candidates = (
        SitemapSection(
            heading=DOCS_HEADING,
            links=_doc_links(config.docs_links, resolver, language),
        ),
        SitemapSection(
            heading=MODULES_HEADING,
            links=_doc_links(config.module_links, resolver, language),
        ),
        SitemapSection(
            heading=SOCIAL_HEADING,
            links=_social_links(config.social_links),
        ),
    )
    return FooterTree(
        sections=tuple(section for section in candidates if section.links),
        copyright=config.copyright,
    )


def _doc_links(
    entries: cabc.Iterable[DocLinkConfig],
    resolver: LinkResolver,
    language: str | None,
) -> tuple[FooterLink, ...]:
    return tuple(
        FooterLink(label=entry.label, href=resolver.doc_url(entry.slug, language))
        for entry in entries
    )


def _social_links(entries: cabc.Iterable[SocialLinkConfig]) -> tuple[FooterLink, ...]:
    return tuple(
        FooterLink(label=entry.label, href=entry.href, external=True)
        for entry in entries
    )


__all__ = ["build_footer"]
