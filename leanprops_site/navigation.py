"""Resolve the configured header links for the top navigation bar."""

from __future__ import annotations

import typing as typ

from .footer.models import FooterLink
from .links import LinkResolver

if typ.TYPE_CHECKING:
    from .config import SiteConfig


def build_header_nav(
    config: SiteConfig, language: str | None = None
) -> tuple[FooterLink, ...]:
    """Return the header navigation links in configured order.

    Entries declaring ``doc`` resolve through :meth:`LinkResolver.doc_url`;
    entries declaring ``href`` are passed through unchanged and flagged as
    external.
    """
    resolver = LinkResolver(config)
    links: list[FooterLink] = []
    for entry in config.header_links:
        if entry.href:
            links.append(FooterLink(label=entry.label, href=entry.href, external=True))
        else:
            links.append(
                FooterLink(
                    label=entry.label,
                    href=resolver.doc_url(entry.doc or "", language),
                )
            )
    return tuple(links)


__all__ = ["build_header_nav"]
