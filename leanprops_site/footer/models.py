"""Markup-agnostic render tree produced for the site footer."""

from __future__ import annotations

import dataclasses as dc

from leanprops_site._constants import EXTERNAL_LINK_REL, EXTERNAL_LINK_TARGET


@dc.dataclass(frozen=True, slots=True)
class FooterLink:
    """A labelled hyperlink in the footer or navigation bar.

    Attributes
    ----------
    label : str
        Visible link text.
    href : str
        Resolved URL for internal links, or the configured href verbatim for
        external ones.
    external : bool
        Whether the link leaves the documentation site and should open in a
        new browsing context.
    """

    label: str
    href: str
    external: bool = False

    @property
    def target(self) -> str | None:
        """Return the ``target`` attribute for external links."""
        return EXTERNAL_LINK_TARGET if self.external else None

    @property
    def rel(self) -> str | None:
        """Return the ``rel`` attribute for external links."""
        return EXTERNAL_LINK_REL if self.external else None


@dc.dataclass(frozen=True, slots=True)
class SitemapSection:
    """A heading followed by an ordered group of links."""

    heading: str
    links: tuple[FooterLink, ...]


@dc.dataclass(frozen=True, slots=True)
class FooterTree:
    """Sitemap sections followed by the copyright line."""

    sections: tuple[SitemapSection, ...]
    copyright: str

    def get_section(self, heading: str) -> SitemapSection | None:
        """Return the section titled ``heading`` or None when it is absent."""
        return next(
            (section for section in self.sections if section.heading == heading),
            None,
        )


__all__ = ["FooterLink", "FooterTree", "SitemapSection"]
