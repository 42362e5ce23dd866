"""Typed dataclasses describing the documentation site configuration."""

from __future__ import annotations

import dataclasses as dc

from leanprops_site._constants import URL_SEPARATOR


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(frozen=True, slots=True)
class HeaderLinkConfig:
    """Top navigation entry pointing at either a doc slug or an external href."""

    label: str
    doc: str | None = None
    href: str | None = None

    def __post_init__(self) -> None:
        if bool(self.doc) == bool(self.href):
            msg = (
                f"Header link '{self.label}' must set exactly one of "
                "'doc' or 'href'."
            )
            raise SiteConfigError(msg)

    @property
    def external(self) -> bool:
        """Return ``True`` when the entry links outside the documentation."""
        return bool(self.href)


@dc.dataclass(frozen=True, slots=True)
class DocLinkConfig:
    """Documentation slug surfaced in a footer sitemap section."""

    slug: str
    label: str


@dc.dataclass(frozen=True, slots=True)
class SocialLinkConfig:
    """External profile or repository link rendered in the footer."""

    href: str
    label: str


@dc.dataclass(frozen=True, slots=True)
class ColorsConfig:
    """Theme colours handed through to the rendering host untouched."""

    primary: str
    secondary: str


@dc.dataclass(frozen=True, slots=True)
class SiteConfig:
    """Site-wide settings shared by every rendered page.

    Instances are built once per site build and never mutated afterwards, so
    a single value can be shared across any number of page renders. The
    ``base_url`` is normalized here to end with exactly one ``/``; every
    other component reads the prefix from this record rather than storing
    its own copy.

    Attributes
    ----------
    title : str
        Site title.
    tagline : str
        Short description shown alongside the title.
    base_url : str
        Path prefix under which all pages are served (for example
        ``"/leanprops/"``).
    docs_url : str
        Optional segment inserted between ``base_url`` and a document slug.
        Empty means no segment.
    header_links : tuple[HeaderLinkConfig, ...]
        Ordered top navigation entries.
    social_links : tuple[SocialLinkConfig, ...]
        Ordered external links for the footer "Social" section; may be
        empty.
    module_links : tuple[DocLinkConfig, ...]
        Ordered doc slugs for the footer "Modules" section.
    docs_links : tuple[DocLinkConfig, ...]
        Ordered doc slugs for the footer "Docs" section.
    colors : ColorsConfig
        Primary and secondary theme colours.
    copyright : str
        Display string rendered verbatim at the bottom of the footer.
    """

    title: str
    tagline: str
    colors: ColorsConfig
    copyright: str
    base_url: str = URL_SEPARATOR
    docs_url: str = ""
    header_links: tuple[HeaderLinkConfig, ...] = ()
    social_links: tuple[SocialLinkConfig, ...] = ()
    module_links: tuple[DocLinkConfig, ...] = ()
    docs_links: tuple[DocLinkConfig, ...] = ()
    url: str | None = None
    project_name: str | None = None
    organization_name: str | None = None
    custom_docs_path: str | None = None
    highlight_theme: str = "default"
    on_page_nav: str | None = None
    clean_url: bool = False
    og_image: str | None = None
    twitter_image: str | None = None
    scripts: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        for key in ("title", "tagline"):
            if not getattr(self, key):
                msg = f"Site configuration requires a non-empty '{key}'."
                raise SiteConfigError(msg)
        object.__setattr__(self, "base_url", _normalize_base_url(self.base_url))
        object.__setattr__(
            self, "docs_url", (self.docs_url or "").strip(URL_SEPARATOR)
        )

    def site_url(self, path: str = "") -> str:
        """Return an absolute URL for ``path`` under the site origin.

        Raises
        ------
        SiteConfigError
            If the configuration does not declare a ``url`` origin.
        """
        if not self.url:
            msg = "Site configuration has no 'url' to build absolute links from."
            raise SiteConfigError(msg)
        origin = self.url.rstrip(URL_SEPARATOR)
        return f"{origin}{self.base_url}{path.lstrip(URL_SEPARATOR)}"


def _normalize_base_url(value: str | None) -> str:
    """Return ``value`` with a single trailing separator."""
    text = (value or "").strip()
    if not text:
        return URL_SEPARATOR
    return text.rstrip(URL_SEPARATOR) + URL_SEPARATOR


__all__ = [
    "ColorsConfig",
    "DocLinkConfig",
    "HeaderLinkConfig",
    "SiteConfig",
    "SiteConfigError",
    "SocialLinkConfig",
]
