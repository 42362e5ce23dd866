"""Utility helpers shared by the site configuration loader."""

from __future__ import annotations

import collections.abc as cabc
import datetime as dt

from .models import (
    ColorsConfig,
    DocLinkConfig,
    HeaderLinkConfig,
    SiteConfigError,
    SocialLinkConfig,
)

DEFAULT_PRIMARY_COLOR = "#2E8555"
DEFAULT_SECONDARY_COLOR = "#205D3B"
YEAR_PLACEHOLDER = "{year}"


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _link_entries(
    entries: object | None, *, group: str
) -> list[cabc.Mapping[str, object]]:
    """Return the mapping entries of a link group, rejecting other shapes."""
    match entries:
        case None:
            return []
        case list() | tuple():
            items = list(entries)
        case _:
            msg = f"'{group}' must be a list of link mappings."
            raise SiteConfigError(msg)
    for index, entry in enumerate(items):
        if not isinstance(entry, cabc.Mapping):
            msg = f"'{group}' entry #{index + 1} must be a mapping."
            raise SiteConfigError(msg)
    return items


def _build_doc_links(
    entries: object | None, *, group: str
) -> tuple[DocLinkConfig, ...]:
    """Build ordered doc link configurations for a footer section."""
    links: list[DocLinkConfig] = []
    for index, entry in enumerate(_link_entries(entries, group=group)):
        slug = _optional_str(entry.get("slug") or entry.get("doc"))
        label = _optional_str(entry.get("label")) or slug
        if not slug:
            msg = f"'{group}' entry #{index + 1} requires a 'slug'."
            raise SiteConfigError(msg)
        links.append(DocLinkConfig(slug=slug, label=str(label)))
    return tuple(links)


def _build_social_links(entries: object | None) -> tuple[SocialLinkConfig, ...]:
    """Build ordered external link configurations for the footer."""
    links: list[SocialLinkConfig] = []
    for index, entry in enumerate(_link_entries(entries, group="social_links")):
        match entry:
            case {"label": label, "href": href} if label and href:
                links.append(SocialLinkConfig(href=str(href), label=str(label)))
            case _:
                msg = f"'social_links' entry #{index + 1} requires 'label' and 'href'."
                raise SiteConfigError(msg)
    return tuple(links)


def _build_header_links(entries: object | None) -> tuple[HeaderLinkConfig, ...]:
    """Build top navigation entries, each pointing at a doc or an href."""
    links: list[HeaderLinkConfig] = []
    for index, entry in enumerate(_link_entries(entries, group="header_links")):
        label = _optional_str(entry.get("label"))
        if not label:
            msg = f"'header_links' entry #{index + 1} requires a 'label'."
            raise SiteConfigError(msg)
        links.append(
            HeaderLinkConfig(
                label=label,
                doc=_optional_str(entry.get("doc")),
                href=_optional_str(entry.get("href")),
            )
        )
    return tuple(links)


def _build_colors(payload: object | None) -> ColorsConfig:
    """Build the theme colours, accepting the long ``*_color`` key spelling."""
    match payload:
        case None:
            data: cabc.Mapping[str, object] = {}
        case cabc.Mapping():
            data = payload
        case _:
            msg = "'colors' must be a mapping."
            raise SiteConfigError(msg)
    primary = data.get("primary", data.get("primary_color", DEFAULT_PRIMARY_COLOR))
    secondary = data.get(
        "secondary", data.get("secondary_color", DEFAULT_SECONDARY_COLOR)
    )
    return ColorsConfig(primary=str(primary), secondary=str(secondary))


def _render_copyright(template: object | None, *, now: dt.datetime | None = None) -> str:
    """Substitute ``{year}`` in the copyright text once, at build time.

    Everything else, including other braces and surrounding whitespace, is kept
    verbatim.
    """
    if template is None:
        return ""
    text = str(template)
    if YEAR_PLACEHOLDER not in text:
        return text
    year = (now or dt.datetime.now(dt.UTC)).year
    return text.replace(YEAR_PLACEHOLDER, str(year))


__all__ = [
    "DEFAULT_PRIMARY_COLOR",
    "DEFAULT_SECONDARY_COLOR",
    "YEAR_PLACEHOLDER",
    "_build_colors",
    "_build_doc_links",
    "_build_header_links",
    "_build_social_links",
    "_optional_str",
    "_render_copyright",
]
