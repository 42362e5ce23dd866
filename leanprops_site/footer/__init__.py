"""Build the documentation site footer and serialize it to HTML."""

from .builder import build_footer
from .models import FooterLink, FooterTree, SitemapSection
from .renderer import FooterHtmlRenderer

__all__ = [
    "FooterHtmlRenderer",
    "FooterLink",
    "FooterTree",
    "SitemapSection",
    "build_footer",
]
