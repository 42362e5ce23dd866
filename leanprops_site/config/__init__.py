"""Load and validate the documentation site configuration.

This subpackage parses the project's ``site.yaml`` file into the immutable
:class:`SiteConfig` record that every page render reads from. Link groups are
checked while the record is built, so a malformed entry (for example a header
link carrying both ``doc`` and ``href``) is rejected before anything renders.
The primary entry points are :func:`load_site_config` for YAML files and
:func:`build_site_config` for mappings supplied by a hosting generator.

Examples
--------
>>> from leanprops_site.config import build_site_config
>>> site = build_site_config(
...     {"title": "LeanProps", "tagline": "Testing", "base_url": "/leanprops"}
... )
>>> site.base_url
'/leanprops/'
"""

from .loader import build_site_config, load_site_config
from .models import (
    ColorsConfig,
    DocLinkConfig,
    HeaderLinkConfig,
    SiteConfig,
    SiteConfigError,
    SocialLinkConfig,
)

__all__ = [
    "ColorsConfig",
    "DocLinkConfig",
    "HeaderLinkConfig",
    "SiteConfig",
    "SiteConfigError",
    "SocialLinkConfig",
    "build_site_config",
    "load_site_config",
]
