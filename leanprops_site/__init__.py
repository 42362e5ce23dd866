"""Site configuration, link resolution, and footer rendering for the LeanProps docs.

This package declares the documentation site's global settings, turns
document slugs into base-path-aware URLs, and assembles the footer render tree
consumed by the static-site host. The ``site`` console script wraps these
pieces for build scripts.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.
- ``build_footer``: Footer render tree for a page in a given language.
- ``build_header_nav``: Resolved header navigation links for the top bar.
- ``LinkResolver``: Doc and page URL resolution under the base path.

Examples
--------
>>> from leanprops_site import main
>>> main()  # doctest: +SKIP
>>> from leanprops_site import app
>>> app(["url", "overview"])  # doctest: +SKIP
/leanprops/overview
"""

from __future__ import annotations

from .cli import app, main
from .footer import build_footer
from .links import LinkResolver
from .navigation import build_header_nav

__all__ = ["LinkResolver", "app", "build_footer", "build_header_nav", "main"]
