"""Common literal values used across leanprops_site.

These constants keep section headings, link attributes, and default paths
centralized so the footer builder, templates, and tests can import the same
values without drifting. Intended for internal use within the leanprops_site
package.

Examples
--------
>>> from leanprops_site import _constants
>>> _constants.EXTERNAL_LINK_REL
'noreferrer noopener'
>>> _constants.DOCS_HEADING
'Docs'
"""

from pathlib import Path

DEFAULT_CONFIG = Path("config/site.yaml")
DEFAULT_FOOTER_OUTPUT = Path("public/footer.html")

URL_SEPARATOR = "/"

DOCS_HEADING = "Docs"
MODULES_HEADING = "Modules"
SOCIAL_HEADING = "Social"

EXTERNAL_LINK_TARGET = "_blank"
EXTERNAL_LINK_REL = "noreferrer noopener"
