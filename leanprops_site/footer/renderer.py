"""Serialize footer render trees into HTML.

The footer builder stays markup-agnostic; this module is the reference host
that turns a :class:`~leanprops_site.footer.models.FooterTree` into the
``nav-footer`` markup the site theme styles. It loads ``footer.jinja`` from
``leanprops_site/templates`` unless a custom directory is supplied, relies on
Jinja2 with autoescape enabled, and writes UTF-8 encoded files.

>>> from leanprops_site.footer import FooterHtmlRenderer, build_footer
>>> html = FooterHtmlRenderer().render(build_footer(site))  # doctest: +SKIP
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

if typ.TYPE_CHECKING:
    from .models import FooterTree


class FooterHtmlRenderer:
    """Render footer trees with the packaged Jinja template."""

    def __init__(self, *, templates_dir: Path | None = None) -> None:
        """Initialize the Jinja environment.

        Parameters
        ----------
        templates_dir : Path, optional
            Directory containing ``footer.jinja``. Defaults to
            ``leanprops_site/templates`` when not supplied.
        """
        self.templates_dir = templates_dir or Path(__file__).parent.parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.env.get_template("footer.jinja")

    def render(self, tree: FooterTree) -> str:
        """Return the footer HTML for ``tree``, ending with a newline."""
        html = self.template.render(footer=tree)
        if not html.endswith("\n"):
            html += "\n"
        return html

    def write(self, tree: FooterTree, output_path: Path) -> Path:
        """Render ``tree`` and write it to ``output_path``.

        Parent directories are created as needed; filesystem errors propagate
        to the caller.
        """
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.render(tree), encoding="utf-8")
        return output_path


__all__ = ["FooterHtmlRenderer"]
