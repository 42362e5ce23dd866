"""Cyclopts CLI entrypoint for the documentation site helpers.

The ``site`` console script defined here loads ``config/site.yaml``, renders
the footer for a given language into static HTML, and resolves individual
document or page URLs so build scripts can link to them without repeating the
base-path rules.

Examples
--------
Render the Japanese footer next to the generated pages:

>>> from leanprops_site.cli import app
>>> app(
...     ["footer", "--language", "ja", "--output", "public/ja/footer.html"]
... )  # doctest: +SKIP

Print the URL of a module page:

>>> app(["url", "leanprops-core"])  # doctest: +SKIP
/leanprops/leanprops-core
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from ._constants import DEFAULT_CONFIG, DEFAULT_FOOTER_OUTPUT
from .config import load_site_config
from .footer import FooterHtmlRenderer, build_footer
from .links import LinkResolver

app = App(name="site", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


@app.command(help="Render the site footer to a static HTML fragment.")
def footer(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    language: typ.Annotated[
        str | None,
        Parameter(help="Language tag for internal links", env_var="INPUT_LANGUAGE"),
    ] = None,
    output: typ.Annotated[
        Path, Parameter(help="Where to write the footer HTML", env_var="INPUT_OUTPUT")
    ] = DEFAULT_FOOTER_OUTPUT,
) -> None:
    """Render the footer for ``language`` and write it to ``output``.

    Parameters
    ----------
    config : Path, optional
        Path to the ``site.yaml`` configuration file (overridable via
        ``INPUT_CONFIG``).
    language : str or None, optional
        Language tag inserted into every internal link; ``None`` renders the
        unlocalized footer.
    output : Path, optional
        Destination of the rendered HTML fragment.

    Returns
    -------
    None
        Writes the HTML fragment and prints the written path.
    """
    site_config = load_site_config(config)
    tree = build_footer(site_config, language)
    written = FooterHtmlRenderer().write(tree, output)
    print(f"wrote {_format_path(written)}")


@app.command(help="Print the URL of a documentation page or site page.")
def url(
    slug: str,
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    language: typ.Annotated[
        str | None,
        Parameter(help="Language tag for the link", env_var="INPUT_LANGUAGE"),
    ] = None,
    page: typ.Annotated[
        bool, Parameter(help="Resolve a non-documentation page (skips docs_url)")
    ] = False,
) -> None:
    """Resolve ``slug`` against the configured base path and print it."""
    resolver = LinkResolver(load_site_config(config))
    resolved = resolver.page_url(slug, language) if page else resolver.doc_url(
        slug, language
    )
    print(resolved)


def main() -> None:
    """Invoke the Cyclopts application that powers the ``site`` console command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
