"""Tests for the HTML footer serializer and the ``site`` CLI commands.

The serializer and CLI are exercised against the bundled
``config/site.yaml``; rendered output is parsed with BeautifulSoup so the
assertions check structure rather than whitespace.
"""

from __future__ import annotations

import datetime as dt
from pathlib import Path

import pytest
from bs4 import BeautifulSoup

from leanprops_site.cli import app
from leanprops_site.config import load_site_config
from leanprops_site.footer import FooterHtmlRenderer, FooterTree, build_footer

REPO_ROOT = Path(__file__).resolve().parents[1]
SITE_CONFIG = REPO_ROOT / "config" / "site.yaml"


@pytest.fixture(scope="module")
def footer_soup() -> BeautifulSoup:
    """Render the bundled footer in Japanese and parse the HTML."""
    config = load_site_config(SITE_CONFIG, now=dt.datetime(2024, 1, 1, tzinfo=dt.UTC))
    html = FooterHtmlRenderer().render(build_footer(config, "ja"))
    return BeautifulSoup(html, "html.parser")


def test_footer_markup_structure(footer_soup: BeautifulSoup) -> None:
    """The footer carries the nav-footer id, sitemap, and copyright sections."""
    footer = footer_soup.select_one("footer#footer.nav-footer")
    assert footer is not None, "expected <footer id='footer' class='nav-footer'>"
    headings = [h5.get_text(strip=True) for h5 in footer.select(".sitemap h5")]
    assert headings == ["Docs", "Modules", "Social"], (
        f"unexpected sitemap headings {headings!r}"
    )
    copyright_node = footer.select_one("section.copyright")
    assert copyright_node is not None
    assert copyright_node.get_text(strip=True) == (
        '(C) 2024 TSUYUSATO "MakeNowJust" Kitsune'
    )


def test_internal_links_resolved(footer_soup: BeautifulSoup) -> None:
    """Module links point at localized doc URLs without new-tab attributes."""
    anchors = footer_soup.select(".sitemap div:nth-of-type(2) a")
    assert [a.get("href") for a in anchors] == [
        "/leanprops/ja/leanprops-core",
        "/leanprops/ja/leanprops-magnolia",
    ]
    assert all(a.get("target") is None for a in anchors)


def test_external_links_open_safely(footer_soup: BeautifulSoup) -> None:
    """Social links keep their href and open in a new browsing context."""
    anchors = footer_soup.select(".sitemap div:nth-of-type(3) a")
    assert [a.get("href") for a in anchors] == [
        "https://twitter.com/make_now_just",
        "https://github.com/MakeNowJust/leanprops",
    ]
    for anchor in anchors:
        assert anchor.get("target") == "_blank"
        assert anchor.get("rel") == ["noreferrer", "noopener"]


def test_labels_are_escaped() -> None:
    """Display strings are HTML-escaped by the template."""
    tree = FooterTree(sections=(), copyright="<b>Acme</b> & co")
    html = FooterHtmlRenderer().render(tree)
    assert "<b>" not in html, "copyright markup should be escaped"
    soup = BeautifulSoup(html, "html.parser")
    assert soup.select_one(".sitemap") is None, "empty sitemap should be omitted"
    copyright_node = soup.select_one("section.copyright")
    assert copyright_node is not None
    assert copyright_node.get_text() == "<b>Acme</b> & co"


@pytest.fixture
def clean_input_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove ``INPUT_*`` variables so CLI defaults come from the arguments."""
    for name in ("INPUT_CONFIG", "INPUT_LANGUAGE", "INPUT_OUTPUT", "INPUT_PAGE"):
        monkeypatch.delenv(name, raising=False)


def _run_site(argv: list[str]) -> None:
    """Invoke the ``site`` app the way the console script does."""
    try:
        app(argv)
    except SystemExit as exc:
        assert exc.code in (0, None), f"site {argv!r} exited with {exc.code!r}"


@pytest.mark.usefixtures("clean_input_env")
def test_cli_footer_writes_html(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """The footer command writes the fragment and reports the path once."""
    output = tmp_path / "public" / "footer.html"
    _run_site(["footer", "--config", str(SITE_CONFIG), "--output", str(output)])
    assert output.read_text(encoding="utf-8").endswith("</footer>\n")
    lines = capsys.readouterr().out.splitlines()
    assert lines == [f"wrote {output}"], (
        f"expected a single 'wrote' line on stdout, got {lines!r}"
    )


@pytest.mark.usefixtures("clean_input_env")
@pytest.mark.parametrize(
    ("argv", "expected"),
    [
        (["url", "overview", "--language", "ja"], "/leanprops/ja/overview"),
        (["url", "help", "--language", "ja", "--page"], "/leanprops/ja/help"),
        (["url", "overview"], "/leanprops/overview"),
    ],
)
def test_cli_url_prints_once(
    argv: list[str], expected: str, capsys: pytest.CaptureFixture[str]
) -> None:
    """The url command prints exactly one resolved URL."""
    _run_site([*argv, "--config", str(SITE_CONFIG)])
    lines = capsys.readouterr().out.splitlines()
    assert lines == [expected], f"expected only {expected!r} on stdout, got {lines!r}"
