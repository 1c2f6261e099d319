"""Shared HTML fixtures for the proof-reader tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from bs4 import BeautifulSoup

VALID_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="utf-8">
    <meta name="viewport" content="width=device-width, initial-scale=1">
    <title>A complete page</title>
</head>
<body>
    <main>
        <article>
            <header>
                <h1>A "complete" web page</h1>
                <div class="date">Published: 2021-04-13</div>
            </header>
            <section>
                <p>If you enjoy this content, <a href="/subscribe">subscribe</a>!</p>
                <img src="/chart.png" alt="Monthly readers">
                <figure>
                    <img src="/lake.jpg" alt="A lake at dusk">
                    <figcaption>The lake</figcaption>
                </figure>
                <table>
                    <caption>Readers per month</caption>
                    <tr><td>April</td><td>120</td></tr>
                </table>
                <form action="/subscribe">
                    <label for="email">Email</label>
                    <input id="email" type="email">
                    <input type="submit" value="Send">
                </form>
            </section>
            <div class="tags"><a href="/tags/testing">#testing</a>, <a href="/tags/rust">#rust</a></div>
        </article>
    </main>
</body>
</html>
"""

WIP_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="utf-8">
    <title>title</title>
</head>
<body>
    <main>
        <article>
        <header>
            <h2>A work in progress</h2>
            <div class="date">Published: 0000-01-01</div>
            <hr>
        </header>
        <div class="tags"><a href="/tags/wip">#WIP</a>,
        </article>
    </main>
</body>
</html>
"""


def parse(markup: str) -> BeautifulSoup:
    return BeautifulSoup(markup, "html.parser")


def page_with(body: str, head: str = "<title>t</title>", lang: str = ' lang="en"') -> str:
    """A minimal page passing every rule, with *body* spliced in."""
    return (
        f"<!DOCTYPE html><html{lang}><head>{head}</head><body>"
        f'<div class="date">2021-04-13</div>{body}</body></html>'
    )


@pytest.fixture
def valid_page() -> BeautifulSoup:
    return parse(VALID_PAGE)


@pytest.fixture
def wip_page() -> BeautifulSoup:
    return parse(WIP_PAGE)


@pytest.fixture
def site(tmp_path: Path) -> Path:
    """A small generated site: two good pages, one WIP page, one stylesheet."""
    root = tmp_path / "public"
    (root / "posts").mkdir(parents=True)
    (root / "index.html").write_text(VALID_PAGE, encoding="utf-8")
    (root / "posts" / "good.html").write_text(VALID_PAGE, encoding="utf-8")
    (root / "posts" / "wip.html").write_text(WIP_PAGE, encoding="utf-8")
    (root / "style.css").write_text("body { color: black; }", encoding="utf-8")
    return root
