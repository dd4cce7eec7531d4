"""Shared HTML fixtures for the scraper test-suite.

``article_html`` is a blog post whose ``<article>`` holds nearly all of the
body text (~3000 characters), so it clears the readerable threshold.
``landing_html`` is a link-heavy page made of short snippets, with only
``og:title`` / ``og:description`` metadata.
"""

from __future__ import annotations

import pytest

_SENTENCE = (
    "Solid-state batteries replace the liquid electrolyte with a solid one, "
    "which promises higher energy density, faster charging, and a lower risk "
    "of fire, although manufacturing them at scale remains difficult. "
)


def _article_paragraphs(count: int = 6) -> str:
    return "".join(
        f"<p>Part {i}. {_SENTENCE * 2}Researchers keep refining the chemistry, "
        f"and early prototypes already power a handful of test vehicles.</p>"
        for i in range(1, count + 1)
    )


ARTICLE_HTML = f"""\
<!DOCTYPE html>
<html lang="en">
<head>
  <title>Why solid-state batteries matter</title>
  <meta property="og:title" content="Why solid-state batteries matter">
  <meta name="author" content="Jane Doe">
</head>
<body>
  <nav><a href="/">Home</a> <a href="/about">About</a></nav>
  <article class="post-content">
    <h1>Why solid-state batteries matter</h1>
    {_article_paragraphs()}
    <p>Read the <a href="/related/chemistry">chemistry primer</a> for details, including the history of the field and its open problems.</p>
  </article>
  <footer>Copyright 2024</footer>
</body>
</html>
"""


def _landing_links(count: int = 30) -> str:
    return "".join(f'<li><a href="/product/{i}">Product {i}</a></li>' for i in range(count))


LANDING_HTML = f"""\
<!DOCTYPE html>
<html>
<head>
  <meta property="og:title" content="Foo">
  <meta property="og:description" content="Bar">
</head>
<body>
  <header><ul class="menu">{_landing_links()}</ul></header>
  <main>
    <p>Fast. Simple. Reliable.</p>
    <p>Start your free trial today.</p>
    <div><a href="/signup">Sign up</a> <a href="/login">Log in</a></div>
  </main>
  <footer><ul>{_landing_links(10)}</ul></footer>
</body>
</html>
"""


@pytest.fixture()
def article_html() -> str:
    return ARTICLE_HTML


@pytest.fixture()
def landing_html() -> str:
    return LANDING_HTML
