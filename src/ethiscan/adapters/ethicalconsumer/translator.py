"""Extract the top search result from an Ethical Consumer results page."""

from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import urljoin

from bs4 import BeautifulSoup

from ethiscan.domain.ports.lookups import SearchHit

if TYPE_CHECKING:
    from collections.abc import Sequence

    from bs4 import Tag


def _first_anchor(soup: BeautifulSoup, selectors: Sequence[str]) -> Tag | None:
    for selector in selectors:
        for anchor in soup.select(selector):
            href = anchor.get("href")
            if isinstance(href, str) and href.strip():
                return anchor
    return None


def translate_search_page(
    html: str,
    *,
    page_url: str,
    selectors: Sequence[str],
) -> SearchHit | None:
    """Return the first result link on ``html`` or ``None`` when the page lists none.

    Selectors are tried in order. Relative links are resolved against ``page_url``.
    """

    soup = BeautifulSoup(html, "html.parser")
    anchor = _first_anchor(soup, selectors)
    if anchor is None:
        return None

    href = str(anchor.get("href")).strip()
    title = anchor.get_text(" ", strip=True)
    return SearchHit(title=title, link=urljoin(page_url, href))
