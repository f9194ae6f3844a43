"""
crawl_http.extract.html
========================
Extracts ``<a>`` links from HTML directory listings using BeautifulSoup.

Listing pages produced by Apache, nginx, lighttpd and ``python -m
http.server`` are frequently sloppy (unclosed tags, stray markup), so the
forgiving lxml tree builder is used rather than a strict parser.
"""

from __future__ import annotations

import logging
from typing import NamedTuple

from bs4 import BeautifulSoup

log = logging.getLogger("crawl-http")

_BS4_PARSER = "lxml"


class Link(NamedTuple):
    """One hyperlink: its visible text and raw ``href`` value."""

    label: str
    href: str


def extract_links(content: "bytes | str") -> list[Link]:
    """
    Return every ``<a>`` element of *content* in document order.

    Anchors without an ``href`` attribute yield an empty *href*.  Input
    that cannot be parsed at all gives an empty list.
    """
    if isinstance(content, bytes):
        content = content.decode("utf-8", errors="replace")
    if not content:
        return []

    try:
        soup = BeautifulSoup(content, _BS4_PARSER)
    except Exception as exc:  # bs4 surfaces parser failures as assorted types
        log.debug("Could not parse listing markup: %s", exc)
        return []

    links: list[Link] = []
    for el in soup.find_all("a"):
        href = el.get("href") or ""
        if isinstance(href, list):
            href = " ".join(href)
        links.append(Link(el.get_text(), href))
    return links
