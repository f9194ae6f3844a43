"""
crawl_http.utils
=================
URL and path helpers shared by the crawler.

All comparisons are made on the exact string produced by
:func:`resolve_link`; no further canonicalisation (percent-encoding,
case folding, trailing slashes) is applied.
"""

import posixpath
import urllib.parse

from .config import CRAWLABLE_SCHEMES, CrawlConfigError


# ---------------------------------------------------------------------------
# URL helpers
# ---------------------------------------------------------------------------

def validate_root_url(url: str) -> str:
    """
    Return *url* stripped of surrounding whitespace, or raise
    :class:`CrawlConfigError` when it cannot name a listing to crawl.
    """
    if not isinstance(url, str) or not url.strip():
        raise CrawlConfigError("A root URL is required")
    url = url.strip()
    try:
        parsed = urllib.parse.urlparse(url)
        host = host_of(url)
    except ValueError as exc:
        raise CrawlConfigError(f"Malformed root URL {url!r}: {exc}") from exc
    if parsed.scheme.lower() not in CRAWLABLE_SCHEMES:
        raise CrawlConfigError(
            f"Root URL must use http or https, got {url!r}"
        )
    if not host:
        raise CrawlConfigError(f"Root URL has no host: {url!r}")
    return url


def directory_url(url: str) -> str:
    """Return *url* with exactly the trailing ``/`` a directory needs."""
    return url if url.endswith("/") else url + "/"


def resolve_link(href: str, page_url: str) -> str:
    """
    Resolve *href* against the directory *page_url*.

    The page is treated as a directory even when its URL lacks the trailing
    slash, so ``song.mp3`` found on ``http://h/music`` becomes
    ``http://h/music/song.mp3`` rather than ``http://h/song.mp3``.
    """
    return urllib.parse.urljoin(directory_url(page_url), href)


_DEFAULT_PORTS = {"http": 80, "https": 443}


def host_of(url: str) -> str:
    """
    ``host[:port]`` part of *url*, lowercased.

    Userinfo is dropped and a scheme's default port is omitted, so
    ``http://u@Host:80/`` and ``http://host/`` compare equal.  Raises
    ``ValueError`` for an unparsable port.
    """
    parsed = urllib.parse.urlparse(url)
    host = parsed.hostname or ""
    port = parsed.port
    if port is None or port == _DEFAULT_PORTS.get(parsed.scheme.lower()):
        return host
    return f"{host}:{port}"


def is_within_directory(url: str, dir_url: str) -> bool:
    """
    True when the path of *url* does not climb out of *dir_url*'s path.

    ``/a/b/c.mp3`` is within ``/a/b/``; ``/a/x.mp3`` and ``/elsewhere/``
    are not.
    """
    target = urllib.parse.urlparse(url).path or "/"
    start = urllib.parse.urlparse(dir_url).path or "/"
    relative = posixpath.relpath(target, start)
    return not (relative.startswith("..") or posixpath.isabs(relative))


def file_extension(href: str) -> str:
    """Dot-prefixed suffix of the raw *href* (``""`` when there is none)."""
    return posixpath.splitext(href)[1]


def is_directory_href(href: str) -> bool:
    """Listing servers mark sub-directories with a trailing slash."""
    return href.endswith("/")


def clean_label(label: str) -> str:
    """
    Drop the single trailing ``/`` directory listers append to folder names,
    then trim whitespace.
    """
    if label.endswith("/"):
        label = label[:-1]
    return label.strip()
