"""
crawl_http.crawler
===================
Recursive crawler for plain HTTP directory listings.

Features
--------
* Every ``<a>`` on a listing page is resolved against the page URL and run
  through the same policy chain: dedup, regex filter, host scope,
  directory containment, then directory/file classification.
* Deduplication is global to one crawl: a single thread-safe
  :class:`VisitedSet` is shared by every branch of the traversal.
* Failed listing fetches are retried up to ``max_attempts`` times; a
  directory that never loads becomes an empty subtree instead of aborting
  the crawl.
* Sub-directories are fetched concurrently on a bounded thread pool, but
  joined in link order so the tree always matches the listing order.
"""

from __future__ import annotations

import logging
import threading
from collections import Counter
from concurrent.futures import Future, ThreadPoolExecutor
from typing import NamedTuple

import requests

from .config import CrawlConfig
from .extract import Link, extract_links
from .session import Fetcher, build_session, make_fetcher
from .tree import Directory, File, TreeNode
from .utils import (
    clean_label, directory_url, file_extension, host_of,
    is_directory_href, is_within_directory, resolve_link, validate_root_url,
)

log = logging.getLogger("crawl-http")


class VisitedSet:
    """Set of absolute URLs with an atomic check-and-insert."""

    def __init__(self) -> None:
        self._urls: set[str] = set()
        self._lock = threading.Lock()

    def add(self, url: str) -> bool:
        """Insert *url*; return False if it was already present."""
        with self._lock:
            if url in self._urls:
                return False
            self._urls.add(url)
            return True

    def __contains__(self, url: object) -> bool:
        with self._lock:
            return url in self._urls

    def __len__(self) -> int:
        with self._lock:
            return len(self._urls)


class _PendingDirectory(NamedTuple):
    """A sub-directory whose items are still being crawled."""

    name: str
    url: str
    future: "Future[list[TreeNode]]"


class Crawler:
    """
    Crawl a directory listing and every listing below it.

    *fetch* is any ``fetch(url) -> str`` callable that raises
    ``requests.RequestException`` on failure.  When omitted, one is built
    on a pooled ``requests.Session`` using ``config.timeout``.
    """

    def __init__(
        self,
        config: "CrawlConfig | None" = None,
        fetch: "Fetcher | None" = None,
        session: "requests.Session | None" = None,
    ) -> None:
        self.config = config if config is not None else CrawlConfig()
        if fetch is None:
            if session is None:
                session = build_session(pool_size=self.config.max_workers)
            fetch = make_fetcher(session, timeout=self.config.timeout)
        self._fetch = fetch
        self._stats: Counter = Counter()
        self._stats_lock = threading.Lock()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def crawl(self, root_url: str) -> Directory:
        """
        Crawl *root_url* and return the discovered tree.

        Raises :class:`~crawl_http.config.CrawlConfigError` for an unusable
        root URL; no other error escapes once the crawl has started.
        """
        root_url = validate_root_url(root_url)

        visited = VisitedSet()
        # A listing's link back to itself ("./", "") must not recurse.
        visited.add(root_url)
        visited.add(directory_url(root_url))

        with self._stats_lock:
            self._stats.clear()

        log.info("Crawling %s", root_url)
        if self.config.max_workers > 1:
            with ThreadPoolExecutor(
                max_workers=self.config.max_workers,
                thread_name_prefix="crawl-http",
            ) as pool:
                items = self._crawl_directory(root_url, visited, pool)
        else:
            items = self._crawl_directory(root_url, visited, None)

        log.info(
            "Crawl complete. visited=%d  dirs=%d  files=%d  skip=%d  failed=%d",
            len(visited),
            self._stats["dirs"],
            self._stats["files"],
            self._stats["skip"],
            self._stats["failed"],
        )
        return Directory(items=items)

    @property
    def stats(self) -> dict[str, int]:
        with self._stats_lock:
            return dict(self._stats)

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------

    def _crawl_directory(
        self,
        url: str,
        visited: VisitedSet,
        pool: "ThreadPoolExecutor | None",
    ) -> list[TreeNode]:
        """
        Fetch the listing at *url* and return its items.

        Failed fetches are counted per call; every sub-directory starts
        again with a fresh attempt budget.
        """
        body = self._fetch_listing(url)
        if body is None:
            return []

        self._count("dirs")
        pending: list["TreeNode | _PendingDirectory"] = []
        for link in extract_links(body):
            entry = self._process_link(link, url, visited, pool)
            if entry is not None:
                pending.append(entry)

        return [self._resolve(entry, visited, pool) for entry in pending]

    def _fetch_listing(self, url: str) -> "str | None":
        """Return the body at *url*, or None once every attempt has failed."""
        max_attempts = self.config.max_attempts
        for attempt in range(1, max_attempts + 1):
            try:
                return self._fetch(url)
            except requests.RequestException as exc:
                log.warning("[RETRY] Failed to download %s – %s", url, exc)
                if attempt < max_attempts:
                    log.warning(
                        "[RETRY] Trying again. Attempt %d/%d...",
                        attempt + 1, max_attempts,
                    )
        log.error(
            "[GIVE-UP] Hit the download attempt limit (%d) for %s. "
            "Giving up on this path.",
            max_attempts, url,
        )
        self._count("failed")
        return None

    def _process_link(
        self,
        link: Link,
        dir_url: str,
        visited: VisitedSet,
        pool: "ThreadPoolExecutor | None",
    ) -> "TreeNode | _PendingDirectory | None":
        """Apply the policy chain to one link; None means it was skipped."""
        cfg = self.config
        name = clean_label(link.label)
        href = link.href
        # urllib raises ValueError for bad IPv6 brackets and ports
        try:
            link_url = resolve_link(href, dir_url)
            link_host = host_of(link_url)
            within = is_within_directory(link_url, directory_url(dir_url))
        except ValueError:
            return self._skip("Malformed URL", href)

        # Claimed before any other check so no other branch processes it.
        if not visited.add(link_url):
            return self._skip("Already done this URL", link_url)

        if cfg.filter_pattern is not None and not cfg.filter_pattern.search(link_url):
            return self._skip("Failed regex", link_url)

        if not cfg.keep_separate_hosts and link_host != host_of(dir_url):
            return self._skip("Inconsistent host", link_url)

        if cfg.stay_in_same_directory and not within:
            return self._skip("Outside of parent directory", link_url)

        if is_directory_href(href):
            self._verbose("[DIR] %s", link_url)
            if pool is None:
                return Directory(name, self._crawl_directory(link_url, visited, None))
            future = pool.submit(self._crawl_directory, link_url, visited, pool)
            return _PendingDirectory(name, link_url, future)

        if not cfg.keep_any_file_type and file_extension(href) not in cfg.dotted_extensions:
            return self._skip("Bad extension", link_url)

        self._verbose("[FILE] %s", link_url)
        self._count("files")
        return File(name, link_url)

    def _resolve(
        self,
        entry: "TreeNode | _PendingDirectory",
        visited: VisitedSet,
        pool: "ThreadPoolExecutor | None",
    ) -> TreeNode:
        if not isinstance(entry, _PendingDirectory):
            return entry
        # A child that no worker has picked up yet runs in this thread, so
        # a parent never blocks on a task queued behind itself.
        if entry.future.cancel():
            items = self._crawl_directory(entry.url, visited, pool)
        else:
            items = entry.future.result()
        return Directory(entry.name, items)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _count(self, key: str) -> None:
        with self._stats_lock:
            self._stats[key] += 1

    def _verbose(self, msg: str, *args) -> None:
        if self.config.verbose:
            log.info(msg, *args)

    def _skip(self, reason: str, url: str) -> None:
        self._count("skip")
        self._verbose("[SKIP] %s: %s", reason, url)
        return None


def crawl(
    root_url: str,
    config: "CrawlConfig | None" = None,
    fetch: "Fetcher | None" = None,
) -> Directory:
    """Crawl *root_url* with *config* and return the result tree."""
    return Crawler(config, fetch=fetch).crawl(root_url)
