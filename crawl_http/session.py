"""HTTP session management and the default fetch capability."""

from __future__ import annotations

from typing import Callable

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .config import DEFAULT_MAX_WORKERS, REQUEST_TIMEOUT, USER_AGENT

Fetcher = Callable[[str], str]


def build_session(
    verify_ssl: bool = True,
    pool_size: int = DEFAULT_MAX_WORKERS,
) -> requests.Session:
    """Return a requests.Session with keep-alive and a pool sized for the crawl."""
    session = requests.Session()
    # Attempts are counted by the crawler; the transport adds none of its own.
    retry = Retry(total=0, raise_on_status=False)
    adapter = HTTPAdapter(
        max_retries=retry,
        pool_connections=pool_size,
        pool_maxsize=pool_size,
    )
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    session.verify = verify_ssl
    session.headers.update({
        "User-Agent": USER_AGENT,
        "Accept": "text/html,application/xhtml+xml;q=0.9,*/*;q=0.8",
        "Connection": "keep-alive",
    })
    return session


def make_fetcher(
    session: "requests.Session | None" = None,
    timeout: float = REQUEST_TIMEOUT,
) -> Fetcher:
    """
    Build a ``fetch(url) -> str`` callable on top of *session*.

    Network errors, timeouts and non-2xx statuses all surface as
    ``requests.RequestException`` so the crawler can treat them alike.
    """
    if session is None:
        session = build_session()

    def fetch(url: str) -> str:
        resp = session.get(url, timeout=timeout, allow_redirects=True)
        resp.raise_for_status()
        return resp.text

    return fetch
