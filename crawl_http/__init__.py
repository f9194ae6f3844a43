"""
crawl_http
==========
Recursively crawl a plain HTTP directory listing (Apache, nginx,
``python -m http.server`` …) and describe every file it exposes as a tree.

Package structure
-----------------
crawl_http/
├── __init__.py       – package init and public API
├── __main__.py       – ``python -m crawl_http``
├── config.py         – defaults, CrawlConfig, CrawlConfigError
├── logging_setup.py  – colorlog console handler
├── session.py        – requests.Session factory and fetch callable
├── utils.py          – URL resolution, scope and extension helpers
├── tree.py           – Directory / File result nodes
├── crawler.py        – recursive Crawler and crawl()
├── cli.py            – argparse CLI
└── extract/          – sub-package: <a> link extraction from listings
    ├── __init__.py
    └── html.py       – BeautifulSoup/lxml extractor

Quick start
-----------
    from crawl_http import CrawlConfig, crawl

    tree = crawl("http://example.com/music/", CrawlConfig(filter_pattern="mp3$"))
    for f in tree.iter_files():
        print(f.name, f.reference)
"""

from .config  import CrawlConfig, CrawlConfigError
from .crawler import Crawler, VisitedSet, crawl
from .extract import Link, extract_links
from .tree    import Directory, File, dumps

__all__ = [
    "CrawlConfig",
    "CrawlConfigError",
    "Crawler",
    "VisitedSet",
    "crawl",
    "Link",
    "extract_links",
    "Directory",
    "File",
    "dumps",
]

__version__ = "1.0.0"
