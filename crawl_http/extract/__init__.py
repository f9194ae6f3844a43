"""
crawl_http.extract
===================
Sub-package for pulling hyperlinks out of directory-listing pages.

Public API
----------
    from crawl_http.extract import extract_links, Link
"""

from .html import Link, extract_links

__all__ = ["Link", "extract_links"]
