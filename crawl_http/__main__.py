"""
Main entry point for the crawl_http package.

Allows running the crawler as: python -m crawl_http
"""

import sys

from crawl_http.cli import main

if __name__ == "__main__":
    sys.exit(main())
