"""
Command-line interface for crawl-http.

Crawls a directory listing and prints the discovered tree as JSON.  Log
output goes to stderr, so stdout can be redirected to save the playlist.
"""

import argparse
import sys
from pathlib import Path

import urllib3

from crawl_http.config import (
    DEFAULT_FILE_EXTENSIONS,
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_MAX_WORKERS,
    REQUEST_TIMEOUT,
    CrawlConfig,
    CrawlConfigError,
)
from crawl_http.crawler import Crawler
from crawl_http.logging_setup import log, setup_logging
from crawl_http.session import build_session, make_fetcher
from crawl_http.tree import dumps


def _extension_list(value: str) -> frozenset:
    exts = frozenset(e.strip().lstrip(".") for e in value.split(",") if e.strip())
    if not exts:
        raise argparse.ArgumentTypeError("expected a comma-separated list of extensions")
    return exts


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="crawl-http",
        description="Recursively crawl an HTTP directory listing and print "
                    "the files it contains as a JSON tree.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Example:\n"
            "  crawl-http http://example.com/music/ -r 'mp3$' > playlist.json"
        ),
    )
    parser.add_argument("url", help="URL of the directory listing to start from")
    parser.add_argument(
        "-m", "--max-download-attempts", dest="max_attempts", type=int,
        default=DEFAULT_MAX_ATTEMPTS,
        help="Maximum number of times to attempt downloading the index for "
             f"any one directory (default: {DEFAULT_MAX_ATTEMPTS})",
    )
    parser.add_argument(
        "-r", "--regex", dest="regex", default=None,
        help="Only keep URLs matching this regular expression (default: none)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Log every directory, file and skipped link",
    )
    parser.add_argument(
        "--keep-separate-hosts", action="store_true",
        help="Follow links that point at other hosts",
    )
    parser.add_argument(
        "--leave-directory", dest="stay_in_same_directory",
        action="store_false", default=True,
        help="Follow links outside the starting directory",
    )
    parser.add_argument(
        "--any-file-type", action="store_true",
        help="Keep files of every type instead of the audio/video list",
    )
    parser.add_argument(
        "--file-types", type=_extension_list, default=DEFAULT_FILE_EXTENSIONS,
        help="Comma-separated extensions to keep "
             f"(default: {','.join(sorted(DEFAULT_FILE_EXTENSIONS))})",
    )
    parser.add_argument(
        "-w", "--workers", type=int, default=DEFAULT_MAX_WORKERS,
        help=f"Directories fetched in parallel (default: {DEFAULT_MAX_WORKERS})",
    )
    parser.add_argument(
        "--timeout", type=float, default=REQUEST_TIMEOUT,
        help=f"Seconds to wait for each listing (default: {REQUEST_TIMEOUT})",
    )
    parser.add_argument(
        "-o", "--output", default=None,
        help="Write the JSON tree to this file instead of stdout",
    )
    parser.add_argument(
        "--no-verify-ssl", dest="verify_ssl", action="store_false", default=True,
        help="Disable TLS certificate verification (use for self-signed certs)",
    )
    parser.add_argument(
        "--debug", action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Run the crawler CLI; returns the process exit status."""
    args = parse_args(argv)

    setup_logging(debug=args.debug, verbose=args.verbose)

    if not args.verify_ssl:
        urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)
        log.warning("TLS certificate verification is DISABLED (--no-verify-ssl)")

    try:
        config = CrawlConfig(
            max_attempts=args.max_attempts,
            keep_separate_hosts=args.keep_separate_hosts,
            stay_in_same_directory=args.stay_in_same_directory,
            keep_any_file_type=args.any_file_type,
            file_extensions=args.file_types,
            filter_pattern=args.regex,
            verbose=args.verbose,
            max_workers=args.workers,
            timeout=args.timeout,
        )
        with build_session(
            verify_ssl=args.verify_ssl, pool_size=config.max_workers,
        ) as session:
            crawler = Crawler(config, fetch=make_fetcher(session, timeout=config.timeout))
            tree = crawler.crawl(args.url)
    except CrawlConfigError as exc:
        log.error("%s", exc)
        return 2

    text = dumps(tree)
    if args.output:
        out = Path(args.output)
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(text + "\n", encoding="utf-8")
        dirs, files = tree.count()
        log.info("Saved %d file(s) in %d folder(s) to %s", files, dirs, out.resolve())
    else:
        sys.stdout.write(text + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
