"""Logging configuration for crawl-http."""

import logging

import colorlog

log = logging.getLogger("crawl-http")

_LOG_COLORS = {
    "DEBUG":    "cyan",
    "INFO":     "green",
    "WARNING":  "yellow",
    "ERROR":    "red",
    "CRITICAL": "bold_red",
}

# Colours for the [TAG] prefixes the crawler puts on its messages
_TAG_COLORS = {
    "[DIR]":     "\033[1;34m",
    "[FILE]":    "\033[32m",
    "[SKIP]":    "\033[90m",
    "[RETRY]":   "\033[36m",
    "[GIVE-UP]": "\033[1;31m",
}
_ANSI_RESET = "\033[0m"


class _TagFormatter(colorlog.ColoredFormatter):
    """ColoredFormatter that also highlights the crawler's ``[TAG]`` prefixes."""

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        for tag, style in _TAG_COLORS.items():
            if tag in text:
                text = text.replace(tag, f"{style}{tag}{_ANSI_RESET}", 1)
        return text


def setup_logging(debug: bool = False, verbose: bool = False) -> None:
    """
    Attach a coloured stderr handler to the ``crawl-http`` logger.

    *verbose* announces that per-link ``[DIR]``/``[FILE]``/``[SKIP]`` lines
    follow (the crawler emits them when ``CrawlConfig.verbose`` is set).
    *debug* lowers this logger and urllib3's to DEBUG and routes urllib3
    through the same handler.
    """
    level = logging.DEBUG if debug else logging.INFO
    log.setLevel(level)
    log.handlers.clear()

    # colorlog.StreamHandler writes to stderr, leaving stdout for the tree
    handler = colorlog.StreamHandler()
    handler.setFormatter(_TagFormatter(
        "%(log_color)s%(asctime)s [%(levelname)s]%(reset)s %(message)s",
        datefmt="%H:%M:%S",
        log_colors=_LOG_COLORS,
    ))
    log.addHandler(handler)

    if debug:
        urllib3_log = logging.getLogger("urllib3")
        urllib3_log.setLevel(logging.DEBUG)
        urllib3_log.handlers.clear()
        urllib3_log.addHandler(handler)

    if verbose:
        log.info(
            "Outputting verbosely. (Log output goes to STDERR - "
            "you can still redirect STDOUT to save your playlist.)"
        )
