"""Configuration constants and the per-crawl option bundle."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

DEFAULT_MAX_ATTEMPTS = 5
DEFAULT_MAX_WORKERS = 4     # concurrent directory fetches
REQUEST_TIMEOUT = 15        # seconds per HTTP request

# Audio/video types kept when the extension filter is on (no leading dot)
DEFAULT_FILE_EXTENSIONS: frozenset[str] = frozenset([
    "wav", "ogg", "oga", "mp3", "mp4", "m4a", "mov", "mpga", "mod",
])

USER_AGENT = "crawl-http/1.0 (+directory listing crawler)"

# Schemes that can serve a directory listing
CRAWLABLE_SCHEMES = ("http", "https")


class CrawlConfigError(ValueError):
    """Raised for options that make a crawl impossible to start."""


@dataclass(frozen=True)
class CrawlConfig:
    """
    Options for one top-level crawl.

    The same instance is shared by every recursive directory fetch and is
    never modified once built.  ``filter_pattern`` may be given as a
    string; it is compiled here so that a malformed expression fails
    before any request is made.
    """

    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    keep_separate_hosts: bool = False
    stay_in_same_directory: bool = True
    keep_any_file_type: bool = False
    file_extensions: frozenset[str] = field(default=DEFAULT_FILE_EXTENSIONS)
    filter_pattern: "re.Pattern[str] | str | None" = None
    verbose: bool = False
    max_workers: int = DEFAULT_MAX_WORKERS
    timeout: float = REQUEST_TIMEOUT

    def __post_init__(self) -> None:
        if isinstance(self.max_attempts, bool) or not isinstance(self.max_attempts, int) \
                or self.max_attempts < 1:
            raise CrawlConfigError(
                f"max_attempts must be an integer >= 1, got {self.max_attempts!r}"
            )
        if isinstance(self.max_workers, bool) or not isinstance(self.max_workers, int) \
                or self.max_workers < 1:
            raise CrawlConfigError(
                f"max_workers must be an integer >= 1, got {self.max_workers!r}"
            )
        if not self.timeout or self.timeout <= 0:
            raise CrawlConfigError(f"timeout must be positive, got {self.timeout!r}")

        if isinstance(self.filter_pattern, str):
            try:
                compiled = re.compile(self.filter_pattern)
            except re.error as exc:
                raise CrawlConfigError(
                    f"Invalid filter pattern {self.filter_pattern!r}: {exc}"
                ) from exc
            # frozen dataclass: bypass __setattr__ for the normalised value
            object.__setattr__(self, "filter_pattern", compiled)

        if isinstance(self.file_extensions, str):
            raise CrawlConfigError("file_extensions must be a collection, not a string")
        object.__setattr__(
            self, "file_extensions",
            frozenset(ext.lstrip(".") for ext in self.file_extensions),
        )

    @property
    def dotted_extensions(self) -> frozenset[str]:
        """``file_extensions`` with a leading dot, as produced by splitext()."""
        return frozenset("." + ext for ext in self.file_extensions)
