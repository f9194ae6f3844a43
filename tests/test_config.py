"""
Tests for CrawlConfig validation and defaults.
"""

import dataclasses
import re
import unittest

from crawl_http.config import (
    DEFAULT_FILE_EXTENSIONS,
    DEFAULT_MAX_ATTEMPTS,
    CrawlConfig,
    CrawlConfigError,
)


class TestDefaults(unittest.TestCase):
    def test_documented_defaults(self):
        cfg = CrawlConfig()
        self.assertEqual(cfg.max_attempts, 5)
        self.assertEqual(DEFAULT_MAX_ATTEMPTS, 5)
        self.assertFalse(cfg.keep_separate_hosts)
        self.assertTrue(cfg.stay_in_same_directory)
        self.assertFalse(cfg.keep_any_file_type)
        self.assertIsNone(cfg.filter_pattern)
        self.assertFalse(cfg.verbose)

    def test_default_extensions(self):
        self.assertEqual(
            DEFAULT_FILE_EXTENSIONS,
            {"wav", "ogg", "oga", "mp3", "mp4", "m4a", "mov", "mpga", "mod"},
        )

    def test_dotted_extensions(self):
        cfg = CrawlConfig(file_extensions={"mp3", ".flac"})
        self.assertEqual(cfg.dotted_extensions, {".mp3", ".flac"})


class TestValidation(unittest.TestCase):
    def test_pattern_string_compiled(self):
        cfg = CrawlConfig(filter_pattern=r"mp3$")
        self.assertIsInstance(cfg.filter_pattern, re.Pattern)

    def test_compiled_pattern_kept(self):
        pattern = re.compile("ogg")
        self.assertIs(CrawlConfig(filter_pattern=pattern).filter_pattern, pattern)

    def test_bad_pattern(self):
        with self.assertRaises(CrawlConfigError):
            CrawlConfig(filter_pattern="(unclosed")

    def test_zero_attempts(self):
        with self.assertRaises(CrawlConfigError):
            CrawlConfig(max_attempts=0)

    def test_zero_workers(self):
        with self.assertRaises(CrawlConfigError):
            CrawlConfig(max_workers=0)

    def test_negative_timeout(self):
        with self.assertRaises(CrawlConfigError):
            CrawlConfig(timeout=-1)

    def test_extension_string_rejected(self):
        with self.assertRaises(CrawlConfigError):
            CrawlConfig(file_extensions="mp3")

    def test_config_error_is_value_error(self):
        self.assertTrue(issubclass(CrawlConfigError, ValueError))

    def test_frozen(self):
        cfg = CrawlConfig()
        with self.assertRaises(dataclasses.FrozenInstanceError):
            cfg.max_attempts = 9


if __name__ == "__main__":
    unittest.main()
