"""Tests for integrator option sources."""

from __future__ import annotations

import sys
import tempfile
import textwrap
import unittest
from pathlib import Path

from storeopts.errors import ConfigurationError
from storeopts.sources import collect_source_options, resolve_source, split_entries

_SOURCE_MODULE = """
def as_mapping(provider):
    return {"Bucket": provider + "-bucket"}

def as_pairs(provider):
    return [("region", "us-east-1"), ("bucket", "override")]

def nothing(provider):
    return None

def broken(provider):
    return 42

NOT_CALLABLE = "region"
"""


class OptionSourceTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls) -> None:
        cls._tmp = tempfile.TemporaryDirectory()
        (Path(cls._tmp.name) / "storeopts_test_sources.py").write_text(textwrap.dedent(_SOURCE_MODULE))
        sys.path.insert(0, cls._tmp.name)

    @classmethod
    def tearDownClass(cls) -> None:
        sys.path.remove(cls._tmp.name)
        cls._tmp.cleanup()

    def test_entries_are_split_on_commas(self) -> None:
        self.assertEqual(split_entries(" a:b, ,c:d ,"), ["a:b", "c:d"])

    def test_sources_contribute_pairs_in_listing_order(self) -> None:
        pairs = collect_source_options(
            "storeopts_test_sources:as_mapping, storeopts_test_sources:nothing,"
            "storeopts_test_sources:as_pairs",
            "gcs",
        )

        self.assertEqual(
            pairs,
            [("Bucket", "gcs-bucket"), ("region", "us-east-1"), ("bucket", "override")],
        )

    def test_resolved_source_records_its_entry(self) -> None:
        source = resolve_source("storeopts_test_sources:as_pairs")

        self.assertEqual(source.module, "storeopts_test_sources")
        self.assertEqual(source.function, "as_pairs")
        self.assertEqual(source.pairs("s3")[0], ("region", "us-east-1"))

    def test_bad_return_value_names_the_entry(self) -> None:
        with self.assertRaises(ConfigurationError) as ctx:
            collect_source_options("storeopts_test_sources:broken", "s3")

        self.assertIn("STOREOPTS_OPTION_SOURCES", str(ctx.exception))
        self.assertIn("storeopts_test_sources:broken", str(ctx.exception))

    def test_malformed_or_missing_entries_raise_configuration_error(self) -> None:
        for entry in (
            "no_colon",
            ":fn",
            "storeopts_test_sources:",
            "storeopts_no_such_module:fn",
            "storeopts_test_sources:missing",
            "storeopts_test_sources:NOT_CALLABLE",
        ):
            with self.subTest(entry=entry):
                with self.assertRaises(ConfigurationError) as ctx:
                    collect_source_options(entry, "s3")
                self.assertIn("STOREOPTS_OPTION_SOURCES", str(ctx.exception))


if __name__ == "__main__":
    unittest.main()
