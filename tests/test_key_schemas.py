"""Tests for provider key schemas and their lookup tables."""

from __future__ import annotations

import unittest
from enum import Enum

from storeopts.capabilities import Provider
from storeopts.errors import ProviderNotEnabledError, SchemaDefinitionError, UnknownConfigurationKey
from storeopts.keys import (
    AZURE_SCHEMA,
    GCS_SCHEMA,
    S3_SCHEMA,
    AmazonS3ConfigKey,
    AzureConfigKey,
    GoogleConfigKey,
    KeySchema,
    schema_for,
)


class KeySchemaParseTests(unittest.TestCase):
    def test_parse_is_case_insensitive(self) -> None:
        self.assertIs(S3_SCHEMA.parse("region"), AmazonS3ConfigKey.REGION)
        self.assertIs(S3_SCHEMA.parse("Region"), AmazonS3ConfigKey.REGION)
        self.assertIs(S3_SCHEMA.parse("REGION"), AmazonS3ConfigKey.REGION)
        self.assertIs(AZURE_SCHEMA.parse("Account_Name"), AzureConfigKey.ACCOUNT_NAME)
        self.assertIs(GCS_SCHEMA.parse("SERVICE_ACCOUNT_KEY"), GoogleConfigKey.SERVICE_ACCOUNT_KEY)

    def test_parse_rejects_prefixes_and_near_misses(self) -> None:
        for name in ("regio", "region_", " region", "aws_region", ""):
            with self.subTest(name=name):
                with self.assertRaises(UnknownConfigurationKey):
                    S3_SCHEMA.parse(name)

    def test_unknown_key_error_names_key_and_provider(self) -> None:
        with self.assertRaises(UnknownConfigurationKey) as ctx:
            AZURE_SCHEMA.parse("Bad_Key")

        self.assertEqual(ctx.exception.key, "bad_key")
        self.assertEqual(ctx.exception.provider, "azure")
        self.assertIn("bad_key", str(ctx.exception))
        self.assertIsInstance(ctx.exception, ValueError)

    def test_every_variant_has_one_canonical_name(self) -> None:
        for schema in (AZURE_SCHEMA, S3_SCHEMA, GCS_SCHEMA):
            with self.subTest(schema=schema):
                names = schema.names()
                self.assertEqual(len(names), len(schema.key_type))
                self.assertEqual(len(set(names)), len(names))
                for name in names:
                    self.assertEqual(name, name.lower())
                    self.assertEqual(schema.parse(name).value, name)

    def test_schemas_do_not_share_a_namespace(self) -> None:
        self.assertIn("account_name", AZURE_SCHEMA)
        self.assertNotIn("account_name", S3_SCHEMA)
        self.assertIn("Region", S3_SCHEMA)
        self.assertNotIn("region", GCS_SCHEMA)
        self.assertIsNot(S3_SCHEMA.parse("endpoint"), AZURE_SCHEMA.parse("endpoint"))


class KeySchemaDefinitionTests(unittest.TestCase):
    def test_uppercase_canonical_name_is_rejected(self) -> None:
        class BadKey(Enum):
            REGION = "Region"

        with self.assertRaises(SchemaDefinitionError):
            KeySchema(Provider.S3, BadKey)

    def test_duplicate_canonical_name_is_rejected(self) -> None:
        class DupKey(Enum):
            REGION = "region"
            ALSO_REGION = "region"

        with self.assertRaises(SchemaDefinitionError) as ctx:
            KeySchema(Provider.S3, DupKey)

        self.assertIn("REGION and ALSO_REGION", str(ctx.exception))

    def test_empty_canonical_name_is_rejected(self) -> None:
        class EmptyKey(Enum):
            NOTHING = ""

        with self.assertRaises(SchemaDefinitionError):
            KeySchema(Provider.GCS, EmptyKey)


class SchemaLookupTests(unittest.TestCase):
    def test_schema_for_resolves_aliases(self) -> None:
        self.assertIs(schema_for("aws"), S3_SCHEMA)
        self.assertIs(schema_for("GCP"), GCS_SCHEMA)
        self.assertIs(schema_for(Provider.AZURE), AZURE_SCHEMA)

    def test_http_has_no_schema(self) -> None:
        with self.assertRaises(ProviderNotEnabledError):
            schema_for("http")


if __name__ == "__main__":
    unittest.main()
