import sys
import unittest
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

from pydantic import ValidationError

from fluentjob.credentials import (
    ConfigurationEntry,
    CredentialBuilder,
    Credentials,
    CredentialsBuilder,
)
from fluentjob.errors import InvalidCredentialError


class CredentialBuilderTests(unittest.TestCase):
    def test_configuration_entries_keep_order_and_overwrite_in_place(self):
        credential = (
            CredentialBuilder.create()
            .with_name("hcatalog")
            .with_type("hcatalog")
            .with_configuration_entry("hcat.metastore.uri", "thrift://old:9083")
            .with_configuration_entry("hcat.metastore.principal", "hive/host@REALM")
            .with_configuration_entry("hcat.metastore.uri", "thrift://new:9083")
            .build()
        )

        self.assertEqual(
            credential.configuration_entries,
            (
                ConfigurationEntry(key="hcat.metastore.uri", value="thrift://new:9083"),
                ConfigurationEntry(key="hcat.metastore.principal", value="hive/host@REALM"),
            ),
        )
        self.assertEqual(
            list(credential.configuration),
            ["hcat.metastore.uri", "hcat.metastore.principal"],
        )

    def test_build_requires_name_and_type(self):
        with self.assertRaises(InvalidCredentialError) as ctx:
            CredentialBuilder.create().with_type("hbase").build()
        self.assertEqual(ctx.exception.subject, "name")

        with self.assertRaises(InvalidCredentialError) as ctx:
            CredentialBuilder.create().with_name("hbase").build()
        self.assertEqual(ctx.exception.subject, "type")

    def test_build_twice_yields_equal_values(self):
        builder = (
            CredentialBuilder.create()
            .with_name("hive2")
            .with_type("hive2")
            .with_configuration_entry("jdbcUrl", "jdbc://host/db")
        )
        self.assertEqual(builder.build(), builder.build())

    def test_credentials_are_immutable(self):
        credential = CredentialBuilder.create().with_name("hbase").with_type("hbase").build()
        with self.assertRaises(ValidationError):
            credential.name = "other"

    def test_create_from_existing_copies_fields(self):
        original = (
            CredentialBuilder.create()
            .with_name("hive2")
            .with_type("hive2")
            .with_configuration_entry("jdbcUrl", "jdbc://host/db")
            .build()
        )
        renamed = CredentialBuilder.create_from_existing(original).with_name("hive2-backup").build()

        self.assertEqual(renamed.type, "hive2")
        self.assertEqual(renamed.configuration, {"jdbcUrl": "jdbc://host/db"})
        self.assertEqual(original.name, "hive2")


class CredentialsBuilderTests(unittest.TestCase):
    def test_collects_credentials_in_order(self):
        hbase = CredentialBuilder.create().with_name("hbase").with_type("hbase").build()
        credentials = (
            CredentialsBuilder.create()
            .with_credential(hbase)
            .with_new_credential("hive2", "hive2", [("jdbcUrl", "jdbc://host/db")])
            .build()
        )

        self.assertIsInstance(credentials, Credentials)
        self.assertEqual(credentials.names(), ["hbase", "hive2"])
        self.assertEqual(len(credentials), 2)
        self.assertEqual(credentials.get("hive2").configuration, {"jdbcUrl": "jdbc://host/db"})
        self.assertIsNone(credentials.get("missing"))

    def test_create_from_existing_allows_pruning(self):
        credentials = (
            CredentialsBuilder.create()
            .with_new_credential("hbase", "hbase")
            .with_new_credential("hcatalog", "hcatalog")
            .build()
        )
        pruned = CredentialsBuilder.create_from_existing(credentials).without_credential("hbase").build()

        self.assertEqual(pruned.names(), ["hcatalog"])
        self.assertEqual(credentials.names(), ["hbase", "hcatalog"])
        self.assertEqual(CredentialsBuilder.create_from_existing(credentials).clear().build().names(), [])


if __name__ == "__main__":
    unittest.main()
