#!/usr/bin/env python3
"""
Tests for the license record and its canonical serialization.
"""

import dataclasses
import json
import unittest

from license_issuer.models import LicenseRecord, SignedLicense, IssueResult


class TestCanonicalSerialization(unittest.TestCase):
    """The signing input must be byte-for-byte reproducible."""

    def setUp(self):
        self.record = LicenseRecord(
            licensed_to="admin@example.com",
            domain="mail.example.com",
            expires="2099-12-31",
        )

    def test_exact_bytes(self):
        self.assertEqual(
            self.record.canonical_bytes(),
            b'{"licensed_to":"admin@example.com","domain":"mail.example.com","expires":"2099-12-31"}',
        )

    def test_serializing_twice_is_identical(self):
        same = LicenseRecord("admin@example.com", "mail.example.com", "2099-12-31")
        self.assertEqual(self.record.canonical_bytes(), self.record.canonical_bytes())
        self.assertEqual(self.record.canonical_bytes(), same.canonical_bytes())

    def test_field_order_is_fixed_not_sorted(self):
        keys = list(json.loads(self.record.canonical_bytes()).keys())
        self.assertEqual(keys, ["licensed_to", "domain", "expires"])

    def test_non_ascii_is_not_escaped(self):
        record = LicenseRecord("jürgen@example.com", "example.com", "2099-01-01")
        self.assertIn("jürgen".encode("utf-8"), record.canonical_bytes())
        self.assertNotIn(b"\\u", record.canonical_bytes())

    def test_record_is_immutable(self):
        with self.assertRaises(dataclasses.FrozenInstanceError):
            self.record.expires = "2100-01-01"


class TestSignedLicense(unittest.TestCase):
    """The written document layout."""

    def setUp(self):
        record = LicenseRecord("admin@example.com", "mail.example.com", "2099-12-31")
        self.signed = SignedLicense(record=record, signature="c2lnbmF0dXJl", algorithm="RSA-SHA256")

    def test_to_dict_appends_signature_last(self):
        self.assertEqual(
            list(self.signed.to_dict().items()),
            [
                ("licensed_to", "admin@example.com"),
                ("domain", "mail.example.com"),
                ("expires", "2099-12-31"),
                ("signature", "c2lnbmF0dXJl"),
            ],
        )

    def test_algorithm_is_not_part_of_the_document(self):
        self.assertNotIn("algorithm", self.signed.to_dict())

    def test_to_json_is_pretty_printed(self):
        self.assertEqual(
            self.signed.to_json(),
            '{\n'
            '  "licensed_to": "admin@example.com",\n'
            '  "domain": "mail.example.com",\n'
            '  "expires": "2099-12-31",\n'
            '  "signature": "c2lnbmF0dXJl"\n'
            '}',
        )

    def test_issue_result_to_dict(self):
        result = IssueResult(ok=True, license=self.signed)
        data = result.to_dict()
        self.assertTrue(data["ok"])
        self.assertEqual(data["license"]["signature"], "c2lnbmF0dXJl")
        self.assertIsNone(data["error"])
        self.assertEqual(data["exit_code"], 0)


if __name__ == "__main__":
    unittest.main()
