#!/usr/bin/env python3
"""
Unit tests for settings and validators.
"""

import unittest
from unittest import mock

from pydantic import ValidationError

from nrql2csv.config import DaemonConfig, InsightsConfig, Settings, get_settings
from nrql2csv.query import Query
from nrql2csv.utils import validate_insights_config, validate_query

ENV = {
    "NEW_RELIC_ACCOUNT_ID": "12345",
    "NEW_RELIC_QUERY_KEY": "NRIQ-secret",
}


class TestInsightsConfig(unittest.TestCase):
    """Test cases for Insights settings."""

    def test_from_environment(self):
        """Test values are read from the environment."""
        with mock.patch.dict("os.environ", dict(ENV, NEW_RELIC_REGION="eu")):
            config = InsightsConfig()

        self.assertEqual(config.account_id, "12345")
        self.assertEqual(config.query_key, "NRIQ-secret")
        self.assertEqual(config.region, "EU")
        self.assertEqual(config.timeout, 60.0)

    def test_missing_values(self):
        """Test that the account and key are required."""
        with mock.patch.dict("os.environ", {}, clear=True):
            with self.assertRaises(ValidationError):
                InsightsConfig()


class TestDaemonConfig(unittest.TestCase):
    """Test cases for daemon settings."""

    def test_defaults(self):
        """Test the default port and host."""
        with mock.patch.dict("os.environ", {}, clear=True):
            config = DaemonConfig()

        self.assertEqual(config.port, 8080)
        self.assertEqual(config.host, "0.0.0.0")

    def test_port_from_environment(self):
        """Test $PORT overrides the default."""
        with mock.patch.dict("os.environ", {"PORT": "9000"}):
            self.assertEqual(DaemonConfig().port, 9000)


class TestSettings(unittest.TestCase):
    """Test the settings singleton."""

    def tearDown(self):
        Settings.reset()

    def test_singleton(self):
        """Test get_settings returns one shared instance until reset."""
        with mock.patch.dict("os.environ", ENV):
            first = get_settings()
            second = get_settings()
            self.assertIs(first, second)
            self.assertEqual(first.insights.account_id, "12345")

            Settings.reset()
            self.assertIsNot(get_settings(), first)


class TestValidators(unittest.TestCase):
    """Test validation helpers."""

    def test_valid_config(self):
        """Test a complete configuration passes."""
        is_valid, errors = validate_insights_config(
            {"account_id": "12345", "query_key": "key", "region": "US"}
        )
        self.assertTrue(is_valid)
        self.assertEqual(errors, [])

    def test_invalid_config(self):
        """Test every problem is reported."""
        is_valid, errors = validate_insights_config(
            {"account_id": "abc", "query_key": "", "region": "APAC"}
        )
        self.assertFalse(is_valid)
        self.assertIn("NEW_RELIC_ACCOUNT_ID should be numeric", errors)
        self.assertIn("NEW_RELIC_QUERY_KEY is required", errors)
        self.assertIn("NEW_RELIC_REGION should be 'US' or 'EU'", errors)

    def test_missing_account(self):
        """Test an absent account ID."""
        is_valid, errors = validate_insights_config({"query_key": "key"})
        self.assertFalse(is_valid)
        self.assertIn("NEW_RELIC_ACCOUNT_ID is required", errors)

    def test_valid_query(self):
        """Test a query with a table passes."""
        self.assertEqual(validate_query(Query(table="Transaction")), (True, []))

    def test_query_without_table(self):
        """Test a query without a table is rejected."""
        is_valid, errors = validate_query(Query(table=""))
        self.assertFalse(is_valid)
        self.assertIn("Missing --from flag", errors)

    def test_query_with_empty_column(self):
        """Test a blank column name is rejected."""
        is_valid, errors = validate_query(Query(table="Transaction", columns=["name", ""]))
        self.assertFalse(is_valid)


if __name__ == '__main__':
    unittest.main()
