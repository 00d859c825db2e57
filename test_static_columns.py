#!/usr/bin/env python3
"""
Unit tests for the static columns decorator.
"""

import unittest

from nrql2csv.payloads import (
    EventsPayload,
    StaticColumn,
    StaticColumnsPayload,
    unmarshal_payload,
)


class TestStaticColumnsPayload(unittest.TestCase):
    """Test cases for appending static columns."""

    def setUp(self):
        """Set up test fixtures."""
        self.inner = EventsPayload([{"x": 1}], ["x"])

    def test_single_static_column(self):
        """Test one static column is appended to columns and rows."""
        payload = StaticColumnsPayload(self.inner, [StaticColumn("env", "prod")])

        self.assertEqual(payload.columns(), ["x", "env"])
        self.assertEqual(payload.rows(), [[1, "prod"]])

    def test_inner_payload_is_untouched(self):
        """Test the wrapped payload reads the same after decoration."""
        payload = StaticColumnsPayload(self.inner, [StaticColumn("env", "prod")])
        payload.columns()
        payload.rows()
        payload.rows()

        self.assertEqual(self.inner.columns(), ["x"])
        self.assertEqual(self.inner.rows(), [[1]])

    def test_declaration_order(self):
        """Test static columns keep their declared order."""
        payload = StaticColumnsPayload(self.inner, [
            StaticColumn("env", "prod"),
            StaticColumn("source", "browser"),
            StaticColumn("empty", ""),
        ])

        self.assertEqual(payload.columns(), ["x", "env", "source", "empty"])
        self.assertEqual(payload.rows(), [[1, "prod", "browser", ""]])

    def test_every_row_gets_values(self):
        """Test that the static values land on every row."""
        inner = EventsPayload([{"x": 1}, {"x": 2}, {"x": 3}], ["x"])
        payload = StaticColumnsPayload(inner, [StaticColumn("env", "prod")])

        self.assertEqual(payload.rows(), [[1, "prod"], [2, "prod"], [3, "prod"]])

    def test_no_static_columns(self):
        """Test an empty decorator is transparent."""
        payload = StaticColumnsPayload(self.inner)

        self.assertEqual(payload.columns(), ["x"])
        self.assertEqual(payload.rows(), [[1]])

    def test_select_star_columns(self):
        """Test decoration over lazily derived columns."""
        inner = unmarshal_payload(b'{"results": [{"events": [{"a": 1, "b": 2}]}]}')
        payload = StaticColumnsPayload(inner, [StaticColumn("env", "prod")])

        columns = payload.columns()
        self.assertEqual(columns[-1], "env")
        self.assertEqual(columns[:-1], inner.columns())
        self.assertEqual(len(payload.rows()[0]), len(columns))

    def test_over_facets(self):
        """Test decoration over a facet payload."""
        inner = unmarshal_payload(
            b'{"facets": [{"name": "api", "results": [{"count": 2}]},'
            b' {"name": "web", "results": [{"count": 5}]}],'
            b' "metadata": {"facet": "appName",'
            b' "contents": {"contents": [{"function": "count"}]}}}'
        )
        payload = StaticColumnsPayload(inner, [StaticColumn("env", "prod")])

        self.assertEqual(payload.columns(), ["appName", "count", "env"])
        self.assertEqual(payload.rows(), [["api", 2, "prod"], ["web", 5, "prod"]])


if __name__ == '__main__':
    unittest.main()
