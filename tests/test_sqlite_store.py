import tempfile
import unittest
from pathlib import Path

from formulamass.evaluator import evaluate
from formulamass.persistence import sqlite_store


class TestSqliteStore(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.connection = sqlite_store.connect(Path(self._tmp.name) / "nested" / "history.db")
        sqlite_store.ensure_schema(self.connection)

    def tearDown(self):
        self.connection.close()
        self._tmp.cleanup()

    def test_round_trip(self):
        first = sqlite_store.save_evaluation(self.connection, evaluate("H2O"))
        second = sqlite_store.save_evaluation(
            self.connection, evaluate("Xx2"), recorded_utc="2024-01-01T00:00:00+00:00"
        )
        self.assertLess(first, second)

        entries = sqlite_store.list_evaluations(self.connection)
        self.assertEqual([e["formula"] for e in entries], ["Xx2", "H2O"])

        failure, success = entries
        self.assertFalse(failure["ok"])
        self.assertEqual(failure["error"], "unknown element: Xx")
        self.assertIsNone(failure["molecular_weight"])
        self.assertEqual(failure["recorded_utc"], "2024-01-01T00:00:00+00:00")

        self.assertTrue(success["ok"])
        self.assertAlmostEqual(success["molecular_weight"], 18.015, places=3)
        self.assertEqual(success["payload"]["distinctElementCount"], 2)

    def test_limit(self):
        for formula in ("H2", "O2", "N2"):
            sqlite_store.save_evaluation(self.connection, evaluate(formula))
        entries = sqlite_store.list_evaluations(self.connection, limit=2)
        self.assertEqual([e["formula"] for e in entries], ["N2", "O2"])


if __name__ == '__main__':
    unittest.main()
