import math
import unittest

from formulamass.config import EvaluatorSettings
from formulamass.evaluator import compose, evaluate
from formulamass.models import ErrorKind, EvaluationFailure, EvaluationSuccess
from formulamass.parser import parse_formula


class TestEvaluateScenarios(unittest.TestCase):
    def test_water(self):
        result = evaluate("H2O")
        self.assertIsInstance(result, EvaluationSuccess)
        self.assertTrue(result.ok)
        self.assertAlmostEqual(result.molecular_weight, 18.015, places=3)
        self.assertEqual([e.symbol for e in result.composition], ["H", "O"])
        hydrogen, oxygen = result.composition
        self.assertEqual(hydrogen.count, 2)
        self.assertAlmostEqual(hydrogen.percent_composition, 11.19, places=2)
        self.assertEqual(oxygen.count, 1)
        self.assertAlmostEqual(oxygen.percent_composition, 88.81, places=2)
        self.assertEqual(result.formatted_molar_mass, "18.0150 g/mol")

    def test_glucose(self):
        result = evaluate("C6H12O6")
        self.assertAlmostEqual(result.molecular_weight, 180.156, places=3)
        self.assertEqual(result.distinct_element_count, 3)
        self.assertEqual(result.counts, {"H": 12, "C": 6, "O": 6})
        self.assertEqual(result.hill_formula, "C6H12O6")

    def test_calcium_hydroxide(self):
        result = evaluate("Ca(OH)2")
        self.assertEqual(result.counts, {"H": 2, "O": 2, "Ca": 1})
        self.assertAlmostEqual(result.molecular_weight, 74.093, delta=0.01)

    def test_ammonium_sulfate(self):
        result = evaluate("(NH4)2SO4")
        self.assertEqual(result.counts, {"H": 8, "N": 2, "O": 4, "S": 1})
        self.assertAlmostEqual(result.molecular_weight, 132.14, delta=0.01)
        self.assertEqual([e.symbol for e in result.composition], ["H", "N", "O", "S"])

    def test_unknown_element(self):
        result = evaluate("Xx2")
        self.assertIsInstance(result, EvaluationFailure)
        self.assertFalse(result.ok)
        self.assertEqual(result.kind, ErrorKind.UNKNOWN_ELEMENT)
        self.assertEqual(result.message, "unknown element: Xx")
        self.assertEqual(result.symbol, "Xx")

    def test_empty(self):
        result = evaluate("")
        self.assertEqual(result.kind, ErrorKind.EMPTY)
        self.assertEqual(result.message, "empty formula")

    def test_stray_paren_position(self):
        result = evaluate("H2O)")
        self.assertEqual(result.kind, ErrorKind.SYNTAX)
        self.assertEqual(result.position, 3)

    def test_limit_failure_is_data(self):
        result = evaluate("((H))", EvaluatorSettings(max_depth=1))
        self.assertEqual(result.kind, ErrorKind.LIMIT)


class TestEvaluateHugeCounts(unittest.TestCase):
    def test_count_beyond_float_range(self):
        result = evaluate("H" + "9" * 400)
        self.assertIsInstance(result, EvaluationFailure)
        self.assertEqual(result.kind, ErrorKind.LIMIT)
        self.assertEqual(result.message, "molecular weight out of range")

    def test_count_with_too_many_digits(self):
        result = evaluate("H" + "1" * 5000)
        self.assertIsInstance(result, EvaluationFailure)
        self.assertEqual(result.kind, ErrorKind.LIMIT)

    def test_group_multiplier_overflow(self):
        result = evaluate("(H" + "9" * 200 + ")" + "9" * 200)
        self.assertEqual(result.kind, ErrorKind.LIMIT)

    def test_contribution_overflow(self):
        # Count fits in a float but count * atomic weight does not.
        result = evaluate("U1" + "0" * 307)
        self.assertEqual(result.kind, ErrorKind.LIMIT)

    def test_percentages_near_float_max(self):
        result = evaluate("H1" + "0" * 308 + "O")
        self.assertTrue(result.ok)
        self.assertTrue(math.isfinite(result.molecular_weight))
        percents = [e.percent_composition for e in result.composition]
        for percent in percents:
            self.assertTrue(0.0 <= percent <= 100.0, percent)
        self.assertTrue(math.isclose(sum(percents), 100.0, rel_tol=1e-9))


class TestEvaluateProperties(unittest.TestCase):
    FORMULAS = [
        "H2O",
        "C8H10N4O2",
        "C55H72MgN4O5",
        "K4(Fe(CN)6)",
        "Ca3(PO4)2",
        "((CH3)3C)2O",
        "UF6",
    ]

    def test_weight_conservation(self):
        for formula in self.FORMULAS:
            result = evaluate(formula)
            total = sum(e.weight_contribution for e in result.composition)
            self.assertTrue(
                math.isclose(total, result.molecular_weight, rel_tol=1e-9), formula
            )

    def test_percent_conservation(self):
        for formula in self.FORMULAS:
            result = evaluate(formula)
            total = sum(e.percent_composition for e in result.composition)
            self.assertTrue(math.isclose(total, 100.0, rel_tol=1e-9), formula)

    def test_sorted_by_atomic_number(self):
        for formula in self.FORMULAS:
            numbers = [e.element.atomic_number for e in evaluate(formula).composition]
            self.assertEqual(numbers, sorted(numbers), formula)

    def test_deterministic(self):
        for formula in self.FORMULAS + ["Xx", "H2O)"]:
            self.assertEqual(evaluate(formula), evaluate(formula))

    def test_concatenation_sums_counts(self):
        result = evaluate("H2" + "O" + "H3" + "C2" + "O4")
        self.assertEqual(result.counts, {"H": 5, "C": 2, "O": 5})

    def test_compose_matches_evaluate(self):
        self.assertEqual(compose(parse_formula("NaCl")), evaluate("NaCl"))


class TestResultDicts(unittest.TestCase):
    def test_success_dict(self):
        payload = evaluate("NaCl").to_dict()
        self.assertEqual(
            set(payload), {"molecularWeight", "composition", "distinctElementCount"}
        )
        self.assertEqual(payload["distinctElementCount"], 2)
        sodium = payload["composition"][0]
        self.assertEqual(sodium["symbol"], "Na")
        self.assertEqual(sodium["atomicNumber"], 11)
        self.assertEqual(
            set(sodium),
            {
                "symbol",
                "name",
                "atomicNumber",
                "atomicWeight",
                "count",
                "weightContribution",
                "percentComposition",
            },
        )

    def test_failure_dict(self):
        self.assertEqual(
            evaluate("H2O)").to_dict(),
            {
                "error": "invalid character ')' at position 3",
                "errorKind": "SYNTAX",
                "position": 3,
            },
        )
        self.assertEqual(
            evaluate("").to_dict(), {"error": "empty formula", "errorKind": "EMPTY"}
        )

    def test_entry_lookup(self):
        result = evaluate("CO2")
        self.assertEqual(result.entry("O").count, 2)
        self.assertIsNone(result.entry("N"))


if __name__ == '__main__':
    unittest.main()
