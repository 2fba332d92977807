import unittest

from formulamass.quantities import (
    mass_for_solution,
    mass_from_moles,
    moles_from_mass,
    quick_calculations,
)


class TestQuantities(unittest.TestCase):
    def test_conversions(self):
        self.assertAlmostEqual(moles_from_mass(36.03, 18.015), 2.0)
        self.assertAlmostEqual(mass_from_moles(0.5, 58.44), 29.22)
        # 0.1 M NaCl, 250 mL
        self.assertAlmostEqual(mass_for_solution(0.1, 0.25, 58.44), 1.461)

    def test_rejects_bad_input(self):
        with self.assertRaises(ValueError):
            moles_from_mass(1.0, 0.0)
        with self.assertRaises(ValueError):
            mass_from_moles(-1.0, 18.0)
        with self.assertRaises(ValueError):
            mass_for_solution(0.1, -1.0, 18.0)

    def test_quick_calculations(self):
        quick = quick_calculations(100.0)
        self.assertAlmostEqual(quick.grams_per_mole, 100.0)
        self.assertAlmostEqual(quick.moles_in_10_mg, 1e-4)
        self.assertAlmostEqual(quick.moles_in_1_g, 0.01)
        self.assertAlmostEqual(quick.grams_for_1_mm_per_litre, 0.1)


if __name__ == '__main__':
    unittest.main()
