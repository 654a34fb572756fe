import unittest

from sparsepoly import opts
from sparsepoly.polynomials import Polynomial
from sparsepoly.pprint import format_coefficient, pprint

class TestPlain(unittest.TestCase):

    def test_positive_terms(self):
        self.assertEqual(pprint(Polynomial([(4, 2), (5, 1), (2, 0)])), "4x^2 +5x^1 +2x^0")

    def test_negative_terms(self):
        self.assertEqual(pprint(Polynomial([(3, 2), (-2, 1)])), "3x^2 -2x^1")
        self.assertEqual(pprint(Polynomial([(-1, 3), (2, 0)])), "-1x^3 +2x^0")

    def test_skips_zeros(self):
        self.assertEqual(pprint(Polynomial([(0, 3), (2, 1)])), "2x^1")
        self.assertEqual(pprint(Polynomial([(0, 3)])), "")

    def test_empty(self):
        self.assertEqual(pprint(Polynomial.ZERO), "")

    def test_fractions(self):
        self.assertEqual(pprint(Polynomial([(2.5, 0)])), "2.5x^0")

    def test_raw_terms(self):
        self.assertEqual(pprint([(1.0, 1), (-3.0, 0)]), "1x^1 -3x^0")

class TestCompact(unittest.TestCase):

    def test_example(self):
        p = Polynomial([(4, 2), (5, 1), (2, 0)])
        self.assertEqual(pprint(p, format="compact"), "4x^2+5x+2")

    def test_unit_coefficients(self):
        p = Polynomial([(-1, 3), (1, 1), (-0.5, 0)])
        self.assertEqual(pprint(p, format="compact"), "-x^3+x-0.5")

    def test_constants(self):
        self.assertEqual(pprint(Polynomial.ONE, format="compact"), "1")
        self.assertEqual(pprint(Polynomial([(-1, 0)]), format="compact"), "-1")

    def test_empty(self):
        self.assertEqual(pprint(Polynomial.ZERO, format="compact"), "")

class TestCoefficients(unittest.TestCase):

    def test_default_precision(self):
        self.assertEqual(format_coefficient(1/3), "0.333333")
        self.assertEqual(format_coefficient(7.0), "7")

    def test_digits(self):
        self.assertEqual(format_coefficient(1/3, digits=3), "0.333")
        self.assertEqual(pprint(Polynomial([(3.14159, 1)]), digits=2), "3.1x^1")

    def test_precision_option(self):
        with opts.override(precision=2):
            self.assertEqual(pprint(Polynomial([(3.14159, 1)])), "3.1x^1")
        self.assertEqual(pprint(Polynomial([(3.14159, 1)])), "3.14159x^1")

    def test_unknown_format(self):
        with self.assertRaises(ValueError):
            pprint(Polynomial.ONE, format="latex")
