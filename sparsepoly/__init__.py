"""Sparse polynomials of one variable: addition, multiplication, evaluation.

    >>> from sparsepoly import Polynomial
    >>> p = Polynomial([(3, 2), (2, 0)])
    >>> str(p + Polynomial([(1, 2), (5, 1)]))
    '4x^2 +5x^1 +2x^0'
"""

from sparsepoly.polynomials import (
    Polynomial, Term,
    PolynomialError, InvalidExponent, NonFiniteCoefficient, CapacityExceeded)
