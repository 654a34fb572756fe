"""Sparse polynomials of one variable.

A Polynomial holds a tuple of Terms (coefficient, exponent) sorted by
descending exponent.  Only the terms that are present are stored, so x^1000+1
costs two terms.

Construction sorts the given terms but, unless the "merge-input-terms" option
is set, keeps duplicate exponents and zero coefficients exactly as given.  Use
Polynomial.canonical to always merge them.  Sums and products come out sorted
with unique exponents; sums also drop exact zeros.
"""

from collections import namedtuple
import math
import numbers

from sparsepoly.opts import Option
from sparsepoly import logging
from sparsepoly.pprint import pprint

merge_input_terms = Option("merge-input-terms", bool, False,
    description="Merge duplicate exponents and drop zero coefficients when a polynomial is built from raw terms")
prune_product_zeros = Option("prune-product-zeros", bool, False,
    description="Drop product terms whose accumulated coefficient cancels to exactly zero")
max_terms = Option("max-terms", int, 0, metavar="N", minimum=0,
    description="Refuse to build polynomials with more than N terms; 0 means no limit")

class PolynomialError(Exception):
    pass

class InvalidExponent(PolynomialError, ValueError):
    pass

class NonFiniteCoefficient(PolynomialError, ValueError):
    pass

class CapacityExceeded(PolynomialError):
    pass

def check_coefficient(c) -> float:
    if isinstance(c, bool) or not isinstance(c, numbers.Real):
        raise NonFiniteCoefficient("coefficient must be a real number, got {!r}".format(c))
    try:
        c = float(c)
    except OverflowError:
        raise NonFiniteCoefficient("integer coefficient is too large for a float")
    if not math.isfinite(c):
        raise NonFiniteCoefficient("coefficient must be finite, got {}".format(c))
    return c

def check_exponent(e) -> int:
    """Exponents are non-negative integers.

    Integral floats such as 2.0 are accepted and converted; bools are not.
    """
    if isinstance(e, bool):
        raise InvalidExponent("exponent must be an integer, got {!r}".format(e))
    if isinstance(e, numbers.Integral):
        e = int(e)
    elif isinstance(e, numbers.Real) and float(e).is_integer():
        e = int(e)
    else:
        raise InvalidExponent("exponent must be an integer, got {!r}".format(e))
    if e < 0:
        raise InvalidExponent("exponent must be non-negative, got {}".format(e))
    return e

class Term(namedtuple("Term", ["coefficient", "exponent"])):
    """The monomial coefficient * x^exponent."""
    __slots__ = ()

    def __new__(cls, coefficient, exponent):
        return super().__new__(cls, check_coefficient(coefficient), check_exponent(exponent))

    def __repr__(self):
        return "Term({!r}, {!r})".format(self.coefficient, self.exponent)

    def is_zero(self):
        return self.coefficient == 0

def as_term(t) -> Term:
    if isinstance(t, Term):
        return t
    try:
        coefficient, exponent = t
    except (TypeError, ValueError):
        raise PolynomialError("expected a (coefficient, exponent) pair, got {!r}".format(t))
    return Term(coefficient, exponent)

def sort_terms(terms):
    """Sort by descending exponent.  Terms with equal exponents keep their order."""
    return sorted(terms, key=lambda t: t.exponent, reverse=True)

def merge_terms(terms):
    """Sort, sum coefficients of equal exponents, and drop exact zeros."""
    merged = []
    for t in sort_terms(terms):
        if merged and merged[-1].exponent == t.exponent:
            merged[-1] = Term(merged[-1].coefficient + t.coefficient, t.exponent)
        else:
            merged.append(t)
    return [t for t in merged if not t.is_zero()]

def _check_capacity(terms):
    limit = max_terms.value
    if limit > 0 and len(terms) > limit:
        raise CapacityExceeded("polynomial has {} terms; the limit is {}".format(len(terms), limit))

def _power(x, e):
    """x ** e, giving a signed infinity instead of raising on overflow."""
    try:
        return x ** e
    except OverflowError:
        negative = x < 0 and e % 2 == 1
        return -math.inf if negative else math.inf

class Polynomial(object):
    __slots__ = ("terms",)

    def __init__(self, terms=()):
        terms = [as_term(t) for t in terms]
        if merge_input_terms.value:
            n = len(terms)
            terms = merge_terms(terms)
            if len(terms) != n:
                logging.event("merged {} input terms into {}".format(n, len(terms)))
        else:
            terms = sort_terms(terms)
        _check_capacity(terms)
        self.terms = tuple(terms)

    @classmethod
    def canonical(cls, terms):
        """Build a polynomial in canonical form regardless of "merge-input-terms"."""
        return cls._from_terms(merge_terms(as_term(t) for t in terms))

    @classmethod
    def _from_terms(cls, terms):
        # Terms are already validated; only sort and check the size.
        terms = sort_terms(terms)
        _check_capacity(terms)
        res = cls.__new__(cls)
        res.terms = tuple(terms)
        return res

    def __hash__(self):
        return hash(self.terms)

    def __eq__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.terms == other.terms

    def __len__(self):
        return len(self.terms)

    def __iter__(self):
        return iter(self.terms)

    def __str__(self):
        return pprint(self)

    def __repr__(self):
        return "Polynomial({!r})".format(list(self.terms))

    def is_zero(self):
        return all(t.is_zero() for t in self.terms)

    def leading_term(self):
        """The first term with a non-zero coefficient, or None."""
        for t in self.terms:
            if not t.is_zero():
                return t
        return None

    def degree(self):
        t = self.leading_term()
        return None if t is None else t.exponent

    def coefficient(self, exponent):
        return sum((t.coefficient for t in self.terms if t.exponent == exponent), 0.0)

    def add(self, other):
        """Merge two sorted term sequences.

        Coefficients of equal exponents are summed and the result is kept
        only if it is not exactly zero.  Unmatched terms are copied as they
        are.
        """
        a, b = self.terms, other.terms
        i = j = 0
        res = []
        while i < len(a) and j < len(b):
            s, t = a[i], b[j]
            if s.exponent == t.exponent:
                c = s.coefficient + t.coefficient
                if c != 0:
                    res.append(Term(c, s.exponent))
                i += 1
                j += 1
            elif s.exponent > t.exponent:
                res.append(s)
                i += 1
            else:
                res.append(t)
                j += 1
        res.extend(a[i:])
        res.extend(b[j:])
        return Polynomial._from_terms(res)

    def multiply(self, other):
        """Multiply every term of self by every term of other.

        Products with the same exponent are accumulated.  A coefficient that
        cancels to zero stays in the result unless "prune-product-zeros" is
        set.
        """
        exponents = []
        coefficients = []
        for s in self.terms:
            for t in other.terms:
                e = s.exponent + t.exponent
                c = s.coefficient * t.coefficient
                for k, existing in enumerate(exponents):
                    if existing == e:
                        coefficients[k] += c
                        break
                else:
                    exponents.append(e)
                    coefficients.append(c)
        res = [Term(c, e) for c, e in zip(coefficients, exponents)]
        if prune_product_zeros.value:
            res = [t for t in res if not t.is_zero()]
        return Polynomial._from_terms(res)

    def evaluate(self, x) -> float:
        """Sum of c * x^e, accumulated in stored term order.  0^0 is 1."""
        x = float(x)
        res = 0.0
        for t in self.terms:
            res += t.coefficient * _power(x, t.exponent)
        return res

    def __add__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.add(other)

    def __mul__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.multiply(other)

    def __call__(self, x):
        return self.evaluate(x)

Polynomial.ZERO = Polynomial()
Polynomial.ONE  = Polynomial([Term(1, 0)])
Polynomial.X    = Polynomial([Term(1, 1)])
