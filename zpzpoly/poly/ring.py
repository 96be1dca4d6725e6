"""Polynomial arithmetic over Z/pZ.

Every element operation is a lookup in the ring's ``FieldTables``; no
method does raw modular arithmetic on coefficients.

API
---
normalize(coeffs, degree)  -> Polynomial
evaluate(f, z)             -> int          (Horner, z reduced mod p)
evaluate_many(f, points)   -> list of int
negate(f), add(f, g), subtract(f, g), scale(m, f), multiply(f, g)
divide(a, b)               -> DivisionResult(quotient, remainder)
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Sequence

from pydantic import BaseModel, ConfigDict

from zpzpoly.arith.tables import FieldTables
from zpzpoly.errors import (
    DegreeMismatch,
    DivisionByZero,
    ModulusMismatch,
    NonInvertibleLeadingCoefficient,
)
from zpzpoly.poly.polynomial import Polynomial

_logger = logging.getLogger(__name__)


class DivisionResult(BaseModel):
    """Outcome of a successful Euclidean division ``a = q*b + r``."""

    model_config = ConfigDict(frozen=True)

    quotient: Polynomial
    remainder: Polynomial


class PolynomialRing:
    """(Z/pZ)[x] for the modulus of *tables*."""

    def __init__(self, tables: FieldTables) -> None:
        self.tables = tables

    @property
    def modulus(self) -> int:
        return self.tables.modulus

    def _check(self, *polys: Polynomial) -> None:
        for f in polys:
            if f.modulus != self.tables.modulus:
                raise ModulusMismatch(
                    f"Polynomial over Z/{f.modulus}Z used in Z/{self.tables.modulus}Z"
                )

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    def polynomial(self, coeffs: Sequence[int], degree: int) -> Polynomial:
        """Shorthand for ``Polynomial.from_coefficients`` with this ring's tables."""
        return Polynomial.from_coefficients(self.tables, coeffs, degree)

    def zero(self) -> Polynomial:
        return Polynomial.zero(self.tables)

    def normalize(self, coeffs: Sequence[int], degree: int) -> Polynomial:
        """Reduce *coeffs* mod p and drop zero leading terms.

        An all-zero input yields degree -1.  Raises ``CoefficientCountError``
        when fewer than ``degree + 1`` coefficients are given.
        """
        return Polynomial.normalized(self.tables, coeffs, degree)

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------

    def evaluate(self, f: Polynomial, z: int) -> int:
        """Evaluate *f* at *z* with Horner's rule."""
        self._check(f)
        if f.is_zero:
            return 0
        t = self.tables
        z = t.reduce(z)
        c = f.coefficients
        value = c[f.degree]
        for i in range(f.degree, 0, -1):
            value = t.sum[c[i - 1]][t.product[z][value]]
        return value

    def evaluate_many(self, f: Polynomial, points: Iterable[int]) -> List[int]:
        return [self.evaluate(f, z) for z in points]

    # ------------------------------------------------------------------
    # Additive structure
    # ------------------------------------------------------------------

    def negate(self, f: Polynomial) -> Polynomial:
        # -c is non-zero whenever c is, so the degree is unchanged.
        self._check(f)
        return Polynomial(
            modulus=f.modulus,
            degree=f.degree,
            coefficients=tuple(self.tables.negate[c] for c in f.coefficients),
        )

    def add(self, a: Polynomial, b: Polynomial) -> Polynomial:
        self._check(a, b)
        t = self.tables
        lo = min(a.degree, b.degree)
        hi = max(a.degree, b.degree)
        longer = a if a.degree >= b.degree else b

        coeffs = [t.sum[a.coefficients[k]][b.coefficients[k]] for k in range(lo + 1)]
        # The shorter operand is implicitly zero past its own degree.
        coeffs.extend(longer.coefficients[lo + 1 : hi + 1])
        return self.normalize(coeffs, hi)

    def subtract(self, a: Polynomial, b: Polynomial) -> Polynomial:
        return self.add(a, self.negate(b))

    # ------------------------------------------------------------------
    # Multiplicative structure
    # ------------------------------------------------------------------

    def scale(self, m: int, f: Polynomial) -> Polynomial:
        """Multiply every coefficient of *f* by the scalar *m* (reduced mod p)."""
        self._check(f)
        if f.is_zero:
            return f
        row = self.tables.product[self.tables.reduce(m)]
        return self.normalize([row[c] for c in f.coefficients], f.degree)

    def multiply(self, a: Polynomial, b: Polynomial) -> Polynomial:
        """Convolution product; the degree may drop when p is composite.

        Raises ``DegreeTooLarge`` when the normalized product exceeds N_MAX.
        """
        self._check(a, b)
        if a.is_zero or b.is_zero:
            return self.zero()
        t = self.tables
        degree = a.degree + b.degree
        coeffs = [0] * (degree + 1)
        for i, ai in enumerate(a.coefficients):
            row = t.product[ai]
            for j, bj in enumerate(b.coefficients):
                coeffs[i + j] = t.sum[coeffs[i + j]][row[bj]]
        return self.normalize(coeffs, degree)

    # ------------------------------------------------------------------
    # Euclidean division
    # ------------------------------------------------------------------

    def divide(self, a: Polynomial, b: Polynomial) -> DivisionResult:
        """Long division of *a* by *b*.

        Fails with ``DivisionByZero`` for a zero divisor, ``DegreeMismatch``
        when ``deg b > deg a`` and ``NonInvertibleLeadingCoefficient`` when
        the leading coefficient of *b* has no inverse mod p.  On success
        ``a == q*b + r`` and ``deg r < deg b``.
        """
        self._check(a, b)
        t = self.tables
        if b.is_zero:
            raise DivisionByZero("Division by the zero polynomial")
        if b.degree > a.degree:
            raise DegreeMismatch(
                f"Divisor degree {b.degree} exceeds dividend degree {a.degree}"
            )
        lead = b.leading_coefficient
        if t.inverse[lead] is None:
            raise NonInvertibleLeadingCoefficient(
                f"Leading coefficient {lead} of the divisor is not invertible mod {t.modulus}"
            )

        _logger.debug(
            "Dividing degree %d by degree %d in Z/%dZ", a.degree, b.degree, t.modulus
        )
        q_degree = a.degree - b.degree
        q = [0] * (q_degree + 1)
        remainder = a
        for i in range(q_degree, -1, -1):
            # Read the remainder at x^(i + deg b) rather than its current
            # leading term, which may sit lower after a multi-term cancellation.
            q[i] = t.quotient[remainder.coefficient(i + b.degree)][lead]
            if q[i] == 0:
                continue
            term = Polynomial.monomial(t, q[i], i)
            remainder = self.subtract(remainder, self.multiply(term, b))

        return DivisionResult(quotient=self.normalize(q, q_degree), remainder=remainder)
