"""Verification of polynomial results by evaluation.

For operands a, b and a scalar m, every result polynomial is evaluated at
each z in [0, p) and compared with the same operation applied to a(z) and
b(z) through the tables.  The division identity ``a - (q*b + r) == 0`` is
checked symbolically as well.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from zpzpoly.errors import ZpzError
from zpzpoly.poly.polynomial import Polynomial
from zpzpoly.poly.ring import DivisionResult, PolynomialRing

_logger = logging.getLogger(__name__)

# (expected from tables, observed from the result polynomial)
Check = Tuple[int, int]


class EvaluationRow(BaseModel):
    model_config = ConfigDict(frozen=True)

    z: int
    a: int
    b: int
    sum: Check
    difference: Check
    scaled: Check
    product: Check
    division: Optional[Check] = None

    @property
    def ok(self) -> bool:
        checks = [self.sum, self.difference, self.scaled, self.product]
        if self.division is not None:
            checks.append(self.division)
        return all(expected == observed for expected, observed in checks)


class SelfCheckReport(BaseModel):
    model_config = ConfigDict(frozen=True)

    modulus: int
    scalar: int
    sum: Polynomial
    difference: Polynomial
    scaled: Polynomial
    product: Polynomial
    division: Optional[DivisionResult] = None
    division_error: Optional[str] = None
    division_identity_ok: Optional[bool] = None
    rows: Tuple[EvaluationRow, ...] = ()

    @property
    def ok(self) -> bool:
        if self.division_identity_ok is False:
            return False
        return all(row.ok for row in self.rows)


def verify_by_evaluation(
    ring: PolynomialRing, a: Polynomial, b: Polynomial, m: int
) -> SelfCheckReport:
    """Compute a+b, a-b, m*a, a*b and a/b and check them at every z."""
    t = ring.tables
    m = t.reduce(m)

    total = ring.add(a, b)
    difference = ring.subtract(a, b)
    scaled = ring.scale(m, a)
    product = ring.multiply(a, b)

    division: Optional[DivisionResult] = None
    division_error: Optional[str] = None
    identity_ok: Optional[bool] = None
    try:
        division = ring.divide(a, b)
    except ZpzError as exc:
        _logger.debug("Division skipped in self-check: %s", exc)
        division_error = type(exc).__name__
    else:
        recombined = ring.add(ring.multiply(division.quotient, b), division.remainder)
        identity_ok = ring.subtract(a, recombined).is_zero

    rows: List[EvaluationRow] = []
    for z in t.elements():
        az = ring.evaluate(a, z)
        bz = ring.evaluate(b, z)
        div_check: Optional[Check] = None
        if division is not None:
            qz = ring.evaluate(division.quotient, z)
            rz = ring.evaluate(division.remainder, z)
            div_check = (az, t.sum[t.product[qz][bz]][rz])
        rows.append(
            EvaluationRow(
                z=z,
                a=az,
                b=bz,
                sum=(t.sum[az][bz], ring.evaluate(total, z)),
                difference=(t.difference[az][bz], ring.evaluate(difference, z)),
                scaled=(t.product[m][az], ring.evaluate(scaled, z)),
                product=(t.product[az][bz], ring.evaluate(product, z)),
                division=div_check,
            )
        )

    report = SelfCheckReport(
        modulus=t.modulus,
        scalar=m,
        sum=total,
        difference=difference,
        scaled=scaled,
        product=product,
        division=division,
        division_error=division_error,
        division_identity_ok=identity_ok,
        rows=tuple(rows),
    )
    if not report.ok:
        _logger.warning("Self-check failed in Z/%dZ", t.modulus)
    return report
