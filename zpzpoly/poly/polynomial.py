"""Polynomial values over Z/pZ.

A polynomial of degree n is stored as ``(degree, c0 .. cn)`` together
with the modulus it was built for.  The zero polynomial has degree -1 and
no coefficients.  Instances are frozen; arithmetic lives in
``zpzpoly.poly.ring``.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, model_validator

from zpzpoly.arith.tables import FieldTables
from zpzpoly.config import N_MAX, ZERO_DEGREE
from zpzpoly.errors import CoefficientCountError, DegreeTooLarge


class Polynomial(BaseModel):
    """A normalized univariate polynomial with coefficients mod ``modulus``."""

    model_config = ConfigDict(frozen=True)

    modulus: int
    degree: int = ZERO_DEGREE
    coefficients: Tuple[int, ...] = ()

    @model_validator(mode="after")
    def _check_invariants(self) -> "Polynomial":
        if self.degree < ZERO_DEGREE:
            raise ValueError(f"degree must be >= {ZERO_DEGREE}, got {self.degree}")
        if self.degree > N_MAX:
            raise ValueError(f"degree {self.degree} exceeds the maximum ({N_MAX})")
        if len(self.coefficients) != self.degree + 1:
            raise ValueError(
                f"degree {self.degree} needs {self.degree + 1} coefficients, "
                f"got {len(self.coefficients)}"
            )
        if any(c < 0 or c >= self.modulus for c in self.coefficients):
            raise ValueError(f"coefficients must lie in [0, {self.modulus})")
        if self.degree >= 0 and self.coefficients[-1] == 0:
            raise ValueError("leading coefficient must be non-zero")
        return self

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def from_coefficients(
        cls, tables: FieldTables, coeffs: Sequence[int], degree: int
    ) -> "Polynomial":
        """Build a polynomial from an already-parsed ``(degree, coeffs)`` pair.

        Raw integers are reduced mod p and the result is normalized.  A
        negative degree stands for the zero polynomial; coefficients past
        ``degree`` are ignored.
        """
        if degree > N_MAX:
            raise DegreeTooLarge(f"Degree {degree} exceeds the maximum ({N_MAX})")
        return cls.normalized(tables, coeffs, degree)

    @classmethod
    def normalized(
        cls, tables: FieldTables, coeffs: Sequence[int], degree: int
    ) -> "Polynomial":
        """Strip zero leading terms from ``coeffs[0..degree]``.

        Coefficients are reduced mod p first.  The scan walks down from
        ``degree`` and, unlike a scan that stops at index 0, also drops a
        zero constant term so an all-zero input becomes degree -1.  Raises
        ``DegreeTooLarge`` when the normalized degree is above N_MAX.
        """
        if degree < 0:
            return cls.zero(tables)
        if len(coeffs) < degree + 1:
            raise CoefficientCountError(
                f"Degree {degree} needs {degree + 1} coefficients, got {len(coeffs)}"
            )
        reduced = [tables.reduce(c) for c in coeffs[: degree + 1]]
        while degree >= 0 and reduced[degree] == 0:
            degree -= 1
        if degree > N_MAX:
            raise DegreeTooLarge(f"Degree {degree} exceeds the maximum ({N_MAX})")
        return cls(
            modulus=tables.modulus,
            degree=degree,
            coefficients=tuple(reduced[: degree + 1]),
        )

    @classmethod
    def zero(cls, tables: FieldTables) -> "Polynomial":
        return cls(modulus=tables.modulus)

    @classmethod
    def constant(cls, tables: FieldTables, c: int) -> "Polynomial":
        return cls.normalized(tables, [c], 0)

    @classmethod
    def monomial(cls, tables: FieldTables, c: int, i: int) -> "Polynomial":
        """Return ``c * x**i``."""
        if i < 0:
            raise ValueError(f"Monomial exponent must be >= 0, got {i}")
        if i > N_MAX:
            raise DegreeTooLarge(f"Degree {i} exceeds the maximum ({N_MAX})")
        coeffs = [0] * (i + 1)
        coeffs[i] = c
        return cls.normalized(tables, coeffs, i)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def is_zero(self) -> bool:
        return self.degree == ZERO_DEGREE

    @property
    def leading_coefficient(self) -> Optional[int]:
        if self.is_zero:
            return None
        return self.coefficients[self.degree]

    def coefficient(self, i: int) -> int:
        """Coefficient of ``x**i``; zero above the degree."""
        if 0 <= i <= self.degree:
            return self.coefficients[i]
        return 0

    def as_pair(self) -> Tuple[int, List[int]]:
        """Externally observable state: ``(degree, [c0, ..., cn])``."""
        return self.degree, list(self.coefficients)
