"""Dense arithmetic tables for Z/pZ.

A ``FieldTables`` instance holds six lookup tables for one modulus p:

  sum[a][b]        (a + b) mod p
  product[a][b]    (a * b) mod p
  negate[a]        (p - a) mod p
  inverse[a]       b with a*b = 1 mod p, or None when gcd(a, p) != 1
  difference[a][b] sum[a][negate[b]]
  quotient[a][b]   product[a][inverse[b]], or None when b is not a unit

``difference`` and ``quotient`` are derived from the other tables rather
than computed independently, so they cannot disagree with them.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from zpzpoly.arith import modular
from zpzpoly.config import P_MAX, P_MIN
from zpzpoly.errors import InvalidModulus

_logger = logging.getLogger(__name__)

Row = Tuple[int, ...]
OptionalRow = Tuple[Optional[int], ...]


class FieldTables(BaseModel):
    """Immutable lookup tables for arithmetic modulo ``modulus``."""

    model_config = ConfigDict(frozen=True)

    modulus: int
    sum: Tuple[Row, ...]
    product: Tuple[Row, ...]
    negate: Row
    inverse: OptionalRow
    difference: Tuple[Row, ...]
    quotient: Tuple[OptionalRow, ...]

    @classmethod
    def build(cls, p: int) -> "FieldTables":
        """Compute all tables for modulus *p*."""
        if isinstance(p, bool) or not isinstance(p, int):
            raise InvalidModulus(f"Modulus must be an int, got {p!r}")
        if p < P_MIN or p > P_MAX:
            raise InvalidModulus(f"Modulus {p} outside [{P_MIN}, {P_MAX}]")

        elements = range(p)
        sum_table = tuple(tuple((a + b) % p for b in elements) for a in elements)
        product_table = tuple(tuple((a * b) % p for b in elements) for a in elements)
        negate_table = tuple((p - a) % p for a in elements)
        inverse_table = tuple(modular.inverse(a, p) for a in elements)

        difference_table = tuple(
            tuple(sum_table[a][negate_table[b]] for b in elements) for a in elements
        )
        quotient_table = tuple(
            tuple(
                None if inverse_table[b] is None else product_table[a][inverse_table[b]]
                for b in elements
            )
            for a in elements
        )

        _logger.debug(
            "Built Z/%dZ tables: %d units of %d elements",
            p,
            sum(1 for x in inverse_table if x is not None),
            p,
        )
        return cls(
            modulus=p,
            sum=sum_table,
            product=product_table,
            negate=negate_table,
            inverse=inverse_table,
            difference=difference_table,
            quotient=quotient_table,
        )

    # ------------------------------------------------------------------
    # Convenience accessors
    # ------------------------------------------------------------------

    def elements(self) -> range:
        return range(self.modulus)

    def reduce(self, z: int) -> int:
        """Map any integer (negative included) into [0, modulus)."""
        return modular.reduce(z, self.modulus)

    def is_unit(self, a: int) -> bool:
        return self.inverse[a] is not None

    def units(self) -> List[int]:
        return [a for a in self.elements() if self.inverse[a] is not None]
