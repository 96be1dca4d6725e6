"""Integer arithmetic modulo p.

These helpers work on plain Python ints and are only used while the
lookup tables are being built; polynomial code goes through
``FieldTables`` instead.
"""

from __future__ import annotations

from typing import Optional, Tuple


def reduce(a: int, p: int) -> int:
    """Reduce an integer into [0, p)."""
    return a % p


def gcd(a: int, b: int) -> int:
    """Greatest common divisor (Euclid)."""
    a, b = abs(a), abs(b)
    while b != 0:
        a, b = b, a % b
    return a


def extended_gcd(a: int, b: int) -> Tuple[int, int, int]:
    """Return (g, s, t) with s*a + t*b == g == gcd(a, b)."""
    r0, r1 = a, b
    s0, s1 = 1, 0
    t0, t1 = 0, 1
    while r1 != 0:
        q = r0 // r1
        r0, r1 = r1, r0 - q * r1
        s0, s1 = s1, s0 - q * s1
        t0, t1 = t1, t0 - q * t1
    return r0, s0, t0


def inverse(a: int, p: int) -> Optional[int]:
    """Multiplicative inverse of *a* mod *p*, or ``None`` if gcd(a, p) != 1.

    Works for composite *p*; zero never has an inverse.
    """
    a = reduce(a, p)
    if a == 0:
        return None
    g, s, _ = extended_gcd(a, p)
    if g != 1:
        return None
    return s % p
