"""Shared fixtures for zpzpoly tests."""

import random

import pytest

from zpzpoly.arith.tables import FieldTables
from zpzpoly.poly.ring import PolynomialRing

# Primes and composites, including prime powers and squarefree composites.
MODULI = [2, 3, 4, 5, 6, 7, 8, 9, 10, 12, 97, 100]


def random_coeffs(rng, p, degree):
    """Raw coefficients in [0, p) with a non-zero leading term."""
    coeffs = [rng.randrange(p) for _ in range(degree)]
    coeffs.append(rng.randrange(1, p))
    return coeffs


def random_poly(ring, rng, max_degree=6):
    degree = rng.randint(-1, max_degree)
    if degree < 0:
        return ring.zero()
    return ring.polynomial(random_coeffs(rng, ring.modulus, degree), degree)


def random_divisor(ring, rng, max_degree=4):
    """Non-zero polynomial whose leading coefficient is a unit mod p."""
    degree = rng.randint(0, max_degree)
    coeffs = [rng.randrange(ring.modulus) for _ in range(degree)]
    coeffs.append(rng.choice(ring.tables.units()))
    return ring.polynomial(coeffs, degree)


@pytest.fixture
def rng():
    """Deterministic RNG for reproducible tests."""
    return random.Random(42)


@pytest.fixture
def tables5():
    return FieldTables.build(5)


@pytest.fixture
def ring5(tables5):
    return PolynomialRing(tables5)


@pytest.fixture(params=MODULI)
def ring(request):
    return PolynomialRing(FieldTables.build(request.param))
