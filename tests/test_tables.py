"""Tests for the Z/pZ lookup tables."""

import pytest
from pydantic import ValidationError

from zpzpoly.arith.tables import FieldTables
from zpzpoly.config import P_MAX
from zpzpoly.errors import InvalidModulus

from conftest import MODULI


@pytest.mark.parametrize("p", [-3, 0, 1, P_MAX + 1])
def test_invalid_modulus(p):
    with pytest.raises(InvalidModulus, match="outside"):
        FieldTables.build(p)


def test_non_int_modulus():
    with pytest.raises(InvalidModulus, match="int"):
        FieldTables.build(5.0)


def test_invalid_modulus_is_value_error():
    with pytest.raises(ValueError):
        FieldTables.build(1)


def test_bounds_accepted():
    assert FieldTables.build(2).modulus == 2
    assert FieldTables.build(P_MAX).modulus == P_MAX


@pytest.mark.parametrize("p", MODULI)
def test_closure(p):
    t = FieldTables.build(p)
    for a in t.elements():
        assert 0 <= t.negate[a] < p
        for b in t.elements():
            assert 0 <= t.sum[a][b] < p
            assert 0 <= t.product[a][b] < p
            assert 0 <= t.difference[a][b] < p


@pytest.mark.parametrize("p", MODULI)
def test_tables_match_integer_arithmetic(p):
    t = FieldTables.build(p)
    for a in t.elements():
        assert t.negate[a] == (-a) % p
        for b in t.elements():
            assert t.sum[a][b] == (a + b) % p
            assert t.product[a][b] == (a * b) % p
            assert t.difference[a][b] == (a - b) % p


@pytest.mark.parametrize("p", MODULI)
def test_inverse_correctness(p):
    t = FieldTables.build(p)
    assert t.inverse[0] is None
    for a in t.elements():
        if t.inverse[a] is not None:
            assert 1 <= t.inverse[a] < p
            assert t.product[a][t.inverse[a]] == 1


@pytest.mark.parametrize("p", MODULI)
def test_difference_consistent_with_sum_and_negate(p):
    t = FieldTables.build(p)
    for a in t.elements():
        for b in t.elements():
            assert t.difference[a][b] == t.sum[a][t.negate[b]]


@pytest.mark.parametrize("p", MODULI)
def test_quotient_consistent_with_product_and_inverse(p):
    t = FieldTables.build(p)
    for a in t.elements():
        for b in t.elements():
            if t.inverse[b] is None:
                assert t.quotient[a][b] is None
            else:
                assert t.quotient[a][b] == t.product[a][t.inverse[b]]
                assert t.product[t.quotient[a][b]][b] == a


def test_prime_field_every_nonzero_is_unit():
    t = FieldTables.build(7)
    assert t.units() == [1, 2, 3, 4, 5, 6]


def test_composite_units():
    t = FieldTables.build(12)
    assert t.units() == [1, 5, 7, 11]
    assert not t.is_unit(4)
    assert t.inverse[6] is None


def test_tables_are_frozen(tables5):
    with pytest.raises(ValidationError):
        tables5.modulus = 7


def test_reduce(tables5):
    assert tables5.reduce(13) == 3
    assert tables5.reduce(-2) == 3


def test_distinct_moduli_coexist():
    t5 = FieldTables.build(5)
    t6 = FieldTables.build(6)
    assert t5.sum[4][3] == 2
    assert t6.sum[4][3] == 1
