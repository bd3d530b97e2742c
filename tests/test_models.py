from fractions import Fraction

import pytest

from stocksim.models import Process, Rational, Resource, gcd, lcm


@pytest.mark.parametrize("a,b", [(12, 8), (7, 3), (100, 75), (9, 27), (1, 1)])
def test_gcd_divides_both_and_is_greatest(a, b):
    g = gcd(a, b)
    assert a % g == 0 and b % g == 0
    assert gcd(a // g, b // g) == 1


def test_gcd_with_zero_returns_other():
    assert gcd(5, 0) == 5
    assert gcd(0, 0) == 0


def test_lcm_empty_is_zero():
    assert lcm([]) == 0


def test_lcm_with_zero_is_zero():
    assert lcm([4, 0, 6]) == 0


def test_lcm_single_value():
    assert lcm([7]) == 7


@pytest.mark.parametrize("values", [[2, 3], [4, 6, 8], [5, 10, 15], [1, 1, 1]])
def test_lcm_is_common_multiple(values):
    m = lcm(values)
    assert all(m % v == 0 for v in values)
    assert m <= max(values) * len(values) * max(values)


def test_rational_times_reduces():
    r = Rational(2, 3).times(Rational(3, 4))
    assert Fraction(r.numerator, r.denominator) == Fraction(2, 3) * Fraction(3, 4)
    assert gcd(r.numerator, r.denominator) == 1


def test_rational_plus_value():
    r = Rational(1, 2).plus(Rational(1, 3))
    assert Fraction(r.numerator, r.denominator) == Fraction(1, 2) + Fraction(1, 3)


def test_simplified_keeps_value():
    r = Rational(6, 8).simplified()
    assert Fraction(r.numerator, r.denominator) == Fraction(6, 8)
    assert gcd(r.numerator, r.denominator) == 1


def test_simplified_zero_over_zero():
    assert Rational(0, 0).simplified() == Rational(0, 0)


def test_times_identity_equals_simplified():
    r = Rational(10, 4)
    assert r.times(Rational(1, 1)) == r.simplified()


def test_process_repr_survives_self_successor():
    p = Process("loop", [Resource("a", 1)], [Resource("b", 1)], 5)
    p.successor = p
    p.predecessors.append(p)
    assert "loop" in repr(p)


def test_process_identity_equality():
    a = Process("same")
    b = Process("same")
    assert a == a
    assert not (a == b)