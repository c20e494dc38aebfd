import math

import pytest

from catchy.approx import Approx, ApproxData, approx, approximately_equal


def test_equal_values_match():
    assert 1.0 == approx(1.0)
    assert approx(2.5) == 2.5


def test_distinct_values_do_not_match():
    assert (1.0 == approx(1.1)) is False
    assert (1.0 != approx(1.1)) is True
    assert (approx(1.1) == 1.0) is False


def test_small_relative_difference_matches():
    assert 100.0 == approx(100.001)
    assert 100.0 != approx(100.01)


def test_infinity_matches_itself():
    assert math.inf == approx(math.inf)
    assert -math.inf == approx(-math.inf)
    assert math.inf != approx(-math.inf)


def test_margin_widens_tolerance():
    assert 1.0 != approx(1.05)
    assert 1.0 == approx(1.05).margin(0.1)


def test_epsilon_widens_tolerance():
    assert 10.0 != approx(11.0)
    assert 10.0 == approx(11.0).epsilon(0.2)


def test_scale_adds_to_epsilon_base():
    assert 0.0 != approx(0.5).epsilon(0.1)
    assert 0.0 == approx(0.5).epsilon(0.1).scale(10.0)


def test_setters_chain_and_return_same_object():
    a = approx(3.0)
    assert a.margin(0.1) is a
    assert a.epsilon(0.1) is a
    assert a.scale(2.0) is a
    assert a.value == 3.0


def test_approximately_equal_exact_when_tolerances_zero():
    data = ApproxData(epsilon=0.0, scale=0.0, margin=0.0)
    assert approximately_equal(1.0, 1.0, data)
    assert not approximately_equal(1.0, 1.0000001, data)


def test_approximately_equal_uses_margin():
    data = ApproxData(epsilon=0.0, scale=0.0, margin=0.5)
    assert approximately_equal(1.0, 1.5, data)
    assert not approximately_equal(1.0, 1.6, data)


def test_approximately_equal_is_symmetric_in_margin():
    data = ApproxData(epsilon=0.0, scale=0.0, margin=0.25)
    for lhs, rhs in [(0.0, 0.2), (5.0, 5.3), (-1.0, -1.1)]:
        assert approximately_equal(lhs, rhs, data) == approximately_equal(rhs, lhs, data)


def test_string_form():
    assert str(approx(1.5)) == "Approx( 1.5 )"


def test_string_form_matches_repr():
    a = Approx(2.0)
    assert repr(a) == str(a)
    assert str(a).startswith("Approx( ")


def test_not_equal_to_non_numbers():
    assert (approx(1.0) == "1.0") is False


def test_unhashable():
    with pytest.raises(TypeError):
        hash(approx(1.0))