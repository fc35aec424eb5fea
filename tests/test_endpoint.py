import pytest

from nagiosrange.endpoint import (
    Finite,
    NegativeInfinity,
    PositiveInfinity,
    neg_inf,
    pos_inf,
)


class TestFinite:
    def test_inner(self):
        assert 3 == Finite(3).inner()
        assert not Finite(3).is_infinite()

    def test_int_equals_float(self):
        assert Finite(3) == Finite(3.0)
        assert hash(Finite(3)) == hash(Finite(3.0))

    def test_not_equal_to_infinity(self):
        assert Finite(0) != neg_inf
        assert Finite(0) != pos_inf

    def test_not_equal_to_plain_number(self):
        assert Finite(3) != 3

    def test_str(self):
        assert "-3" == str(Finite(-3))
        assert "2.5" == str(Finite(2.5))
        assert "-3.0" == str(Finite(-3.0))

    def test_str_without_exponent(self):
        assert "0.00001" == str(Finite(1e-5))
        assert "100000000000000000000.0" == str(Finite(1e20))

    def test_repr(self):
        assert "Finite(2.5)" == repr(Finite(2.5))

    def test_immutable(self):
        with pytest.raises(AttributeError):
            Finite(1).value = 2


class TestInfinity:
    def test_singletons(self):
        assert NegativeInfinity() is neg_inf
        assert PositiveInfinity() is pos_inf
        assert neg_inf is not pos_inf

    def test_infinite(self):
        assert neg_inf.is_infinite()
        assert pos_inf.is_infinite()
        assert neg_inf.inner() is None
        assert pos_inf.inner() is None

    def test_equality(self):
        assert neg_inf == NegativeInfinity()
        assert neg_inf != pos_inf

    def test_comparison_with_other_types_is_delegated(self):
        assert neg_inf.__eq__("~") is NotImplemented
        assert pos_inf.__eq__(None) is NotImplemented
        assert neg_inf != "~"

    def test_str(self):
        assert "~" == str(neg_inf)
        assert "" == str(pos_inf)

    def test_repr(self):
        assert "NegativeInfinity()" == repr(neg_inf)
        assert "PositiveInfinity()" == repr(pos_inf)

    def test_immutable(self):
        with pytest.raises(AttributeError):
            neg_inf.value = 0
