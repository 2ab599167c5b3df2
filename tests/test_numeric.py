"""
Test suite for std_amount() - stdlib types plus duck-typed third-party scalars.

Tests cover: basic types, Decimal/Fraction, integer overflow, special values,
boolean handling, duck typing, and rejected types.
"""

import math
import sys
from decimal import Decimal
from fractions import Fraction

import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from measurekit.numeric import std_amount


class Quantity:
    """Magnitude-with-unit object in the style of Astropy or Pint."""

    def __init__(self, value, unit):
        self.value = value
        self.unit = unit


class Scalar:
    """Array scalar exposing .item() only."""

    def __init__(self, value):
        self._value = value

    def item(self):
        return self._value


class Index:
    """Integer-like object exposing __index__ only."""

    def __init__(self, value):
        self._value = value

    def __index__(self):
        return self._value


class TestStdAmountBasicTypes:
    """Test standard Python numeric types."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            pytest.param(42, 42.0, id="int"),
            pytest.param(3.25, 3.25, id="float"),
            pytest.param(-123, -123.0, id="negative-int"),
            pytest.param(0, 0.0, id="zero"),
            pytest.param(2 ** 53, 9007199254740992.0, id="int-2-53"),
        ],
    )
    def test_to_float(self, value, expected):
        res = std_amount(value)
        assert res == expected
        assert type(res) is float

    def test_float_subclass_unwrapped(self):
        class MyFloat(float):
            pass

        res = std_amount(MyFloat(1.5))
        assert res == 1.5
        assert type(res) is float


class TestStdAmountDecimalFraction:
    """Test Decimal and Fraction conversion."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            pytest.param(Decimal("3.5"), 3.5, id="decimal"),
            pytest.param(Decimal("-0.25"), -0.25, id="decimal-negative"),
            pytest.param(Fraction(1, 4), 0.25, id="fraction"),
            pytest.param(Fraction(-3, 2), -1.5, id="fraction-negative"),
        ],
    )
    def test_exact(self, value, expected):
        assert std_amount(value) == expected

    def test_high_precision_decimal(self):
        assert std_amount(Decimal("1.2345678901234567890123456789")) == pytest.approx(1.2345678901234568)

    @pytest.mark.parametrize(
        "value, sign",
        [
            pytest.param(Decimal("1e400"), 1, id="decimal-overflow-pos"),
            pytest.param(Decimal("-1e400"), -1, id="decimal-overflow-neg"),
        ],
    )
    def test_decimal_overflow(self, value, sign):
        res = std_amount(value)
        assert math.isinf(res)
        assert math.copysign(1, res) == sign

    def test_decimal_underflow(self):
        assert std_amount(Decimal("1e-400")) == 0.0


class TestStdAmountIntOverflow:
    """Test integers beyond float range saturate to infinity with a warning."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            pytest.param(10 ** 400, math.inf, id="pos"),
            pytest.param(-(10 ** 400), -math.inf, id="neg"),
        ],
    )
    def test_overflow(self, value, expected):
        with pytest.warns(RuntimeWarning, match="overflows float"):
            res = std_amount(value)
        assert res == expected

    def test_overflow_via_index(self):
        with pytest.warns(RuntimeWarning, match="bits"):
            res = std_amount(Index(10 ** 400))
        assert res == math.inf

    def test_float_max_does_not_warn(self, recwarn):
        assert std_amount(int(sys.float_info.max)) == sys.float_info.max
        assert len(recwarn) == 0


class TestStdAmountSpecialFloatValues:
    """Test IEEE 754 special values pass through."""

    @pytest.mark.parametrize(
        "value",
        [
            pytest.param(math.inf, id="inf"),
            pytest.param(-math.inf, id="-inf"),
            pytest.param(float("inf"), id="float-inf"),
        ],
    )
    def test_infinity(self, value):
        assert std_amount(value) == value

    def test_nan(self):
        assert math.isnan(std_amount(math.nan))
        assert math.isnan(std_amount(Decimal("NaN")))


class TestStdAmountBooleanHandling:
    """Test bool rejection and opt-in conversion."""

    @pytest.mark.parametrize(
        "value",
        [
            pytest.param(True, id="true"),
            pytest.param(False, id="false"),
        ],
    )
    def test_rejected(self, value):
        with pytest.raises(TypeError, match="boolean"):
            std_amount(value)

    @pytest.mark.parametrize(
        "value, expected",
        [
            pytest.param(True, 1.0, id="true"),
            pytest.param(False, 0.0, id="false"),
        ],
    )
    def test_allowed(self, value, expected):
        assert std_amount(value, allow_bool=True) == expected


class TestStdAmountDuckTyping:
    """Test third-party protocols: __index__, .item(), .value and __float__."""

    def test_index(self):
        assert std_amount(Index(7)) == 7.0

    def test_item(self):
        assert std_amount(Scalar(2.5)) == 2.5
        assert std_amount(Scalar(3)) == 3.0

    def test_item_non_numeric_falls_through(self):
        with pytest.raises(TypeError, match="unsupported amount type"):
            std_amount(Scalar("2.5"))

    def test_quantity_value(self):
        assert std_amount(Quantity(12.5, "km")) == 12.5
        assert std_amount(Quantity(Decimal("0.5"), "m")) == 0.5

    def test_quantity_bool_value(self):
        with pytest.raises(TypeError, match="boolean"):
            std_amount(Quantity(True, "m"))

    def test_float_protocol(self):
        class Floaty:
            def __float__(self):
                return 4.75

        assert std_amount(Floaty()) == 4.75


class TestStdAmountErrorHandling:
    """Test rejected types raise TypeError."""

    @pytest.mark.parametrize(
        "value",
        [
            pytest.param(None, id="none"),
            pytest.param("123", id="string"),
            pytest.param(b"1", id="bytes"),
            pytest.param([1, 2, 3], id="list"),
            pytest.param({"value": 42}, id="dict"),
            pytest.param(1 + 2j, id="complex"),
            pytest.param(object(), id="object"),
        ],
    )
    def test_unsupported(self, value):
        with pytest.raises(TypeError):
            std_amount(value)


class TestStdAmountNumpy:
    """Test NumPy scalars, skipped when NumPy is not installed."""

    @pytest.mark.parametrize(
        "name, value, expected",
        [
            pytest.param("float64", 1.5, 1.5, id="float64"),
            pytest.param("float32", 0.5, 0.5, id="float32"),
            pytest.param("int64", 42, 42.0, id="int64"),
            pytest.param("int8", -5, -5.0, id="int8"),
        ],
    )
    def test_scalars(self, name, value, expected):
        np = pytest.importorskip("numpy")
        res = std_amount(getattr(np, name)(value))
        assert res == expected
        assert type(res) is float
