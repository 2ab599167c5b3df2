#
# Measurekit Units of Measurement
#

# Standard library -----------------------------------------------------------------------------------------------------
import math
from enum import Enum, unique
from typing import Self

# Local ----------------------------------------------------------------------------------------------------------------
from .formatters import fmt_display, symbol_postfix
from .locales import LocaleLike
from .utils import fmt_type, fmt_value


# Classes --------------------------------------------------------------------------------------------------------------

class MeasureUnit:
    """
    Behavior shared by all unit enums: symbol handling, display formatting and lookup.

    Members of a unit enum set their `symbol` in __init__.
    """

    symbol: str

    @classmethod
    def from_symbol(cls, symbol: str) -> Self:
        """
        Lookup a unit by its symbol.

        Raises:
            ValueError: If no unit of this kind has the symbol.
        """
        for unit in cls:
            if unit.symbol == symbol:
                return unit
        raise ValueError(
            f"Unknown {cls.__name__} symbol: {fmt_value(symbol)}, expected one of {[u.symbol for u in cls]}"
        )

    @property
    def symbol_postfix(self) -> str:
        """
        The symbol as appended after an amount, with separator for word-like symbols.

        Example:
            ' rad' for radians, '°' for degrees.
        """
        return symbol_postfix(self.symbol)

    def format(self, amount: float, locale: LocaleLike | None = None) -> str:
        """
        Format an amount of this unit for display, like '1,234.5 km'.

        The amount is grouped and rounded to at most 5 decimal digits.
        """
        return fmt_display(amount, self.symbol, locale=locale)

    def _check_same_kind(self, unit) -> None:
        """Raise TypeError if unit is not a member of this unit enum."""
        if not isinstance(unit, type(self)):
            raise TypeError(f"{type(self).__name__} expected, got {fmt_type(unit)}")


# @formatter:off
@unique
class AngleUnit(MeasureUnit, Enum):
    """
    Units of angles.

    Attributes:
        DEGREES (str) : 1/360 of a full rotation - 90°
        RADIANS (str) : SI unit, full rotation is 2π - 1.570796 rad
    """
    DEGREES = "°"
    RADIANS = "rad"
# @formatter:on

    def __init__(self, symbol: str):
        self.symbol = symbol

    def convert(self, amount: float, source_unit: "AngleUnit") -> float:
        """
        Convert an amount given in `source_unit` to this unit.

        Examples:
            >>> AngleUnit.RADIANS.convert(180.0, AngleUnit.DEGREES)
            3.141592653589793
        """
        self._check_same_kind(source_unit)
        if source_unit is self:
            return amount

        match self:
            case AngleUnit.DEGREES:
                return math.degrees(amount)
            case AngleUnit.RADIANS:
                return math.radians(amount)

    def normalized(self, amount: float) -> float:
        """
        Map an angle amount of this unit to the principal range centered at zero.

        The result lies in [-180, 180] degrees or [-π, π] radians.
        NaN and infinite amounts have no principal value and give NaN.

        Examples:
            >>> AngleUnit.DEGREES.normalized(900.0)
            180.0
            >>> AngleUnit.DEGREES.normalized(-270.0)
            90.0
        """
        if not math.isfinite(amount):
            return math.nan

        match self:
            case AngleUnit.DEGREES:
                return math.remainder(amount, 360.0)
            case AngleUnit.RADIANS:
                return math.remainder(amount, math.tau)

    def to_degrees(self, amount: float) -> float:
        return AngleUnit.DEGREES.convert(amount, self)

    def to_radians(self, amount: float) -> float:
        return AngleUnit.RADIANS.convert(amount, self)


# @formatter:off
@unique
class LengthUnit(MeasureUnit, Enum):
    """
    Units of lengths, ordered from the finest to the coarsest.

    Each value is a pair of (meters per unit, symbol). The declaration
    order defines the precision order used by max_precision().
    """
    MILLIMETERS = (0.001, "mm")
    CENTIMETERS = (0.01, "cm")
    INCHES      = (0.0254, '"')
    DECIMETERS  = (0.1, "dm")
    YARDS       = (0.9144, "yd")
    METERS      = (1.0, "m")
    KILOMETERS  = (1000.0, "km")
    MILES       = (1609.344, "mi")
# @formatter:on

    def __init__(self, meters: float, symbol: str):
        self.meters = meters
        self.symbol = symbol

    @property
    def ordinal(self) -> int:
        """Position in precision order, 0 for the finest unit."""
        return list(type(self)).index(self)

    def convert(self, amount: float, source_unit: "LengthUnit") -> float:
        """
        Convert an amount given in `source_unit` to this unit via meters.

        Examples:
            >>> LengthUnit.METERS.convert(1.0, LengthUnit.KILOMETERS)
            1000.0
        """
        self._check_same_kind(source_unit)
        if source_unit is self:
            return amount
        return amount / self.meters * source_unit.meters

    def max_precision(self, other: "LengthUnit") -> "LengthUnit":
        """
        Return the more precise of this and the other unit.

        Examples:
            >>> LengthUnit.METERS.max_precision(LengthUnit.INCHES)
            <LengthUnit.INCHES: (0.0254, '"')>
        """
        self._check_same_kind(other)
        if self.ordinal > other.ordinal:
            return other
        return self

    def to_millimeters(self, amount: float) -> float:
        return LengthUnit.MILLIMETERS.convert(amount, self)

    def to_centimeters(self, amount: float) -> float:
        return LengthUnit.CENTIMETERS.convert(amount, self)

    def to_inches(self, amount: float) -> float:
        return LengthUnit.INCHES.convert(amount, self)

    def to_decimeters(self, amount: float) -> float:
        return LengthUnit.DECIMETERS.convert(amount, self)

    def to_yards(self, amount: float) -> float:
        return LengthUnit.YARDS.convert(amount, self)

    def to_meters(self, amount: float) -> float:
        return LengthUnit.METERS.convert(amount, self)

    def to_kilometers(self, amount: float) -> float:
        return LengthUnit.KILOMETERS.convert(amount, self)

    def to_miles(self, amount: float) -> float:
        return LengthUnit.MILES.convert(amount, self)
