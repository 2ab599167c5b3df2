"""
Typed measure value objects: an amount paired with a unit.

Measures are immutable and hashable. Equality is by (amount, unit) pair,
ordering is by amount after converting the other measure to the own unit,
so Angle.degrees(180) and Angle.radians(π) compare as equal in ordering
while being distinct values.

Formatting follows the format() protocol with ``[align][width][.precision][type]``:

    >>> f"{Angle.degrees(1.23456789)}"
    '1.234568°'
    >>> f"{Angle.degrees(1.23456789):>12.4}"
    '        1.2°'
    >>> f"{Length.km(2.5):S}"
    '2.500000 KM'
"""

# Standard library -----------------------------------------------------------------------------------------------------
import math
from abc import ABC
from dataclasses import dataclass
from typing import ClassVar, Generic, Self, TypeVar

# Local ----------------------------------------------------------------------------------------------------------------
from .formatters import parse_format_spec
from .locales import LocaleLike
from .numeric import std_amount
from .units import AngleUnit, LengthUnit, MeasureUnit
from .utils import fmt_type

U = TypeVar("U", bound=MeasureUnit)


def _amount_key(amount: float) -> tuple:
    """Equality key of an amount: all NaNs are equal, 0.0 and -0.0 are not."""
    if math.isnan(amount):
        return ("nan",)
    return (amount, math.copysign(1.0, amount))


# Classes --------------------------------------------------------------------------------------------------------------

class Measure(ABC, Generic[U]):
    """
    Base of all measures. Subclasses are frozen dataclasses with `amount` and `unit` fields.

    Attributes:
        UNIT_TYPE: The unit enum accepted by the measure.
    """

    UNIT_TYPE: ClassVar[type[MeasureUnit]]

    amount: float
    unit: U

    def __post_init__(self):
        if not isinstance(self.unit, self.UNIT_TYPE):
            raise TypeError(f"{type(self).__name__} requires a {self.UNIT_TYPE.__name__}, got {fmt_type(self.unit)}")
        object.__setattr__(self, "amount", std_amount(self.amount))

    @classmethod
    def of(cls, amount: float, unit: U) -> Self:
        """Create a measure of the given amount and unit."""
        return cls(amount, unit)

    @classmethod
    def units(cls) -> list[U]:
        """Available units."""
        return list(cls.UNIT_TYPE)

    def get(self, unit: U) -> float:
        """Returns the amount of this measure converted to the given unit."""
        if not isinstance(unit, self.UNIT_TYPE):
            raise TypeError(f"{self.UNIT_TYPE.__name__} expected, got {fmt_type(unit)}")
        return unit.convert(self.amount, self.unit)

    def transform(self, unit: U) -> Self:
        """
        Returns this measure in the given unit, converting the amount.

        The measure itself is returned if it already has the unit.
        """
        if unit is self.unit:
            return self
        return self.of(self.get(unit), unit)

    def compare_to(self, other: Self) -> int:
        """
        Compare by amount in this measure's unit: negative, zero or positive.

        Raises:
            TypeError: If other is not a measure of the same kind.
        """
        if not isinstance(other, type(self)):
            raise TypeError(f"cannot compare {fmt_type(self)} with {fmt_type(other)}")
        other_amount = other.get(self.unit)
        return (self.amount > other_amount) - (self.amount < other_amount)

    def __eq__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.unit is other.unit and _amount_key(self.amount) == _amount_key(other.amount)

    def __hash__(self) -> int:
        return hash((type(self), _amount_key(self.amount), self.unit))

    def __lt__(self, other) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __format__(self, format_spec: str) -> str:
        return self.format_bounded(format_spec)

    def __str__(self) -> str:
        return self.format_bounded()

    def format(self, locale: LocaleLike | None = None) -> str:
        """
        Human-readable display of the measure, grouped and with at most 5 decimal digits.

        Examples:
            >>> Length.km(1234.5).format()
            '1,234.5 km'
            >>> Length.km(1234.5).format("de_DE")
            '1.234,5 km'
        """
        return self.unit.format(self.amount, locale)

    def format_bounded(self, format_spec: str = "", *, locale: LocaleLike | None = None) -> str:
        """
        Format the measure like format(), with an explicit locale.

        Args:
            format_spec: ``[align][width][.precision][type]``, see parse_format_spec().
            locale: Locale of the rendering, FmtConf.LOCALE if None.

        Examples:
            >>> Angle.radians(1.5707963).format_bounded(".10", locale="de")
            '1,5708 rad'
        """
        spec = parse_format_spec(format_spec)
        return spec.apply(self.amount, self.unit.symbol_postfix, locale=locale)


@dataclass(frozen=True, eq=False)
class Angle(Measure[AngleUnit]):
    """
    Represents an angle.

    Examples:
        >>> Angle.degrees(180).to_radians()
        3.141592653589793
        >>> Angle.degrees(900).normalized()
        Angle(amount=180.0, unit=<AngleUnit.DEGREES: '°'>)
    """

    UNIT_TYPE: ClassVar[type[AngleUnit]] = AngleUnit

    amount: float
    unit: AngleUnit

    @classmethod
    def degrees(cls, amount: float) -> Self:
        """Creates an angle given as degrees."""
        return cls(amount, AngleUnit.DEGREES)

    @classmethod
    def radians(cls, amount: float) -> Self:
        """Creates an angle given as radians."""
        return cls(amount, AngleUnit.RADIANS)

    def to_degrees(self) -> float:
        return self.get(AngleUnit.DEGREES)

    def to_radians(self) -> float:
        return self.get(AngleUnit.RADIANS)

    def normalized(self) -> Self:
        """The same angle within [-180°, 180°] or [-π, π] rad, keeping the unit."""
        return self.of(self.unit.normalized(self.amount), self.unit)


@dataclass(frozen=True, eq=False)
class Length(Measure[LengthUnit]):
    """
    Represents a certain length of a certain unit.

    Examples:
        >>> Length.mi(1).to_kilometers()
        1.609344
        >>> str(Length.inch(12))
        '12.000000"'
    """

    UNIT_TYPE: ClassVar[type[LengthUnit]] = LengthUnit

    amount: float
    unit: LengthUnit

    @classmethod
    def mm(cls, amount: float) -> Self:
        """Creates a length in millimeters."""
        return cls(amount, LengthUnit.MILLIMETERS)

    @classmethod
    def cm(cls, amount: float) -> Self:
        """Creates a length in centimeters."""
        return cls(amount, LengthUnit.CENTIMETERS)

    @classmethod
    def inch(cls, amount: float) -> Self:
        """Creates a length in inches."""
        return cls(amount, LengthUnit.INCHES)

    @classmethod
    def dm(cls, amount: float) -> Self:
        """Creates a length in decimeters."""
        return cls(amount, LengthUnit.DECIMETERS)

    @classmethod
    def yd(cls, amount: float) -> Self:
        """Creates a length in yards."""
        return cls(amount, LengthUnit.YARDS)

    @classmethod
    def m(cls, amount: float) -> Self:
        """Creates a length in meters."""
        return cls(amount, LengthUnit.METERS)

    @classmethod
    def km(cls, amount: float) -> Self:
        """Creates a length in kilometers."""
        return cls(amount, LengthUnit.KILOMETERS)

    @classmethod
    def mi(cls, amount: float) -> Self:
        """Creates a length in miles."""
        return cls(amount, LengthUnit.MILES)

    def to_millimeters(self) -> float:
        return self.get(LengthUnit.MILLIMETERS)

    def to_centimeters(self) -> float:
        return self.get(LengthUnit.CENTIMETERS)

    def to_inches(self) -> float:
        return self.get(LengthUnit.INCHES)

    def to_decimeters(self) -> float:
        return self.get(LengthUnit.DECIMETERS)

    def to_yards(self) -> float:
        return self.get(LengthUnit.YARDS)

    def to_meters(self) -> float:
        return self.get(LengthUnit.METERS)

    def to_kilometers(self) -> float:
        return self.get(LengthUnit.KILOMETERS)

    def to_miles(self) -> float:
        return self.get(LengthUnit.MILES)
