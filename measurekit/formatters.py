"""
Locale-aware formatters for measure amounts with a unit symbol.

The central piece is fmt_measure(), a bounded-width formatter: the amount is
rendered with as many decimal digits as a maximum length (precision) allows,
truncated when even an integer does not fit, and padded to a minimum width.
Measures expose it through the format() protocol, see parse_format_spec().
"""

# Standard library -----------------------------------------------------------------------------------------------------
import decimal
import math
import re
from dataclasses import dataclass
from enum import IntFlag, unique

# Third-party ----------------------------------------------------------------------------------------------------------
from babel import Locale, numbers

# Local ----------------------------------------------------------------------------------------------------------------
from .locales import LocaleLike, get_locale, upper
from .utils import fmt_type, fmt_value


# @formatter:off

class FmtConf:
    """
    Default configuration constants for measure formatting.

    Attributes:
        DEFAULT_DIGITS: Decimal digits rendered when no precision is requested.
        DISPLAY_PATTERN: CLDR number pattern for human-readable display,
            grouped, at most DISPLAY_DIGITS fraction digits, trailing zeros dropped.
        DISPLAY_DIGITS: Maximum fraction digits of DISPLAY_PATTERN.
        LOCALE: Locale used when none is given. Never changed at runtime,
            pass a locale explicitly to format for other languages.
        SYMBOL_SEPARATOR: Separator between amount and a word-like symbol: 12 km, but 12°.
    """
    DEFAULT_DIGITS = 6
    DISPLAY_PATTERN = "#,##0.#####"
    DISPLAY_DIGITS = 5
    LOCALE = "en"
    SYMBOL_SEPARATOR = " "

# @formatter:on

# Length of the decimal separator, always a single char
DECIMAL_SEPARATOR_LENGTH = 1
# Reserved for a minus sign on amounts <= 0, counted in addition to the sign already in the integer prefix
MINUS_SIGN_LENGTH = 1

# Enough significant digits to quantize any finite float without Decimal context overflow
_FLOAT_MAX_DIGITS = 330

_FORMAT_SPEC = re.compile(r"(?P<align>[<>])?(?P<width>\d+)?(?:\.(?P<precision>\d+))?(?P<type>[sS])?")
_WORD_START = re.compile(r"\w")


# Classes --------------------------------------------------------------------------------------------------------------

@unique
class FormatFlags(IntFlag):
    """Flags of a measure format request, combinable with |."""
    NONE = 0
    LEFT_JUSTIFY = 1
    UPPERCASE = 2


@dataclass(frozen=True)
class FormatSpec:
    """
    A parsed measure format request: flags, minimum width and maximum length.

    Negative width means no minimum width, negative precision means no maximum
    length and DEFAULT_DIGITS decimal digits.
    """

    flags: FormatFlags = FormatFlags.NONE
    width: int = -1
    precision: int = -1

    def __post_init__(self):
        object.__setattr__(self, "flags", FormatFlags(self.flags))

    @property
    def left_justify(self) -> bool:
        return bool(self.flags & FormatFlags.LEFT_JUSTIFY)

    @property
    def uppercase(self) -> bool:
        return bool(self.flags & FormatFlags.UPPERCASE)

    def apply(self, amount: float, symbol: str, *, locale: LocaleLike | None = None) -> str:
        """Format amount and symbol according to this spec, see fmt_measure()."""
        return fmt_measure(
            amount,
            symbol,
            uppercase=self.uppercase,
            left_justify=self.left_justify,
            width=self.width,
            precision=self.precision,
            locale=locale,
        )


# Methods --------------------------------------------------------------------------------------------------------------

def fmt_measure(
        amount: float,
        symbol: str,
        *,
        uppercase: bool = False,
        left_justify: bool = False,
        width: int = -1,
        precision: int = -1,
        locale: LocaleLike | None = None,
) -> str:
    """
    Format an amount followed by a unit symbol within a width and precision budget.

    The symbol is appended as-is, so it must include any wanted separator
    between amount and symbol (see symbol_postfix()).

    Args:
        amount: The amount to output.
        symbol: The unit symbol, possibly prefixed by a separator.
        uppercase: Upper-case the symbol with the case rules of the locale.
        left_justify: Pad on the right instead of the left.
        width: Minimum length; the result is padded with spaces up to it.
            Negative for no minimum width. Padding never truncates.
        precision: Maximum length; any room left after the integer part, the
            decimal separator and the symbol is used for decimal digits. When
            even that minimum does not fit, the integer part and symbol are
            cut down to `precision` characters, without decimal separator.
            Negative for no limit, rendering FmtConf.DEFAULT_DIGITS decimal digits.
        locale: Locale for decimal separator, minus sign and case rules,
            FmtConf.LOCALE if None.

    Returns:
        The formatted measure. Never raises for finite or non-finite amounts.

    Examples:
        >>> fmt_measure(1.23456789, "°")
        '1.234568°'
        >>> fmt_measure(1.23456789, "°", width=12)
        '   1.234568°'
        >>> fmt_measure(1.23456789, "°", precision=4)
        '1.2°'
        >>> fmt_measure(1.23456789, "°", precision=1)
        '1'
        >>> fmt_measure(1.23456789, "°", precision=20)
        '1.23456789000000000°'
        >>> fmt_measure(1.23456789, "°", locale="de")
        '1,234568°'

    Note:
        Amounts <= 0 reserve MINUS_SIGN_LENGTH although the integer prefix
        already contains the sign of negative amounts. Outputs depend on this
        exact budget, so it is kept as is.
    """
    loc = get_locale(locale, default=FmtConf.LOCALE)

    amount_prefix = fmt_fixed(amount, 0, locale=loc)
    if uppercase:
        symbol = upper(symbol, loc)
    minus_sign_length = 0 if amount > 0 else MINUS_SIGN_LENGTH
    minimum_length = len(symbol) + len(amount_prefix) + DECIMAL_SEPARATOR_LENGTH + minus_sign_length

    if precision < 0:
        representation = fmt_fixed(amount, FmtConf.DEFAULT_DIGITS, locale=loc) + symbol
    elif minimum_length >= precision:
        # Even the minimum does not fit
        representation = amount_prefix + symbol
        if precision < len(representation):
            representation = representation[:precision]
    else:
        representation = fmt_fixed(amount, precision - minimum_length, locale=loc) + symbol

    if width < 0:
        return representation
    if left_justify:
        return representation.ljust(width)
    return representation.rjust(width)


def fmt_fixed(amount: float, digits: int, *, locale: LocaleLike | None = None) -> str:
    """
    Render amount in fixed-point notation with exactly `digits` decimal digits.

    No grouping is applied, rounding is half-up. Decimal separator, minus sign
    and the symbols for NaN and infinity follow the locale.

    Examples:
        >>> fmt_fixed(2.5, 0)
        '3'
        >>> fmt_fixed(-1234.5, 2, locale="de")
        '-1234,50'
    """
    if digits < 0:
        raise ValueError(f"digits must be >= 0, got {digits}")

    pattern = "0." + "0" * digits if digits else "0"
    return _fmt_pattern(amount, pattern, digits, get_locale(locale, default=FmtConf.LOCALE))


def fmt_display(amount: float, symbol: str, *, locale: LocaleLike | None = None) -> str:
    """
    Render amount and unit symbol for human-readable display.

    Uses FmtConf.DISPLAY_PATTERN, so the amount is grouped and has at most
    five decimal digits without trailing zeros. Word-like symbols are separated
    from the amount by FmtConf.SYMBOL_SEPARATOR.

    Examples:
        >>> fmt_display(1234.5, "km")
        '1,234.5 km'
        >>> fmt_display(1234.5, "km", locale="de")
        '1.234,5 km'
        >>> fmt_display(90.0, "°")
        '90°'
    """
    loc = get_locale(locale, default=FmtConf.LOCALE)
    number = _fmt_pattern(amount, FmtConf.DISPLAY_PATTERN, FmtConf.DISPLAY_DIGITS, loc)
    return number + symbol_postfix(symbol)


def symbol_postfix(symbol: str) -> str:
    """
    Return the symbol as postfix, prefixed by FmtConf.SYMBOL_SEPARATOR if it starts with a word character.

    Examples:
        >>> symbol_postfix("rad")
        ' rad'
        >>> symbol_postfix("°")
        '°'
    """
    if _WORD_START.match(symbol):
        return FmtConf.SYMBOL_SEPARATOR + symbol
    return symbol


def parse_format_spec(spec: str) -> FormatSpec:
    """
    Parse a measure format specifier into a FormatSpec.

    Grammar: ``[align][width][.precision][type]`` where align is '<' (left-justify)
    or '>' (default), and type is 's' (default) or 'S' (upper-case symbol).

    Raises:
        TypeError: If spec is not a str.
        ValueError: If spec does not follow the grammar.

    Examples:
        >>> parse_format_spec("<15.4S")
        FormatSpec(flags=<FormatFlags.LEFT_JUSTIFY|UPPERCASE: 3>, width=15, precision=4)
    """
    if not isinstance(spec, str):
        raise TypeError(f"format spec must be a str, got {fmt_type(spec)}")

    match = _FORMAT_SPEC.fullmatch(spec)
    if match is None:
        raise ValueError(f"Invalid format specifier {fmt_value(spec)} for a measure")

    flags = FormatFlags.NONE
    if match["align"] == "<":
        flags |= FormatFlags.LEFT_JUSTIFY
    if match["type"] == "S":
        flags |= FormatFlags.UPPERCASE

    return FormatSpec(
        flags=flags,
        width=int(match["width"]) if match["width"] else -1,
        precision=int(match["precision"]) if match["precision"] else -1,
    )


# Private Methods ------------------------------------------------------------------------------------------------------

def _fmt_pattern(amount: float, pattern: str, digits: int, locale: Locale) -> str:
    """Render amount with a CLDR number pattern, handling NaN and infinity via locale symbols."""
    if math.isnan(amount):
        return locale.number_symbols["latn"].get("nan", "NaN")
    if math.isinf(amount):
        infinity = numbers.get_infinity_symbol(locale)
        return numbers.get_minus_sign_symbol(locale) + infinity if amount < 0 else infinity

    with decimal.localcontext() as ctx:
        ctx.rounding = decimal.ROUND_HALF_UP
        ctx.prec = max(ctx.prec, _FLOAT_MAX_DIGITS + digits)
        return numbers.format_decimal(amount, format=pattern, locale=locale)
