"""
Standardize measure amounts from Python stdlib and third-party numeric types.

Measures store their amount as a 64-bit Python float; this module converts
ints, Decimal, Fraction, NumPy scalars and Quantity-like objects to it.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import math
import operator
import warnings
from typing import Protocol, runtime_checkable

# Local ----------------------------------------------------------------------------------------------------------------
from .utils import fmt_type


@runtime_checkable
class SupportsFloat(Protocol):
    """Protocol for duck-typed numeric conversion."""

    def __float__(self) -> float: ...


def std_amount(value, *, allow_bool: bool = False) -> float:
    """
    Convert a real number of any supported type to a standard Python float.

    Parameters
    ----------
    value : various
        Real number to convert. Supports Python int/float, Decimal, Fraction,
        and third-party types via __index__, .item(), .value or __float__.

    allow_bool : bool, default False
        If True, convert bool to float (True→1.0, False→0.0). Default False
        helps catch bugs since bool is subclass of int in Python.

    Returns
    -------
    float
        Special IEEE 754 values (inf, -inf, nan) pass through unchanged.

    Raises
    ------
    TypeError
        For None, str, complex, containers and other unsupported types,
        or bool when allow_bool=False.

    Warns
    -----
    RuntimeWarning
        When an integer is too large for a float; the amount becomes ±inf.

    Detection Priority
    ------------------
    1. float/int fast path
    2. __index__() (NumPy integers)
    3. .item() (array scalars)
    4. .value (Astropy Quantity)
    5. __float__() (Decimal, Fraction, NumPy floats, general fallback)

    Examples
    --------
    >>> std_amount(42)
    42.0
    >>> std_amount(Decimal('3.14'))
    3.14
    >>> std_amount(Fraction(1, 4))
    0.25
    >>> std_amount("1.5")
    Traceback (most recent call last):
        ...
    TypeError: unsupported amount type: <str>...
    """
    if isinstance(value, bool):
        if allow_bool:
            return float(value)
        raise TypeError(
            f"boolean amounts not supported, got {value}. "
            f"Set allow_bool=True to convert booleans (True→1.0, False→0.0)"
        )

    # Fast path, also unwraps float subclasses like numpy.float64
    if isinstance(value, float):
        return float(value)

    if isinstance(value, int):
        return _int_to_float(value)

    # NumPy integer types implement __index__
    if hasattr(value, "__index__"):
        try:
            return _int_to_float(operator.index(value))
        except (TypeError, ValueError) as e:
            raise TypeError(f"cannot convert {fmt_type(value)} to int via __index__: {e}") from e

    # Array/tensor scalars: NumPy, PyTorch, JAX
    if hasattr(value, "item") and callable(value.item):
        try:
            result = value.item()
        except (TypeError, ValueError, AttributeError):
            result = None
        if isinstance(result, (int, float)):
            return std_amount(result, allow_bool=allow_bool)

    # Astropy Quantity and similar magnitude-with-unit objects
    if hasattr(value, "value") and hasattr(value, "unit"):
        return std_amount(value.value, allow_bool=allow_bool)

    if isinstance(value, SupportsFloat):
        try:
            # Decimal and Fraction overflow to inf/-inf, underflow to 0.0/-0.0
            return float(value)
        except (TypeError, ValueError) as e:
            raise TypeError(f"cannot convert {fmt_type(value)} to float: {e}") from e

    raise TypeError(
        f"unsupported amount type: {fmt_type(value)}. "
        f"Expected int, float or types implementing __index__, __float__, .item(), "
        f"or having .value attribute (e.g., numpy scalars, Decimal, Fraction, Quantity.value)"
    )


def _int_to_float(value: int) -> float:
    """Convert int to float, saturating to ±inf with a warning on overflow."""
    try:
        return float(value)
    except OverflowError:
        warnings.warn(
            f"Integer amount of {value.bit_length()} bits overflows float, stored as infinity",
            RuntimeWarning,
            stacklevel=3,
        )
        return math.inf if value > 0 else -math.inf
