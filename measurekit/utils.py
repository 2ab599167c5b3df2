"""
Measurekit utilities shared across the package.

Contains helpers used by multiple modules to avoid circular imports.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Any


# Methods --------------------------------------------------------------------------------------------------------------


def class_name(obj: Any, fully_qualified: bool = False) -> str:
    """
    Get the class name of an object or a class.

    Builtin classes are never module-qualified.

    Examples:
        >>> class_name(10)
        'int'
        >>> class_name(AngleUnit.DEGREES, fully_qualified=True)
        'measurekit.units.AngleUnit'
    """
    cls = obj if isinstance(obj, type) else type(obj)
    if fully_qualified and cls.__module__ != "builtins":
        return f"{cls.__module__}.{cls.__qualname__}"
    return cls.__qualname__


def fmt_type(obj: Any, *, fully_qualified: bool = False) -> str:
    """Format type information of an object or a type for exception messages.

    Examples:
        >>> fmt_type(42)
        '<int>'
        >>> fmt_type(LengthUnit)
        '<LengthUnit>'
    """
    return f"<{class_name(obj, fully_qualified=fully_qualified)}>"


def fmt_value(obj: Any) -> str:
    """Format a value as a type-value pair for exception messages, e.g. ``<str: 'abc'>``."""
    try:
        repr_ = repr(obj)
    except Exception as e:
        repr_ = f"repr failed: {type(e).__name__}"
    return f"<{class_name(obj)}: {repr_}>"
