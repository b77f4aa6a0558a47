"""Helper utility functions for the Parcel Depot utility."""

import pandas as pd
import numpy as np
from typing import Optional


def is_blank(val) -> bool:
    """
    Check if value is considered empty.

    Returns True if value is:
    - NaN / None
    - Empty string ""
    - String containing only whitespace

    Args:
        val: Value to check (any type)

    Returns:
        True if value is considered empty, False otherwise
    """
    if val is None:
        return True
    if isinstance(val, str):
        return val.strip() == ""
    try:
        return bool(pd.isna(val))
    except (TypeError, ValueError):
        return False


def to_float_safe(val) -> Optional[float]:
    """
    Parse a finite float from a field.

    Args:
        val: Raw field (string or number)

    Returns:
        float, or None if the value is blank, non-numeric, NaN or infinite

    Examples:
        >>> to_float_safe(" 2.5 ")
        2.5
        >>> to_float_safe("abc") is None
        True
        >>> to_float_safe("nan") is None
        True
    """
    if is_blank(val):
        return None
    try:
        f = float(str(val).strip())
    except (ValueError, TypeError):
        return None
    if not np.isfinite(f):
        return None
    return f


def to_int_safe(val) -> Optional[int]:
    """
    Parse an integer field ("10" -> 10). Decimal strings like "10.5" are rejected.

    Args:
        val: Raw field

    Returns:
        int or None if parsing fails
    """
    if is_blank(val):
        return None
    try:
        return int(str(val).strip())
    except (ValueError, TypeError):
        return None


def fmt_num(v) -> str:
    """
    Format a dimension/weight value for display.

    - Returns empty string if value is NaN or not numeric
    - Returns integer string if value is a whole number
    - Returns the shortest decimal representation otherwise

    Examples:
        >>> fmt_num(10.0)
        '10'
        >>> fmt_num(10.5)
        '10.5'
        >>> fmt_num(None)
        ''
    """
    try:
        f = float(v)
        if np.isnan(f):
            return ""
        return str(int(f)) if f.is_integer() else f"{f:g}"
    except (ValueError, TypeError):
        return ""


def fmt_dims(L, W, H) -> str:
    """
    Format dimension triplet as "LxWxH".

    Examples:
        >>> fmt_dims(10, 8, 6)
        '10x8x6'
        >>> fmt_dims(10.5, 8.25, 6.0)
        '10.5x8.25x6'
    """
    return f"{fmt_num(L)}x{fmt_num(W)}x{fmt_num(H)}"


def fmt_money(amount: float) -> str:
    """Format a fee with two decimals, e.g. 105.6 -> '105.60'."""
    return f"{amount:.2f}"
