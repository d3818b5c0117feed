"""Field transforms shared by every export format.

Pure functions with no state. Absent values (optional dates, codes) are
handled by the caller, usually via optional_date() / optional_code(); the
date formatters themselves always receive a real date.
"""

from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import Callable, Optional, Union

Number = Union[Decimal, int, float, str]

CENTS = Decimal("0.01")
WHOLE = Decimal("1")

# Characters that force quoting in a delimited field (besides the delimiter).
_QUOTE_TRIGGERS = ('"', "\n", "\r")


def _to_decimal(value: Number) -> Decimal:
    if isinstance(value, Decimal):
        return value
    # str() first so floats keep their shortest repr (0.1 -> "0.1")
    return Decimal(str(value))


# =============================================================================
# DATES
# =============================================================================

def format_date_iso(value: date) -> str:
    """YYYY-MM-DD"""
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def format_date_dmy(value: date) -> str:
    """DD/MM/YYYY"""
    return f"{value.day:02d}/{value.month:02d}/{value.year:04d}"


def format_date_mdy(value: date) -> str:
    """MM/DD/YYYY (US notation)."""
    return f"{value.month:02d}/{value.day:02d}/{value.year:04d}"


def format_date_compact(value: date) -> str:
    """YYYYMMDD, ISO order without separators (fixed-width layouts)."""
    return f"{value.year:04d}{value.month:02d}{value.day:02d}"


def format_date_short_dmy(value: date) -> str:
    """DD/MM/YY, as printed on the UI-19 form."""
    return f"{value.day:02d}/{value.month:02d}/{value.year % 100:02d}"


def optional_date(value: Optional[date], formatter: Callable[[date], str]) -> str:
    """Apply formatter, or return '' for an absent date."""
    if value is None:
        return ""
    return formatter(value)


def optional_code(value: Optional[int]) -> str:
    """Render an optional numeric code, '' when absent."""
    if value is None:
        return ""
    return str(value)


# =============================================================================
# NUMBERS
# =============================================================================

def format_currency_2dp(amount: Number) -> str:
    """Fixed two fractional digits, no thousands separator, no symbol.

    Rounds half up. Negative amounts are rendered as-is with a leading '-';
    the report model never holds them.
    """
    quantized = _to_decimal(amount).quantize(CENTS, rounding=ROUND_HALF_UP)
    return f"{quantized:f}"


def format_hours(value: Number) -> str:
    """Shortest decimal rendering: 160 -> '160', 7.50 -> '7.5'."""
    normalized = _to_decimal(value).normalize()
    text = f"{normalized:f}"
    return "0" if text in ("-0", "0") else text


def format_hours_integer(value: Number) -> str:
    """Whole hours, rounded half up."""
    return str(int(_to_decimal(value).quantize(WHOLE, rounding=ROUND_HALF_UP)))


# =============================================================================
# TEXT
# =============================================================================

def pad_or_truncate(text: str, width: int, align: str = "left", pad_char: str = " ") -> str:
    """Fit text into exactly `width` characters.

    Longer text is cut to `width` (no ellipsis, no error). Shorter text is
    padded with pad_char on the right for align='left' (names, codes) or on
    the left for align='right' (amounts).
    """
    if width < 0:
        raise ValueError(f"width must be non-negative, got {width}")
    if align not in ("left", "right"):
        raise ValueError(f"align must be 'left' or 'right', got {align!r}")
    if len(pad_char) != 1:
        raise ValueError("pad_char must be a single character")

    if len(text) >= width:
        return text[:width]
    if align == "right":
        return text.rjust(width, pad_char)
    return text.ljust(width, pad_char)


def escape_delimited(text: str, delimiter: str) -> str:
    """Quote a value for a delimiter-separated line.

    Values containing the delimiter, a double quote or a line break are
    wrapped in double quotes with embedded quotes doubled. Anything else is
    returned unchanged.
    """
    if delimiter in text or any(ch in text for ch in _QUOTE_TRIGGERS):
        return '"' + text.replace('"', '""') + '"'
    return text


def first_name_from_initials(initials: str) -> str:
    """Approximate a first name from initials: 'J.P.' -> 'J', 'JP' -> 'JP'."""
    head = initials.split(".")[0]
    return head or initials[:1]


def yes_no(flag: bool, yes: str = "Y", no: str = "N") -> str:
    return yes if flag else no
