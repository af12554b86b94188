from __future__ import annotations

from typing import Final

DISPLAY_PRECISION: Final[int] = 4


def format_units(amount: int, decimals: int, precision: int = DISPLAY_PRECISION) -> str:
    """Format a smallest-unit amount as a fixed precision decimal string.

    Extra fractional digits are truncated, never rounded up, so a displayed
    balance is never larger than the real one.

    Examples:
      format_units(1_500_000_000_000_000_000, 18) -> "1.5000"
      format_units(1234567, 6, precision=2)        -> "1.23"
      format_units(500, 0)                         -> "500"
    """
    if decimals < 0:
        raise ValueError("decimals must be >= 0")
    if precision < 0:
        raise ValueError("precision must be >= 0")

    sign = "-" if amount < 0 else ""
    whole, frac = divmod(abs(amount), 10**decimals)
    if decimals == 0 or precision == 0:
        return f"{sign}{whole}"

    frac_digits = str(frac).rjust(decimals, "0")[:precision].ljust(precision, "0")
    return f"{sign}{whole}.{frac_digits}"


def parse_units(text: str, decimals: int) -> int:
    """Convert a human decimal string (``"1.5"``) into smallest units."""
    if decimals < 0:
        raise ValueError("decimals must be >= 0")
    value = text.strip() if isinstance(text, str) else ""
    if not value:
        raise ValueError("Amount cannot be empty")

    whole, _, frac = value.partition(".")
    if not whole:
        whole = "0"
    if not whole.isdigit() or (frac and not frac.isdigit()):
        raise ValueError(f"Invalid amount: {text!r}")
    if len(frac) > decimals:
        raise ValueError(f"Amount {text!r} has more than {decimals} decimal places")

    return int(whole) * 10**decimals + int(frac.ljust(decimals, "0") or "0")
