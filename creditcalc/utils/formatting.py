"""Human-readable rendering of minor-unit amounts."""

from __future__ import annotations

from decimal import Decimal


def format_amount(minor_units: int, suffix: str = "") -> str:
    """Render minor units as major units with a space thousands separator.

    >>> format_amount(1500000)
    '15 000.00'
    >>> format_amount(1500000, "RUB")
    '15 000.00 RUB'
    """
    major = Decimal(int(minor_units)).scaleb(-2)
    text = f"{major:,.2f}".replace(",", " ")
    return f"{text} {suffix}" if suffix else text
