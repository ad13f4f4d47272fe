"""Money parsing and formatting helpers."""
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
import math
import re
from typing import Dict, Optional, Tuple

from .models import RawAmount

_NON_NUMERIC = re.compile(r"[^0-9.]")

# (locale, currency) -> symbol; the locale's home currency gets the bare symbol.
_CURRENCY_SYMBOLS: Dict[Tuple[str, str], str] = {
    ("en-CA", "CAD"): "$",
    ("en-CA", "USD"): "US$",
    ("en-US", "USD"): "$",
    ("en-US", "CAD"): "CA$",
    ("en-GB", "GBP"): "£",
    ("en-CA", "GBP"): "£",
    ("en-US", "GBP"): "£",
    ("en-GB", "EUR"): "€",
    ("en-CA", "EUR"): "€",
    ("en-US", "EUR"): "€",
}


def parse_money(text: str | None) -> Optional[RawAmount]:
    """Turn loosely formatted money text such as ``"$1,234.00"`` into a number.

    Everything except digits and the decimal point is discarded first, so
    currency symbols, thousands separators and words never reach the parser.
    """

    if not text:
        return None
    cleaned = _NON_NUMERIC.sub("", str(text))
    if not cleaned:
        return None
    try:
        value = float(cleaned)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return int(value) if value.is_integer() else value


def format_money(amount: RawAmount, currency: str = "CAD", locale: str = "en-CA") -> str:
    """Format ``amount`` as a whole-unit currency string, e.g. ``$12,500``."""

    rounded = int(Decimal(str(amount)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    sign = "-" if rounded < 0 else ""
    grouped = f"{abs(rounded):,}"
    symbol = _CURRENCY_SYMBOLS.get((locale, currency.upper()))
    if symbol is None:
        return f"{sign}{currency.upper()} {grouped}"
    return f"{sign}{symbol}{grouped}"
