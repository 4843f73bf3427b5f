from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from ..core.constants import MONEY_PLACES

_MONEY_QUANTUM = Decimal(1).scaleb(-MONEY_PLACES)


def quantize_money(value: Decimal) -> Decimal:
    return value.quantize(_MONEY_QUANTUM, rounding=ROUND_HALF_UP)


def format_number(value: Decimal) -> str:
    """Render a decimal without trailing zeros (5.00 -> "5", 4.50 -> "4.5")."""
    text = format(value, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text or "0"
