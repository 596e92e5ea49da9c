"""Currency formatting helpers (GYD, no fractional subunit)"""

import re

CURRENCY_SYMBOL = "GYD$"


def format_currency(amount: float, symbol: str = CURRENCY_SYMBOL) -> str:
    """1234 -> 'GYD$1,234'"""
    return f"{symbol}{amount:,.0f}"


def format_compact_currency(amount: float, symbol: str = CURRENCY_SYMBOL) -> str:
    """1500 -> 'GYD$1.5K', 1500000 -> 'GYD$1.5M'"""
    if amount >= 1_000_000:
        return f"{symbol}{amount / 1_000_000:.1f}M"
    if amount >= 1000:
        return f"{symbol}{amount / 1000:.1f}K"
    return f"{symbol}{amount:g}"


def freeze_price(price: float) -> float:
    """Round to two decimals before a price is stored on an order"""
    return round(price * 100) / 100


def parse_currency(text: str) -> float:
    """'GYD$1,234.50' -> 1234.5"""
    cleaned = re.sub(r"[^0-9.\-]+", "", text)
    if not cleaned:
        raise ValueError(f"No amount in {text!r}")
    return float(cleaned)
