"""Rounding helpers shared by the splitter, add-ons and aggregator."""

import math


def round_to(value: float, nearest: float, method: str = "round") -> float:
    """
    Snap value to a multiple of `nearest`.
    method: "up" | "down" | "round"
    """
    if method == "up":
        return math.ceil(value / nearest) * nearest
    if method == "down":
        return math.floor(value / nearest) * nearest
    return math.floor(value / nearest + 0.5) * nearest


def round_fraction_digits(value: float, digits: int = 2) -> float:
    """Half-up rounding to `digits` decimals (0.125 -> 0.13, not banker's 0.12)."""
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def format_price(amount) -> str:
    """$1,234.50"""
    return f"${float(amount):,.2f}"


def format_number(number) -> str:
    """Up to 2 decimals, grouped: 1,234.5"""
    text = f"{round_fraction_digits(float(number), 2):,.2f}"
    return text.rstrip("0").rstrip(".")
