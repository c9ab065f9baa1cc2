"""Rounding and unit conversion for report values."""

from decimal import ROUND_HALF_UP, Decimal

MINUTES_PER_HOUR = 60


def round_to_one_decimal(value: float) -> float:
    """Round half up to one fractional digit.

    Works on the shortest decimal representation of the float, so 12.35
    becomes 12.4 even though its binary value is slightly below 12.35.
    """
    return float(Decimal(str(value)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def minutes_to_hours(minutes: float) -> float:
    return minutes / MINUTES_PER_HOUR
