"""Numeric helpers shared by the property panel and the exporter."""
import math


def round_half_up(value):
    """Round to nearest integer, halves toward +infinity (2.5 -> 3, -2.5 -> -2)."""
    return int(math.floor(value + 0.5))


def round_to_hundredths(value):
    """Two-decimal rounding with halves toward +infinity.

    Integral results come back as int so they serialize without a trailing
    ".0" (45 rather than 45.0).
    """
    rounded = math.floor(value * 100 + 0.5) / 100
    if rounded == int(rounded):
        return int(rounded)
    return rounded


def parse_finite_number(text):
    """Parse user-typed text, or None for partial input like '', '-', '1e'."""
    text = text.strip()
    if not text:
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def format_number(value):
    """Compact text for a number: 10.0 -> '10', 12.5 -> '12.5'."""
    if value is None:
        return ''
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))
