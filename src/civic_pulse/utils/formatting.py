"""Formatting helpers for human-readable reasons."""
from __future__ import annotations

import math


def round_half_up(value: float) -> int:
    """Round a non-negative number to the nearest integer, halves going up."""
    return math.floor(value + 0.5)


def format_percent(fraction: float) -> str:
    """Render a [0, 1] fraction as a whole percentage, e.g. ``"83%"``."""
    return f"{round_half_up(fraction * 100)}%"


def format_metres(distance_km: float) -> str:
    """Render a kilometre distance in whole metres, e.g. ``"120m"``."""
    return f"{round_half_up(distance_km * 1000)}m"


def format_kilometres(distance_km: float) -> str:
    """Render a kilometre distance in whole kilometres, e.g. ``"6km"``."""
    return f"{round_half_up(distance_km)}km"
