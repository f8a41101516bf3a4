import math
from datetime import datetime


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves towards positive infinity (12.5 -> 13)."""
    return math.floor(value + 0.5)


def format_display_name(detector_id: str) -> str:
    """'fed-rates' -> 'Fed Rates'"""
    return detector_id.replace("-", " ").title()


def to_epoch_seconds(value: datetime) -> float:
    return value.timestamp()


def minutes_between(start: datetime, end: datetime) -> float:
    return (to_epoch_seconds(end) - to_epoch_seconds(start)) / 60
