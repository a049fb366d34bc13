import math
from typing import Tuple

from latlon_convert.models import ConvertedAngle, DecimalAngle, DmsAngle, ValidatedAngle


__all__ = [
    "MINUS_SIGN",
    "format_angle",
    "format_conversion",
    "format_decimal",
    "format_dms",
    "format_number",
]


MINUS_SIGN = "\N{MINUS SIGN}"
DEGREE_SIGN = "\N{DEGREE SIGN}"
PRIME = "\N{PRIME}"
DOUBLE_PRIME = "\N{DOUBLE PRIME}"


def format_number(value: float, figures: int = 15) -> str:
    if value == 0:
        return "0"
    decimals = max(figures - 1 - math.floor(math.log10(abs(value))), 0)
    formatted = f"{value:.{decimals}f}"
    if "." in formatted:
        formatted = formatted.rstrip("0").rstrip(".")
    return formatted


def format_dms(angle: DmsAngle) -> str:
    formatted = f"{format_number(abs(angle.degrees))}{DEGREE_SIGN}"
    # a zero minutes segment is kept when seconds follow it
    if angle.minutes or angle.seconds:
        formatted += f" {format_number(angle.minutes or 0)}{PRIME}"
    if angle.seconds:
        formatted += f" {format_number(angle.seconds)}{DOUBLE_PRIME}"

    if angle.cardinal is not None:
        formatted += f" {angle.cardinal.value}"
    elif angle.sign < 0:
        formatted = MINUS_SIGN + formatted
    return formatted


def format_decimal(angle: DecimalAngle) -> str:
    # decimal degrees never use a cardinal, only a sign
    formatted = f"{format_number(abs(angle.value))}{DEGREE_SIGN}"
    if angle.value < 0:
        formatted = MINUS_SIGN + formatted
    return formatted


def format_angle(angle: ValidatedAngle | ConvertedAngle) -> str:
    if isinstance(angle, DmsAngle):
        return format_dms(angle)
    return format_decimal(angle)


def format_conversion(
    angle: ValidatedAngle, converted: ConvertedAngle
) -> Tuple[str, str]:
    return format_angle(angle), format_angle(converted)
