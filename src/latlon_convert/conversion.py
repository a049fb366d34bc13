import logging
import math
from typing import Tuple

from latlon_convert.models import ConvertedAngle, DecimalAngle, DmsAngle, ValidatedAngle


__all__ = [
    "DECIMAL_SIGNIFICANT_FIGURES",
    "convert_angle",
    "decimal_to_dms",
    "dms_to_decimal",
    "round_significant_figures",
]


log = logging.getLogger(__name__)


DECIMAL_SIGNIFICANT_FIGURES = 8


def decimal_to_dms(value: float) -> Tuple[int, int, float, int]:
    """Split decimal degrees into (degrees, minutes, seconds, sign).

    The degrees keep the sign of the value, minutes and seconds are always
    positive. The sign is 0 for a value of zero.
    """
    sign = (value > 0) - (value < 0)
    degrees = int(value)
    decimal_minutes = abs(value - degrees) * 60
    minutes = int(decimal_minutes)
    seconds = (decimal_minutes - minutes) * 60
    return degrees, minutes, seconds, sign


def dms_to_decimal(
    degrees: int, minutes: float, seconds: float | None, sign: int
) -> float:
    magnitude = abs(degrees) + minutes / 60
    if seconds is not None:
        magnitude += seconds / 3600
    return sign * magnitude


def round_significant_figures(value: float, figures: int) -> float:
    if figures < 1:
        raise ValueError(f"cannot round to {figures} significant figures")
    if value == 0 or not math.isfinite(value):
        return value
    return round(value, figures - 1 - math.floor(math.log10(abs(value))))


def convert_angle(angle: ValidatedAngle) -> ConvertedAngle:
    if isinstance(angle, DecimalAngle):
        converted = _decimal_angle_to_dms(angle)
    else:
        converted = _dms_angle_to_decimal(angle)
    log.debug(f"converted {angle} to {converted}")
    return converted


def _decimal_angle_to_dms(angle: DecimalAngle) -> DmsAngle:
    degrees, minutes, seconds, sign = decimal_to_dms(angle.value)
    # the sign is tracked separately, degrees must not carry it twice
    degrees = abs(degrees)
    seconds = _round_half_up(seconds)
    if seconds == 60:
        seconds = 0
        minutes += 1
    if minutes == 60:
        minutes = 0
        degrees += 1
    return DmsAngle(
        degrees=degrees,
        minutes=minutes,
        seconds=seconds,
        sign=sign,
        cardinal=angle.cardinal,
    )


def _dms_angle_to_decimal(angle: DmsAngle) -> DecimalAngle:
    value = dms_to_decimal(angle.degrees, angle.minutes, angle.seconds, angle.sign)
    return DecimalAngle(
        value=round_significant_figures(value, DECIMAL_SIGNIFICANT_FIGURES),
        cardinal=angle.cardinal,
    )


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)
