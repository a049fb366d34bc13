import logging
import re
from typing import Callable, List

from latlon_convert.conversion import (
    DECIMAL_SIGNIFICANT_FIGURES,
    dms_to_decimal,
    round_significant_figures,
)
from latlon_convert.crs import get_limit
from latlon_convert.grammar import normalize_cardinal
from latlon_convert.models import DecimalAngle, DmsAngle, RawMatch, ValidatedAngle


__all__ = [
    "UNIT_COLLISION_WORDS",
    "resolve_sign",
    "validate",
]


log = logging.getLogger(__name__)


# A bare decimal number of degrees is just as likely to be a temperature or an
# angle someone wants in radians, those queries belong to other converters.
UNIT_COLLISION_WORDS = (
    "temperature",
    "fahrenheit",
    "farenheit",
    "celsius",
    "celcius",
    "radians",
)
_UNIT_COLLISION_REGEX = re.compile("|".join(UNIT_COLLISION_WORDS), re.IGNORECASE)

Guard = Callable[[RawMatch, str], bool]


def seconds_require_minutes(raw: RawMatch, text: str) -> bool:
    return raw.seconds is None or raw.minutes is not None


def single_sign_source(raw: RawMatch, text: str) -> bool:
    return not (raw.minus and raw.cardinal)


def decimal_has_no_minutes_or_seconds(raw: RawMatch, text: str) -> bool:
    return raw.minutes is None and raw.seconds is None


def no_unit_collision(raw: RawMatch, text: str) -> bool:
    return _UNIT_COLLISION_REGEX.search(text) is None


def decimal_within_limit(raw: RawMatch, text: str) -> bool:
    return abs(float(raw.degrees)) <= _get_limit(raw)


def dms_has_minutes(raw: RawMatch, text: str) -> bool:
    return raw.minutes is not None


def no_fractional_minutes_with_seconds(raw: RawMatch, text: str) -> bool:
    return raw.seconds is None or "." not in raw.minutes


def minutes_below_sixty(raw: RawMatch, text: str) -> bool:
    return float(raw.minutes) < 60


def seconds_below_sixty(raw: RawMatch, text: str) -> bool:
    return raw.seconds is None or float(raw.seconds) < 60


def dms_degrees_within_limit(raw: RawMatch, text: str) -> bool:
    return float(raw.degrees) <= _get_limit(raw)


def dms_within_limit(raw: RawMatch, text: str) -> bool:
    decimal = dms_to_decimal(
        _parse_degrees(raw),
        float(raw.minutes),
        float(raw.seconds) if raw.seconds is not None else None,
        resolve_sign(raw),
    )
    rounded = round_significant_figures(decimal, DECIMAL_SIGNIFICANT_FIGURES)
    return abs(rounded) <= _get_limit(raw)


COMMON_GUARDS: List[Guard] = [
    seconds_require_minutes,
    single_sign_source,
]

DECIMAL_GUARDS: List[Guard] = [
    decimal_has_no_minutes_or_seconds,
    no_unit_collision,
    decimal_within_limit,
]

# order matters, later guards parse the numbers earlier guards checked for
DMS_GUARDS: List[Guard] = [
    dms_has_minutes,
    dms_degrees_within_limit,
    no_fractional_minutes_with_seconds,
    minutes_below_sixty,
    seconds_below_sixty,
    dms_within_limit,
]


def resolve_sign(raw: RawMatch) -> int:
    cardinal = normalize_cardinal(raw.cardinal)
    if cardinal is not None:
        return cardinal.sign
    return -1 if raw.minus else 1


def validate(raw: RawMatch, full_text: str) -> ValidatedAngle | None:
    guards = COMMON_GUARDS + (DECIMAL_GUARDS if raw.is_decimal else DMS_GUARDS)
    for guard in guards:
        if not guard(raw, full_text):
            log.debug(f"{raw} rejected by {guard.__name__}")
            return None

    cardinal = normalize_cardinal(raw.cardinal)
    sign = resolve_sign(raw)
    if raw.is_decimal:
        return DecimalAngle(value=float(raw.degrees) * sign, cardinal=cardinal)
    return DmsAngle(
        degrees=_parse_degrees(raw),
        minutes=float(raw.minutes),
        seconds=float(raw.seconds) if raw.seconds is not None else None,
        sign=sign,
        cardinal=cardinal,
    )


# only called once the degrees are known to be within the limit, a long
# literal would exceed the integer string conversion limit otherwise
def _parse_degrees(raw: RawMatch) -> int:
    return int(float(raw.degrees))


def _get_limit(raw: RawMatch) -> float:
    cardinal = normalize_cardinal(raw.cardinal)
    return get_limit(cardinal is not None and cardinal.is_latitude)
