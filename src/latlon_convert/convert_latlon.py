import logging
from typing import Iterable, Iterator, Tuple

from latlon_convert.conversion import convert_angle
from latlon_convert.formatting import format_conversion
from latlon_convert.grammar import match
from latlon_convert.models import ConversionResult, DmsAngle, SourceForm
from latlon_convert.validation import validate


__all__ = [
    "convert",
    "convert_many",
]


log = logging.getLogger(__name__)


def convert(text: str) -> ConversionResult | None:
    """Convert a latitude or longitude between DMS and decimal degrees.

    Returns None when the text does not describe a convertible angle, whatever
    the reason. Malformed input never raises.
    """
    raw = match(text)
    if raw is None:
        return None
    angle = validate(raw, text)
    if angle is None:
        log.debug(f'"{text}" is not a convertible angle')
        return None
    converted = convert_angle(angle)
    formatted_input, formatted_output = format_conversion(angle, converted)
    source_form = SourceForm.DMS if isinstance(angle, DmsAngle) else SourceForm.DECIMAL
    return ConversionResult(
        source_form=source_form,
        formatted_input=formatted_input,
        formatted_output=formatted_output,
    )


def convert_many(
    texts: Iterable[str],
) -> Iterator[Tuple[str, ConversionResult | None]]:
    for text in texts:
        yield text, convert(text)
