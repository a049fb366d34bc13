import logging
import re
from types import MappingProxyType
from typing import Iterable, Mapping

from latlon_convert.models import Cardinal, RawMatch


__all__ = [
    "CARDINAL_NAMES",
    "match",
    "normalize_cardinal",
    "strip_whitespace",
]


log = logging.getLogger(__name__)


# Representations of each token. Word forms may be plural and prefixed with
# "arc" or "arc-".
# http://msdn.microsoft.com/en-us/library/aa578799.aspx gives an overview of the
# most common ways of writing latitude/longitude.
DEGREE_GLYPHS = ("º", "°", "⁰", "˚")
DEGREE_WORDS = ("degree", "deg")

MINUTE_GLYPHS = ("'", "`", "ʹ", "′", "‵", "‘", "’", "‛")
MINUTE_WORDS = ("minute", "min")

SECOND_GLYPHS = ('"', "″", "‶", "“", "”", "〝", "〞", "‟")
SECOND_WORDS = ("second", "sec")

# hyphen, minus and the dashes word processors substitute for them
MINUS_GLYPHS = ("-", "−", "﹣", "－", "‒", "–", "—", "‐")

CARDINAL_NAMES: Mapping[str, Cardinal] = MappingProxyType(
    {
        "north": Cardinal.N,
        "south": Cardinal.S,
        "east": Cardinal.E,
        "west": Cardinal.W,
        "n": Cardinal.N,
        "s": Cardinal.S,
        "e": Cardinal.E,
        "w": Cardinal.W,
    }
)


def _char_class(glyphs: Iterable[str]) -> str:
    return "[" + "".join(re.escape(g) for g in glyphs) + "]"


def _unit(glyphs: Iterable[str], words: Iterable[str]) -> str:
    # the plural "s" must not eat the start of "south"
    return rf"{_char_class(glyphs)}|(?:arc-?)?(?:{'|'.join(words)})(?:s(?!outh))?"


_NUMBER = r"(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)"
_DEGREE = _unit(DEGREE_GLYPHS, DEGREE_WORDS)
_MINUTE = _unit(MINUTE_GLYPHS, MINUTE_WORDS)
_SECOND = rf"{_unit(SECOND_GLYPHS, SECOND_WORDS)}|{_char_class(MINUTE_GLYPHS)}{{2}}"
_CARDINAL = "|".join(sorted(CARDINAL_NAMES, key=len, reverse=True))

# a match never starts inside a longer, malformed number such as "1.2.3"
_REGEX = re.compile(
    r"(?<![0-9.])"
    rf"(?P<minus>{_char_class(MINUS_GLYPHS)})?"
    rf"(?P<degrees>{_NUMBER})(?:{_DEGREE})"
    rf"(?:(?P<minutes>{_NUMBER})(?:{_MINUTE})"
    rf"(?:(?P<seconds>{_NUMBER})(?:{_SECOND}))?)?"
    rf"(?P<cardinal>{_CARDINAL})?",
    re.IGNORECASE,
)

_WHITESPACE = re.compile(r"\s+")


def strip_whitespace(text: str) -> str:
    return _WHITESPACE.sub("", text)


def match(text: str) -> RawMatch | None:
    found = _REGEX.search(strip_whitespace(text))
    if not found:
        log.debug(f'no angle expression found in "{text}"')
        return None
    raw = RawMatch(
        minus=found["minus"],
        degrees=found["degrees"],
        minutes=found["minutes"],
        seconds=found["seconds"],
        cardinal=found["cardinal"],
    )
    log.debug(f'matched "{found.group(0)}" in "{text}": {raw}')
    return raw


def normalize_cardinal(token: str | None) -> Cardinal | None:
    if token is None:
        return None
    return CARDINAL_NAMES[token.lower()]
