import enum
from dataclasses import dataclass


__all__ = [
    "Cardinal",
    "SourceForm",
    "RawMatch",
    "DecimalAngle",
    "DmsAngle",
    "ValidatedAngle",
    "ConvertedAngle",
    "ConversionResult",
]


class Cardinal(enum.Enum):
    N = "N"
    S = "S"
    E = "E"
    W = "W"

    @property
    def sign(self) -> int:
        return -1 if self in (Cardinal.S, Cardinal.W) else 1

    @property
    def is_latitude(self) -> bool:
        return self in (Cardinal.N, Cardinal.S)


class SourceForm(enum.Enum):
    DMS = "DMS"
    DECIMAL = "decimal"

    @property
    def target(self) -> "SourceForm":
        return SourceForm.DECIMAL if self is SourceForm.DMS else SourceForm.DMS

    @property
    def label(self) -> str:
        return self.value


@dataclass(frozen=True)
class RawMatch:
    """Substrings captured by the grammar, not yet checked as numbers."""

    minus: str | None
    degrees: str
    minutes: str | None
    seconds: str | None
    cardinal: str | None

    @property
    def is_decimal(self) -> bool:
        return "." in self.degrees


@dataclass(frozen=True)
class DecimalAngle:
    value: float
    cardinal: Cardinal | None = None


@dataclass(frozen=True)
class DmsAngle:
    # degrees is a magnitude, the direction lives in sign or cardinal
    degrees: int
    minutes: float | None
    seconds: float | None
    sign: int
    cardinal: Cardinal | None = None


ValidatedAngle = DecimalAngle | DmsAngle
ConvertedAngle = DecimalAngle | DmsAngle


@dataclass(frozen=True)
class ConversionResult:
    source_form: SourceForm
    formatted_input: str
    formatted_output: str

    @property
    def target_label(self) -> str:
        return self.source_form.target.label

    def describe(self) -> str:
        return f"{self.formatted_input} in {self.target_label}: {self.formatted_output}"
