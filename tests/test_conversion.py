import pytest

from latlon_convert.conversion import (
    convert_angle,
    decimal_to_dms,
    dms_to_decimal,
    round_significant_figures,
)
from latlon_convert.models import Cardinal, DecimalAngle, DmsAngle


class TestDecimalToDms:
    def test_positive(self):
        assert decimal_to_dms(45.5) == (45, 30, 0.0, 1)

    def test_negative_degrees_carry_sign(self):
        assert decimal_to_dms(-45.5) == (-45, 30, 0.0, -1)

    def test_negative_below_one_degree(self):
        assert decimal_to_dms(-0.5) == (0, 30, 0.0, -1)

    def test_zero_has_no_sign(self):
        assert decimal_to_dms(0.0)[3] == 0

    def test_seconds(self):
        degrees, minutes, seconds, sign = decimal_to_dms(71.1675)
        assert (degrees, minutes, sign) == (71, 10, 1)
        assert seconds == pytest.approx(3)


class TestDmsToDecimal:
    def test_degrees_minutes_seconds(self):
        assert dms_to_decimal(71, 10, 3, 1) == pytest.approx(71.1675)

    def test_without_seconds(self):
        assert dms_to_decimal(10, 30, None, -1) == -10.5

    def test_sign_applies_below_one_degree(self):
        assert dms_to_decimal(0, 30, None, -1) == -0.5


class TestRoundSignificantFigures:
    @pytest.mark.parametrize(
        "value, figures, expected",
        [
            (71.123456789, 8, 71.123457),
            (-71.123456789, 8, -71.123457),
            (0.000123456789, 3, 0.000123),
            (123456.789, 3, 123000),
            (45.0, 8, 45.0),
            (0, 8, 0),
        ],
    )
    def test_round(self, value, figures, expected):
        assert round_significant_figures(value, figures) == pytest.approx(expected)

    def test_invalid_figures(self):
        with pytest.raises(ValueError):
            round_significant_figures(1.5, 0)


class TestConvertAngle:
    def test_decimal_to_dms_omits_fractional_seconds(self):
        assert convert_angle(DecimalAngle(value=12.3456)) == DmsAngle(
            degrees=12, minutes=20, seconds=44, sign=1
        )

    def test_decimal_to_dms_keeps_cardinal(self):
        assert convert_angle(DecimalAngle(value=-45.5, cardinal=Cardinal.S)) == DmsAngle(
            degrees=45, minutes=30, seconds=0, sign=-1, cardinal=Cardinal.S
        )

    def test_rounded_seconds_carry_into_minutes(self):
        assert convert_angle(DecimalAngle(value=10.1)) == DmsAngle(
            degrees=10, minutes=6, seconds=0, sign=1
        )

    def test_rounded_minutes_carry_into_degrees(self):
        assert convert_angle(DecimalAngle(value=59.99999999)) == DmsAngle(
            degrees=60, minutes=0, seconds=0, sign=1
        )

    def test_dms_to_decimal_eight_significant_figures(self):
        converted = convert_angle(DmsAngle(degrees=10, minutes=5.5, seconds=None, sign=1))
        assert converted == DecimalAngle(value=10.091667)

    def test_dms_to_decimal_keeps_cardinal(self):
        converted = convert_angle(
            DmsAngle(degrees=71, minutes=10, seconds=3, sign=1, cardinal=Cardinal.N)
        )
        assert converted.value == pytest.approx(71.1675, abs=1e-9)
        assert converted.cardinal is Cardinal.N

    @pytest.mark.parametrize(
        "degrees, minutes, seconds, sign",
        [
            (12, 34, 56, 1),
            (0, 1, 1, -1),
            (179, 59, 59, -1),
            (89, 0, 30, 1),
        ],
    )
    def test_round_trip(self, degrees, minutes, seconds, sign):
        dms = DmsAngle(degrees=degrees, minutes=minutes, seconds=seconds, sign=sign)
        assert convert_angle(convert_angle(dms)) == dms
