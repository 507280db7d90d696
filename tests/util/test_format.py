import math

from targetplan.types import Angle
from targetplan.util.format import degrees_to_dms, format_angle, hours_to_hms


def test_hours_to_hms_zero():
    assert hours_to_hms(0.0) == "00:00:00.00"


def test_hours_to_hms_wrap():
    assert hours_to_hms(24.0) == "00:00:00.00"


def test_hours_to_hms_precision():
    assert hours_to_hms(1.0, precision=1) == "01:00:00.0"


def test_hours_to_hms_rounding_carry():
    # 23:59:59.99 with 1 decimal should round to 00:00:00.0
    hours = ((24 * 3600) - 0.04) / 3600.0
    assert hours_to_hms(hours, precision=1) == "00:00:00.0"


def test_hours_to_hms_negative_wraps():
    assert hours_to_hms(-1.0) == "23:00:00.00"


def test_degrees_to_dms_positive():
    assert degrees_to_dms(10.0) == "+10:00:00.00"


def test_degrees_to_dms_negative():
    assert degrees_to_dms(-10.0) == "-10:00:00.00"


def test_degrees_to_dms_small_negative():
    assert degrees_to_dms(-0.0001, precision=2).startswith("-00:00:")


def test_format_angle_unknown_style():
    try:
        format_angle(Angle.by_degrees(0.0), style="unknown")
    except ValueError as e:
        assert "Unknown angle style" in str(e)
    else:
        raise AssertionError("Expected ValueError for unknown style")


def test_format_angle_deg():
    assert format_angle(Angle.by_radians(math.pi), style="deg", precision=1) == "180.0°"


def test_format_angle_hms_from_degrees():
    assert format_angle(Angle.by_degrees(15.0), style="hms", precision=1) == "01:00:00.0"


def test_format_angle_rad():
    assert format_angle(Angle.by_hours(12.0), style="rad", precision=3) == "3.142 rad"
