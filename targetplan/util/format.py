from typing import Tuple


def _wrap_hours(hours: float) -> float:
    return hours % 24.0


def _split_dms(angle_deg: float, precision: int) -> Tuple[int, int, int, float]:
    sign = -1 if angle_deg < 0 else 1
    a = abs(angle_deg)
    total_seconds = round(a * 3600.0, precision)
    deg = int(total_seconds // 3600)
    rem = total_seconds - deg * 3600
    minutes = int(rem // 60)
    seconds = rem - minutes * 60
    return sign, deg, minutes, seconds


def _split_hms(hours: float, precision: int) -> Tuple[int, int, float]:
    h = _wrap_hours(hours)
    total_seconds = round(h * 3600.0, precision) % (24.0 * 3600.0)
    hours_int = int(total_seconds // 3600)
    rem = total_seconds - hours_int * 3600
    minutes = int(rem // 60)
    seconds = rem - minutes * 60
    return hours_int, minutes, seconds


def hours_to_hms(hours: float, precision: int = 2) -> str:
    h, m, s = _split_hms(hours, precision)
    s_fmt = f"{s:0{3 + precision}.{precision}f}"
    return f"{h:02d}:{m:02d}:{s_fmt}"


def degrees_to_dms(degrees: float, precision: int = 2) -> str:
    sign_val, d, m, s = _split_dms(degrees, precision)
    sign = "-" if sign_val < 0 else "+"
    s_fmt = f"{s:0{3 + precision}.{precision}f}"
    return f"{sign}{d:02d}:{m:02d}:{s_fmt}"


def format_angle(angle, style: str = "deg", precision: int = 2) -> str:
    """Render an ``Angle`` as decimal degrees, radians, H:M:S or D:M:S."""
    if style == "deg":
        return f"{angle.degrees:.{precision}f}°"
    if style == "rad":
        return f"{angle.radians:.{precision}f} rad"
    if style == "hms":
        return hours_to_hms(angle.hours, precision=precision)
    if style == "dms":
        return degrees_to_dms(angle.degrees, precision=precision)
    raise ValueError(f"Unknown angle style: {style}")
