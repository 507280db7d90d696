import datetime
import math

from targetplan.ephemeris.base import EphemerisProvider
from targetplan.types import Coordinates, HorizontalCoordinate, ObserverInfo
from targetplan.util.validate import is_true
from .horizontal import get_horizontal_coordinates


def sample_times(
    start: datetime.datetime,
    end: datetime.datetime,
    cadence_min: float,
) -> list[datetime.datetime]:
    is_true(end > start, "end must be after start")
    is_true(cadence_min > 0, "cadence_min must be > 0")
    total_min = (end - start).total_seconds() / 60.0
    if total_min <= cadence_min:
        return [start, end]
    steps = max(1, math.ceil(total_min / cadence_min))
    delta = (end - start) / steps
    return [start + delta * i for i in range(steps + 1)]


def horizontal_track(
    ephemeris: EphemerisProvider,
    location: ObserverInfo,
    coordinates: Coordinates,
    times: list[datetime.datetime],
) -> list[HorizontalCoordinate]:
    return [get_horizontal_coordinates(ephemeris, location, coordinates, t) for t in times]


def time_above_altitude(
    times: list[datetime.datetime],
    altitudes_deg: list[float],
    threshold_deg: float,
) -> float:
    """Minutes spent at or above ``threshold_deg``, judged at interval midpoints."""
    is_true(len(times) == len(altitudes_deg), "times and altitudes_deg must be the same length")
    if len(times) < 2:
        return 0.0
    total = 0.0
    for i in range(len(times) - 1):
        alt_mid = (altitudes_deg[i] + altitudes_deg[i + 1]) / 2.0
        if alt_mid >= threshold_deg:
            total += (times[i + 1] - times[i]).total_seconds() / 60.0
    return total
