from .calculator import AstrometryCalculator, observer_from_config
from .horizontal import get_horizontal_coordinates
from .moon import get_moon_illumination, get_moon_separation_angle
from .sampling import horizontal_track, sample_times, time_above_altitude
from .visibility import (
    POLAR_CIRCLE_LATITUDE_DEG,
    TargetVisibility,
    circumpolar_at_location,
    circumpolar_at_location_with_minimum_altitude,
    classify_target,
    is_above_polar_circle,
    rises_at_location,
)

__all__ = [
    "AstrometryCalculator",
    "POLAR_CIRCLE_LATITUDE_DEG",
    "TargetVisibility",
    "circumpolar_at_location",
    "circumpolar_at_location_with_minimum_altitude",
    "classify_target",
    "get_horizontal_coordinates",
    "get_moon_illumination",
    "get_moon_separation_angle",
    "horizontal_track",
    "is_above_polar_circle",
    "observer_from_config",
    "rises_at_location",
    "sample_times",
    "time_above_altitude",
]
