"""Rise and circumpolarity tests from latitude and declination alone.

These are closed-form checks on where the target's diurnal circle sits
relative to the horizon; they need no time or ephemeris.
"""

from dataclasses import dataclass

from targetplan.types import Coordinates, ObserverInfo
from targetplan.util.validate import is_true, not_none

# Approximates 90 degrees minus Earth's axial tilt (66.56).
POLAR_CIRCLE_LATITUDE_DEG = 66.6


def rises_at_location(location: ObserverInfo, coordinates: Coordinates) -> bool:
    """True if the target can be above the horizon at some point.

    This is not a test for a discrete rising event: a circumpolar target
    never rises but still returns True.
    """
    not_none(location, "location cannot be None")
    not_none(coordinates, "coordinates cannot be None")

    offset = coordinates.dec_deg - location.latitude_deg
    # Never up if dec - lat < -90 (northern observer) or > +90 (southern observer).
    return not (offset < -90) and not (offset > 90)


def circumpolar_at_location(location: ObserverInfo, coordinates: Coordinates) -> bool:
    not_none(location, "location cannot be None")
    not_none(coordinates, "coordinates cannot be None")

    total = location.latitude_deg + coordinates.dec_deg
    return total > 90 or total < -90


def circumpolar_at_location_with_minimum_altitude(
    location: ObserverInfo,
    coordinates: Coordinates,
    minimum_altitude: float,
) -> bool:
    """True if the target never crosses ``minimum_altitude`` degrees.

    ``minimum_altitude`` must be strictly positive.
    """
    not_none(location, "location cannot be None")
    not_none(coordinates, "coordinates cannot be None")
    is_true(minimum_altitude is not None and minimum_altitude > 0, "minimum_altitude must be > 0")

    latitude = location.latitude_deg
    declination = coordinates.dec_deg
    return (latitude + (declination - minimum_altitude)) > 90 or (
        latitude + (declination + minimum_altitude)
    ) < -90


def is_above_polar_circle(location: ObserverInfo) -> bool:
    not_none(location, "location cannot be None")
    return abs(location.latitude_deg) >= POLAR_CIRCLE_LATITUDE_DEG


@dataclass(frozen=True)
class TargetVisibility:
    rises: bool
    circumpolar: bool
    # None when no minimum altitude was requested.
    circumpolar_above_minimum: bool | None
    observer_above_polar_circle: bool


def classify_target(
    location: ObserverInfo,
    coordinates: Coordinates,
    minimum_altitude: float | None = None,
) -> TargetVisibility:
    above_minimum = None
    if minimum_altitude is not None:
        above_minimum = circumpolar_at_location_with_minimum_altitude(
            location, coordinates, minimum_altitude
        )
    return TargetVisibility(
        rises=rises_at_location(location, coordinates),
        circumpolar=circumpolar_at_location(location, coordinates),
        circumpolar_above_minimum=above_minimum,
        observer_above_polar_circle=is_above_polar_circle(location),
    )
