from __future__ import annotations

import datetime
import logging

from targetplan.ephemeris import EphemerisProvider, get_ephemeris_provider
from targetplan.types import Coordinates, HorizontalCoordinate, ObserverInfo
from targetplan.util.validate import is_true, not_none
from .horizontal import get_horizontal_coordinates
from .moon import get_moon_illumination, get_moon_separation_angle
from .sampling import horizontal_track, sample_times, time_above_altitude
from .visibility import TargetVisibility, classify_target

logger = logging.getLogger(__name__)

DEFAULT_MINIMUM_ALTITUDE_DEG = 20.0


def observer_from_config(config) -> ObserverInfo:
    latitude = config.site_latitude_deg
    longitude = config.site_longitude_deg
    not_none(latitude, "Observer location is required (site latitude_deg)")
    not_none(longitude, "Observer location is required (site longitude_deg)")
    return ObserverInfo(
        latitude_deg=float(latitude),
        longitude_deg=float(longitude),
        elevation_m=float(config.site_elevation_m or 0.0),
    )


class AstrometryCalculator:
    """Binds an ephemeris provider to the astrometry functions.

    Holds no per-query state, so one instance can serve any number of
    threads as long as the provider is reentrant.
    """

    def __init__(
        self,
        ephemeris: EphemerisProvider,
        minimum_altitude_deg: float = DEFAULT_MINIMUM_ALTITUDE_DEG,
    ):
        self._ephemeris = not_none(ephemeris, "ephemeris cannot be None")
        is_true(
            minimum_altitude_deg is not None and minimum_altitude_deg > 0,
            "minimum_altitude_deg must be > 0",
        )
        self._minimum_altitude_deg = minimum_altitude_deg

    @classmethod
    def from_config(cls, config) -> AstrometryCalculator:
        ephemeris = get_ephemeris_provider(config)
        logger.debug(
            "Astrometry calculator using %s, minimum altitude %.1f deg",
            ephemeris.name,
            config.minimum_altitude_deg,
        )
        return cls(ephemeris, minimum_altitude_deg=config.minimum_altitude_deg)

    @property
    def ephemeris(self) -> EphemerisProvider:
        return self._ephemeris

    @property
    def minimum_altitude_deg(self) -> float:
        return self._minimum_altitude_deg

    def horizontal_coordinates(
        self,
        location: ObserverInfo,
        coordinates: Coordinates,
        at_time: datetime.datetime,
    ) -> HorizontalCoordinate:
        return get_horizontal_coordinates(self._ephemeris, location, coordinates, at_time)

    def moon_illumination(self, at_time: datetime.datetime) -> float:
        return get_moon_illumination(self._ephemeris, at_time)

    def moon_separation_angle(
        self,
        location: ObserverInfo,
        at_time: datetime.datetime,
        target: Coordinates,
    ) -> float:
        return get_moon_separation_angle(self._ephemeris, location, at_time, target)

    def classify(self, location: ObserverInfo, coordinates: Coordinates) -> TargetVisibility:
        return classify_target(location, coordinates, self._minimum_altitude_deg)

    def minutes_above_minimum(
        self,
        location: ObserverInfo,
        coordinates: Coordinates,
        start: datetime.datetime,
        end: datetime.datetime,
        cadence_min: float = 10.0,
    ) -> float:
        times = sample_times(start, end, cadence_min)
        track = horizontal_track(self._ephemeris, location, coordinates, times)
        return time_above_altitude(
            times,
            [h.altitude_deg for h in track],
            self._minimum_altitude_deg,
        )
