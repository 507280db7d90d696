from abc import ABC, abstractmethod
import datetime
import math

from targetplan.types import (
    Coordinates,
    Epoch,
    ObserverInfo,
    SkyPosition,
    SunMoonPosition,
)


def ensure_utc(at_time: datetime.datetime) -> datetime.datetime:
    if at_time.tzinfo is None:
        at_time = at_time.replace(tzinfo=datetime.timezone.utc)
    return at_time.astimezone(datetime.timezone.utc)


class EphemerisProvider(ABC):
    """Source of time scales, Sun/Moon positions and epoch reductions.

    Implementations must be reentrant: the astrometry functions call them
    from any thread without locking.
    """

    name: str

    @abstractmethod
    def local_sidereal_time(self, at_time: datetime.datetime, longitude_deg: float) -> float:
        """Local sidereal time in hours for an east-positive longitude."""

    def hour_angle(self, sidereal_time_hours: float, ra_hours: float) -> float:
        return (sidereal_time_hours - ra_hours) % 24.0

    @abstractmethod
    def julian_date(self, at_time: datetime.datetime) -> float:
        pass

    @abstractmethod
    def sun_and_moon_position(self, at_time: datetime.datetime, julian_date: float) -> SunMoonPosition:
        """Geocentric apparent positions of the Sun and Moon."""

    @abstractmethod
    def moon_position(
        self,
        at_time: datetime.datetime,
        julian_date: float,
        observer: ObserverInfo,
    ) -> SkyPosition:
        """Topocentric apparent position of the Moon for ``observer``."""

    @abstractmethod
    def transform_epoch(
        self,
        coordinates: Coordinates,
        target_epoch: Epoch,
        at_time: datetime.datetime,
    ) -> Coordinates:
        """Reduce ``coordinates`` to ``target_epoch``; ``at_time`` defines JNOW."""

    def angular_separation(
        self,
        ra1_rad: float,
        dec1_rad: float,
        ra2_rad: float,
        dec2_rad: float,
    ) -> float:
        # Vincenty form, well conditioned at 0 and pi.
        d_ra = ra2_rad - ra1_rad
        sin_d1, cos_d1 = math.sin(dec1_rad), math.cos(dec1_rad)
        sin_d2, cos_d2 = math.sin(dec2_rad), math.cos(dec2_rad)
        num1 = cos_d2 * math.sin(d_ra)
        num2 = cos_d1 * sin_d2 - sin_d1 * cos_d2 * math.cos(d_ra)
        denom = sin_d1 * sin_d2 + cos_d1 * cos_d2 * math.cos(d_ra)
        return math.atan2(math.hypot(num1, num2), denom)
