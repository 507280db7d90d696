from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
import math

from targetplan.util.format import degrees_to_dms, format_angle, hours_to_hms

_HOURS_TO_DEGREES = 15.0


def clamp_unit(value: float) -> float:
    """Clamp to [-1, 1] ahead of an inverse sine or cosine."""
    return max(-1.0, min(1.0, value))


@dataclass(frozen=True)
class Angle:
    """An angle held in radians.

    Build it with ``by_hours``, ``by_degrees`` or ``by_radians`` and read it
    back through ``hours``, ``degrees`` or ``radians``; the named
    constructors keep hour-angle and degree quantities from being mixed up.
    """

    radians: float

    @classmethod
    def by_hours(cls, hours: float) -> Angle:
        return cls(math.radians(hours * _HOURS_TO_DEGREES))

    @classmethod
    def by_degrees(cls, degrees: float) -> Angle:
        return cls(math.radians(degrees))

    @classmethod
    def by_radians(cls, radians: float) -> Angle:
        return cls(radians)

    @property
    def degrees(self) -> float:
        return math.degrees(self.radians)

    @property
    def hours(self) -> float:
        return self.degrees / _HOURS_TO_DEGREES

    def sin(self) -> float:
        return math.sin(self.radians)

    def cos(self) -> float:
        return math.cos(self.radians)

    @classmethod
    def asin(cls, value: float) -> Angle:
        return cls(math.asin(clamp_unit(value)))

    @classmethod
    def acos(cls, value: float) -> Angle:
        return cls(math.acos(clamp_unit(value)))

    @classmethod
    def atan2(cls, y: float, x: float) -> Angle:
        return cls(math.atan2(y, x))

    def __add__(self, other: Angle) -> Angle:
        return Angle(self.radians + other.radians)

    def __sub__(self, other: Angle) -> Angle:
        return Angle(self.radians - other.radians)

    def __str__(self) -> str:
        return format_angle(self, style="deg")


class Epoch(Enum):
    J2000 = "J2000"
    B1950 = "B1950"
    J2050 = "J2050"
    # Equinox of the observation instant ("of date").
    JNOW = "JNOW"


@dataclass(frozen=True)
class ObserverInfo:
    latitude_deg: float
    longitude_deg: float  # east positive
    elevation_m: float = 0.0


@dataclass(frozen=True)
class Coordinates:
    ra_hours: float
    dec_deg: float
    epoch: Epoch = Epoch.J2000

    @property
    def ra_degrees(self) -> float:
        return self.ra_hours * _HOURS_TO_DEGREES

    def with_epoch(self, ra_hours: float, dec_deg: float, epoch: Epoch) -> Coordinates:
        return replace(self, ra_hours=ra_hours % 24.0, dec_deg=dec_deg, epoch=epoch)

    def __str__(self) -> str:
        return f"RA {hours_to_hms(self.ra_hours)} Dec {degrees_to_dms(self.dec_deg)} ({self.epoch.value})"


@dataclass(frozen=True)
class HorizontalCoordinate:
    altitude_deg: float
    azimuth_deg: float  # north = 0, increasing through east

    def __str__(self) -> str:
        return f"Alt {degrees_to_dms(self.altitude_deg)} Az {degrees_to_dms(self.azimuth_deg)}"


@dataclass(frozen=True)
class SkyPosition:
    """Apparent position returned by an ephemeris provider."""

    ra_hours: float
    dec_deg: float
    distance_au: float


@dataclass(frozen=True)
class SunMoonPosition:
    sun: SkyPosition
    moon: SkyPosition
