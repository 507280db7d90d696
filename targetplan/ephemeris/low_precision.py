"""Closed-form ephemeris good to a fraction of a degree for the Sun and
roughly a degree for the Moon.

Needs no data files or network access, which makes it the provider of choice
for quick planning passes and for tests. Formulas follow the Astronomical
Almanac low-precision series and Meeus, Astronomical Algorithms.
"""

import datetime
import logging
import math

from targetplan.types import (
    Coordinates,
    Epoch,
    ObserverInfo,
    SkyPosition,
    SunMoonPosition,
    clamp_unit,
)
from .base import EphemerisProvider, ensure_utc

logger = logging.getLogger(__name__)

J2000_JD = 2451545.0
_EPOCH_JD = {
    Epoch.J2000: J2000_JD,
    Epoch.J2050: J2000_JD + 50 * 365.25,
    Epoch.B1950: 2433282.4235,
}

AU_KM = 149597870.7
EARTH_RADIUS_KM = 6378.14
_ARCSEC_TO_RAD = math.pi / (180.0 * 3600.0)


def _normalize_angle_rad(angle: float) -> float:
    return angle % (2.0 * math.pi)


def to_julian_date(dt: datetime.datetime) -> float:
    dt = ensure_utc(dt)
    year = dt.year
    month = dt.month
    day = dt.day + (dt.hour + (dt.minute + (dt.second + dt.microsecond / 1e6) / 60.0) / 60.0) / 24.0
    if month <= 2:
        year -= 1
        month += 12
    a = math.floor(year / 100)
    b = 2 - a + math.floor(a / 4)
    return math.floor(365.25 * (year + 4716)) + math.floor(30.6001 * (month + 1)) + day + b - 1524.5


def _obliquity_rad(n: float) -> float:
    return math.radians(23.439 - 0.0000004 * n)


def _sun(jd: float) -> SkyPosition:
    n = jd - J2000_JD
    l = math.radians((280.460 + 0.9856474 * n) % 360.0)
    g = math.radians((357.528 + 0.9856003 * n) % 360.0)
    lam = l + math.radians(1.915) * math.sin(g) + math.radians(0.020) * math.sin(2 * g)
    eps = _obliquity_rad(n)
    ra = math.atan2(math.cos(eps) * math.sin(lam), math.cos(lam))
    dec = math.asin(clamp_unit(math.sin(eps) * math.sin(lam)))
    distance_au = 1.00014 - 0.01671 * math.cos(g) - 0.00014 * math.cos(2 * g)
    return SkyPosition(
        ra_hours=math.degrees(_normalize_angle_rad(ra)) / 15.0,
        dec_deg=math.degrees(dec),
        distance_au=distance_au,
    )


def _moon_geocentric(jd: float) -> tuple[float, float, float]:
    """Geocentric (ra_rad, dec_rad, distance_au) of the Moon."""
    n = jd - J2000_JD
    l = math.radians((218.316 + 13.176396 * n) % 360.0)
    m = math.radians((134.963 + 13.064993 * n) % 360.0)
    f = math.radians((93.272 + 13.229350 * n) % 360.0)
    lam = l + math.radians(6.289) * math.sin(m)
    beta = math.radians(5.128) * math.sin(f)
    eps = _obliquity_rad(n)
    sin_dec = math.sin(beta) * math.cos(eps) + math.cos(beta) * math.sin(eps) * math.sin(lam)
    dec = math.asin(clamp_unit(sin_dec))
    y = math.sin(lam) * math.cos(eps) - math.tan(beta) * math.sin(eps)
    x = math.cos(lam)
    ra = _normalize_angle_rad(math.atan2(y, x))
    distance_km = 385001.0 - 20905.0 * math.cos(m)
    return ra, dec, distance_km / AU_KM


def precess(ra_rad: float, dec_rad: float, jd_from: float, jd_to: float) -> tuple[float, float]:
    """Rigorous precession between two equinoxes (Meeus 21.2-21.4)."""
    big_t = (jd_from - J2000_JD) / 36525.0
    t = (jd_to - jd_from) / 36525.0
    base = 2306.2181 + 1.39656 * big_t - 0.000139 * big_t * big_t
    zeta = (base * t + (0.30188 - 0.000344 * big_t) * t * t + 0.017998 * t ** 3) * _ARCSEC_TO_RAD
    z = (base * t + (1.09468 + 0.000066 * big_t) * t * t + 0.018203 * t ** 3) * _ARCSEC_TO_RAD
    theta = (
        (2004.3109 - 0.85330 * big_t - 0.000217 * big_t * big_t) * t
        - (0.42665 + 0.000217 * big_t) * t * t
        - 0.041833 * t ** 3
    ) * _ARCSEC_TO_RAD

    a = math.cos(dec_rad) * math.sin(ra_rad + zeta)
    b = math.cos(theta) * math.cos(dec_rad) * math.cos(ra_rad + zeta) - math.sin(theta) * math.sin(dec_rad)
    c = math.sin(theta) * math.cos(dec_rad) * math.cos(ra_rad + zeta) + math.cos(theta) * math.sin(dec_rad)
    ra = _normalize_angle_rad(math.atan2(a, b) + z)
    dec = math.asin(clamp_unit(c))
    return ra, dec


class LowPrecisionEphemerisProvider(EphemerisProvider):
    name = "low_precision"

    def julian_date(self, at_time: datetime.datetime) -> float:
        return to_julian_date(at_time)

    def local_sidereal_time(self, at_time: datetime.datetime, longitude_deg: float) -> float:
        d = to_julian_date(at_time) - J2000_JD
        gmst_hours = 18.697374558 + 24.06570982441908 * d
        return (gmst_hours + longitude_deg / 15.0) % 24.0

    def sun_and_moon_position(self, at_time: datetime.datetime, julian_date: float) -> SunMoonPosition:
        ra, dec, distance_au = _moon_geocentric(julian_date)
        moon = SkyPosition(
            ra_hours=math.degrees(ra) / 15.0,
            dec_deg=math.degrees(dec),
            distance_au=distance_au,
        )
        return SunMoonPosition(sun=_sun(julian_date), moon=moon)

    def moon_position(
        self,
        at_time: datetime.datetime,
        julian_date: float,
        observer: ObserverInfo,
    ) -> SkyPosition:
        ra, dec, distance_au = _moon_geocentric(julian_date)
        lst_rad = math.radians(self.local_sidereal_time(at_time, observer.longitude_deg) * 15.0)
        lat_rad = math.radians(observer.latitude_deg)
        # Spherical Earth; the observer offset is what produces lunar parallax.
        rho_au = (EARTH_RADIUS_KM + observer.elevation_m / 1000.0) / AU_KM

        x = distance_au * math.cos(dec) * math.cos(ra) - rho_au * math.cos(lat_rad) * math.cos(lst_rad)
        y = distance_au * math.cos(dec) * math.sin(ra) - rho_au * math.cos(lat_rad) * math.sin(lst_rad)
        z = distance_au * math.sin(dec) - rho_au * math.sin(lat_rad)
        topo_ra = _normalize_angle_rad(math.atan2(y, x))
        topo_dec = math.atan2(z, math.hypot(x, y))
        return SkyPosition(
            ra_hours=math.degrees(topo_ra) / 15.0,
            dec_deg=math.degrees(topo_dec),
            distance_au=math.sqrt(x * x + y * y + z * z),
        )

    def transform_epoch(
        self,
        coordinates: Coordinates,
        target_epoch: Epoch,
        at_time: datetime.datetime,
    ) -> Coordinates:
        if coordinates.epoch == target_epoch:
            return coordinates
        jd_now = to_julian_date(at_time)
        jd_from = _EPOCH_JD.get(coordinates.epoch, jd_now)
        jd_to = _EPOCH_JD.get(target_epoch, jd_now)
        logger.debug(
            "Precessing %s from JD %.4f to JD %.4f", coordinates, jd_from, jd_to
        )
        ra, dec = precess(
            math.radians(coordinates.ra_degrees),
            math.radians(coordinates.dec_deg),
            jd_from,
            jd_to,
        )
        return coordinates.with_epoch(
            ra_hours=math.degrees(ra) / 15.0,
            dec_deg=math.degrees(dec),
            epoch=target_epoch,
        )
