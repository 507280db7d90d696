from __future__ import annotations

import datetime
import logging

from astropy.coordinates import (
    FK4,
    FK5,
    TETE,
    EarthLocation,
    SkyCoord,
    angular_separation,
    get_body,
)
from astropy.time import Time
import astropy.units as u

from targetplan.types import (
    Coordinates,
    Epoch,
    ObserverInfo,
    SkyPosition,
    SunMoonPosition,
)
from .base import EphemerisProvider, ensure_utc

logger = logging.getLogger(__name__)


def _to_time(at_time: datetime.datetime) -> Time:
    return Time(ensure_utc(at_time), scale="utc")


def _jd_to_time(julian_date: float) -> Time:
    return Time(julian_date, format="jd", scale="utc")


def _earth_location(observer: ObserverInfo) -> EarthLocation:
    return EarthLocation.from_geodetic(
        lon=observer.longitude_deg * u.deg,
        lat=observer.latitude_deg * u.deg,
        height=observer.elevation_m * u.m,
    )


def _equinox_frame(epoch: Epoch, at_time: datetime.datetime):
    if epoch == Epoch.JNOW:
        # Apparent place of date, the frame moon_position reports in.
        return TETE(obstime=_to_time(at_time))
    if epoch == Epoch.B1950:
        return FK4(equinox=Time("B1950"))
    return FK5(equinox=Time(epoch.value))


def _sky_position(coord) -> SkyPosition:
    return SkyPosition(
        ra_hours=float(coord.ra.hour),
        dec_deg=float(coord.dec.deg),
        distance_au=float(coord.distance.to(u.au).value),
    )


class AstropyEphemerisProvider(EphemerisProvider):
    """Ephemeris backed by astropy's built-in solar system ephemeris.

    Apparent places are expressed in the true-equator/true-equinox (TETE)
    frame of date. Sidereal time and the TETE reduction need Earth
    orientation data, which astropy downloads from IERS on demand.
    """

    name = "astropy"

    def julian_date(self, at_time: datetime.datetime) -> float:
        return float(_to_time(at_time).jd)

    def local_sidereal_time(self, at_time: datetime.datetime, longitude_deg: float) -> float:
        lst = _to_time(at_time).sidereal_time("apparent", longitude=longitude_deg * u.deg)
        return float(lst.hour)

    def sun_and_moon_position(self, at_time: datetime.datetime, julian_date: float) -> SunMoonPosition:
        t = _jd_to_time(julian_date)
        frame = TETE(obstime=t)
        sun = get_body("sun", t).transform_to(frame)
        moon = get_body("moon", t).transform_to(frame)
        return SunMoonPosition(sun=_sky_position(sun), moon=_sky_position(moon))

    def moon_position(
        self,
        at_time: datetime.datetime,
        julian_date: float,
        observer: ObserverInfo,
    ) -> SkyPosition:
        t = _jd_to_time(julian_date)
        location = _earth_location(observer)
        moon = get_body("moon", t, location=location)
        logger.debug("Moon lookup at JD %.5f for %s", julian_date, observer)
        return _sky_position(moon.transform_to(TETE(obstime=t, location=location)))

    def transform_epoch(
        self,
        coordinates: Coordinates,
        target_epoch: Epoch,
        at_time: datetime.datetime,
    ) -> Coordinates:
        if coordinates.epoch == target_epoch:
            return coordinates
        c = SkyCoord(
            ra=coordinates.ra_hours * u.hourangle,
            dec=coordinates.dec_deg * u.deg,
            frame=_equinox_frame(coordinates.epoch, at_time),
        )
        reduced = c.transform_to(_equinox_frame(target_epoch, at_time))
        return coordinates.with_epoch(
            ra_hours=float(reduced.ra.hour),
            dec_deg=float(reduced.dec.deg),
            epoch=target_epoch,
        )

    def angular_separation(
        self,
        ra1_rad: float,
        dec1_rad: float,
        ra2_rad: float,
        dec2_rad: float,
    ) -> float:
        return float(angular_separation(ra1_rad, dec1_rad, ra2_rad, dec2_rad))
