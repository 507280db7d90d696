import datetime
import logging
import math

from targetplan.ephemeris.base import EphemerisProvider
from targetplan.types import Angle, Coordinates, Epoch, ObserverInfo
from targetplan.util.validate import not_none

logger = logging.getLogger(__name__)


def get_moon_illumination(ephemeris: EphemerisProvider, at_time: datetime.datetime) -> float:
    """Illuminated fraction of the Moon's disk, 0 at new moon and 1 at full."""
    jd = ephemeris.julian_date(at_time)
    positions = ephemeris.sun_and_moon_position(at_time, jd)
    sun, moon = positions.sun, positions.moon

    sun_ra = Angle.by_hours(sun.ra_hours)
    sun_dec = Angle.by_degrees(sun.dec_deg)
    moon_ra = Angle.by_hours(moon.ra_hours)
    moon_dec = Angle.by_degrees(moon.dec_deg)

    # Geocentric elongation of the Moon from the Sun.
    phi = Angle.acos(
        sun_dec.sin() * moon_dec.sin()
        + sun_dec.cos() * moon_dec.cos() * (sun_ra - moon_ra).cos()
    )
    phase_angle = Angle.atan2(
        sun.distance_au * phi.sin(),
        moon.distance_au - sun.distance_au * phi.cos(),
    )
    fraction = (1.0 + phase_angle.cos()) / 2.0
    logger.debug("Moon at JD %.5f: elongation %.2f deg, illumination %.3f", jd, phi.degrees, fraction)
    return fraction


def get_moon_separation_angle(
    ephemeris: EphemerisProvider,
    location: ObserverInfo,
    at_time: datetime.datetime,
    target: Coordinates,
) -> float:
    """Angle in degrees between the topocentric Moon and ``target``.

    ``target`` is reduced to the equinox of ``at_time`` first so both
    positions share a frame.
    """
    not_none(location, "location cannot be None")
    not_none(target, "target cannot be None")

    moon = ephemeris.moon_position(at_time, ephemeris.julian_date(at_time), location)
    moon_ra_rad = Angle.by_hours(moon.ra_hours).radians
    moon_dec_rad = math.radians(moon.dec_deg)

    target_jnow = ephemeris.transform_epoch(target, Epoch.JNOW, at_time)
    target_ra_rad = Angle.by_hours(target_jnow.ra_hours).radians
    target_dec_rad = math.radians(target_jnow.dec_deg)

    theta = ephemeris.angular_separation(moon_ra_rad, moon_dec_rad, target_ra_rad, target_dec_rad)
    return min(180.0, max(0.0, math.degrees(theta)))
