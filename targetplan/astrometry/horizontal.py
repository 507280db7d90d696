import datetime

from targetplan.ephemeris.base import EphemerisProvider
from targetplan.types import Angle, Coordinates, HorizontalCoordinate, ObserverInfo
from targetplan.util.validate import not_none


def get_horizontal_coordinates(
    ephemeris: EphemerisProvider,
    location: ObserverInfo,
    coordinates: Coordinates,
    at_time: datetime.datetime,
) -> HorizontalCoordinate:
    """Altitude and azimuth of ``coordinates`` seen from ``location`` at ``at_time``.

    Azimuth is measured from north through east and normalized to [0, 360).
    At the zenith and at the geographic poles, where azimuth is undefined,
    the result is still finite.
    """
    not_none(location, "location cannot be None")
    not_none(coordinates, "coordinates cannot be None")

    sidereal_time = ephemeris.local_sidereal_time(at_time, location.longitude_deg)
    hour_angle = Angle.by_hours(ephemeris.hour_angle(sidereal_time, coordinates.ra_hours))
    lat = Angle.by_degrees(location.latitude_deg)
    dec = Angle.by_degrees(coordinates.dec_deg)

    altitude = Angle.asin(dec.sin() * lat.sin() + dec.cos() * lat.cos() * hour_angle.cos())
    azimuth = Angle.atan2(
        -dec.cos() * hour_angle.sin(),
        dec.sin() * lat.cos() - dec.cos() * lat.sin() * hour_angle.cos(),
    )
    azimuth_deg = azimuth.degrees % 360.0
    # A tiny negative atan2 result wraps to exactly 360.0.
    if azimuth_deg >= 360.0:
        azimuth_deg = 0.0
    return HorizontalCoordinate(
        altitude_deg=altitude.degrees,
        azimuth_deg=azimuth_deg,
    )
