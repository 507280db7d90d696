import datetime
import math

import pytest
from astropy.coordinates import FK5, TETE, SkyCoord, angular_separation
from astropy.time import Time
import astropy.units as u

from targetplan.astrometry import get_moon_illumination, get_moon_separation_angle
from targetplan.ephemeris import AstropyEphemerisProvider
from targetplan.types import Coordinates, Epoch, ObserverInfo

J2000_NOON = datetime.datetime(2000, 1, 1, 12, 0, tzinfo=datetime.timezone.utc)


@pytest.fixture
def provider():
    return AstropyEphemerisProvider()


def test_julian_date(provider):
    assert provider.julian_date(J2000_NOON) == pytest.approx(2451545.0)


def test_transform_epoch_same_epoch_is_identity(provider):
    coords = Coordinates(ra_hours=5.59, dec_deg=-5.39)
    assert provider.transform_epoch(coords, Epoch.J2000, J2000_NOON) is coords


def test_transform_epoch_to_jnow_precesses(provider):
    coords = Coordinates(ra_hours=0.0, dec_deg=0.0)
    t = datetime.datetime(2050, 1, 1, 12, 0, tzinfo=datetime.timezone.utc)
    jnow = provider.transform_epoch(coords, Epoch.JNOW, t)
    assert jnow.epoch == Epoch.JNOW
    assert jnow.ra_hours == pytest.approx(50 * 3.075 / 3600.0, abs=0.002)
    assert jnow.dec_deg == pytest.approx(50 * 20.04 / 3600.0, abs=0.005)


def test_jnow_is_the_apparent_frame_of_date(provider):
    t = datetime.datetime(2024, 7, 1, 14, 0, tzinfo=datetime.timezone.utc)
    coords = Coordinates(ra_hours=5.59, dec_deg=-5.39)
    jnow = provider.transform_epoch(coords, Epoch.JNOW, t)
    expected = SkyCoord(
        ra=coords.ra_hours * u.hourangle,
        dec=coords.dec_deg * u.deg,
        frame=FK5(equinox=Time("J2000")),
    ).transform_to(TETE(obstime=Time(t, scale="utc")))
    offset = angular_separation(
        math.radians(jnow.ra_hours * 15.0),
        math.radians(jnow.dec_deg),
        expected.ra.rad,
        expected.dec.rad,
    )
    assert math.degrees(float(offset)) * 3600.0 < 1.0


def test_angular_separation(provider):
    assert provider.angular_separation(0.0, 0.0, math.pi / 2, 0.0) == pytest.approx(math.pi / 2)


@pytest.mark.integration
def test_local_sidereal_time_range(provider):
    lst = provider.local_sidereal_time(J2000_NOON, 138.6)
    assert 0.0 <= lst < 24.0


@pytest.mark.integration
def test_moon_illumination_at_full_and_new_moon(provider):
    full = datetime.datetime(2024, 1, 25, 17, 54, tzinfo=datetime.timezone.utc)
    new = datetime.datetime(2024, 1, 11, 11, 57, tzinfo=datetime.timezone.utc)
    assert get_moon_illumination(provider, full) > 0.99
    assert get_moon_illumination(provider, new) < 0.01


@pytest.mark.integration
def test_moon_separation_range(provider):
    location = ObserverInfo(latitude_deg=-34.93, longitude_deg=138.60, elevation_m=50)
    t = datetime.datetime(2024, 7, 1, 14, 0, tzinfo=datetime.timezone.utc)
    sep = get_moon_separation_angle(provider, location, t, Coordinates(ra_hours=5.59, dec_deg=-5.39))
    assert 0.0 <= sep <= 180.0
