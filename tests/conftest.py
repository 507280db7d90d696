from dataclasses import replace

import pytest

from targetplan.ephemeris.base import EphemerisProvider
from targetplan.types import SkyPosition, SunMoonPosition


def pytest_addoption(parser):
    parser.addoption(
        "--integration",
        action="store_true",
        default=False,
        help="run tests marked as integration",
    )


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "integration: needs network access or external data files"
    )


def pytest_collection_modifyitems(config, items):
    if config.getoption("--integration"):
        return

    for item in items:
        if "integration" in item.keywords:
            item.add_marker(
                pytest.mark.skip(
                    reason="need --integration option to run integration tests"
                )
            )


SUN_AT_ORIGIN = SkyPosition(ra_hours=0.0, dec_deg=0.0, distance_au=1.0)
MOON_AT_ORIGIN = SkyPosition(ra_hours=0.0, dec_deg=0.0, distance_au=0.00257)


class FakeEphemerisProvider(EphemerisProvider):
    """Returns fixed values and records every call it receives."""

    name = "fake"

    def __init__(
        self,
        *,
        lst_hours=0.0,
        jd=2451545.0,
        sun=SUN_AT_ORIGIN,
        moon=MOON_AT_ORIGIN,
        topocentric_moon=None,
    ):
        self.lst_hours = lst_hours
        self.jd = jd
        self.sun = sun
        self.moon = moon
        self.topocentric_moon = topocentric_moon or moon
        self.calls = []

    def local_sidereal_time(self, at_time, longitude_deg):
        self.calls.append(("local_sidereal_time", at_time, longitude_deg))
        return self.lst_hours

    def julian_date(self, at_time):
        self.calls.append(("julian_date", at_time))
        return self.jd

    def sun_and_moon_position(self, at_time, julian_date):
        self.calls.append(("sun_and_moon_position", at_time, julian_date))
        return SunMoonPosition(sun=self.sun, moon=self.moon)

    def moon_position(self, at_time, julian_date, observer):
        self.calls.append(("moon_position", at_time, julian_date, observer))
        return self.topocentric_moon

    def transform_epoch(self, coordinates, target_epoch, at_time):
        self.calls.append(("transform_epoch", coordinates, target_epoch, at_time))
        return replace(coordinates, epoch=target_epoch)


@pytest.fixture
def fake_ephemeris():
    return FakeEphemerisProvider


@pytest.fixture
def low_precision():
    from targetplan.ephemeris import LowPrecisionEphemerisProvider

    return LowPrecisionEphemerisProvider()
