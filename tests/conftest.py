from datetime import date, time

import httpx
import pytest

from celestial.config import Settings
from celestial.ephemeris import BodyPosition
from celestial.reader import ReadingRequest
from celestial.zodiac import CELESTIAL_BODIES, sector_name


@pytest.fixture
def settings(tmp_path):
    return Settings(
        oracle_url="https://oracle.test/api/ai",
        oracle_timeout=5.0,
        output_dir=str(tmp_path),
    )


@pytest.fixture
def request_1990():
    return ReadingRequest(
        name="Luna Stargazer",
        gender="Female",
        birth_date=date(1990, 6, 15),
        birth_time=time(14, 30),
    )


def _positions_for(longitudes):
    positions = []
    for body, lon in zip(CELESTIAL_BODIES, longitudes):
        if lon is None:
            positions.append(BodyPosition(body=body, longitude=None, sector="", error="boom"))
        else:
            positions.append(BodyPosition(body=body, longitude=lon, sector=sector_name(lon)))
    return positions


@pytest.fixture
def make_positions():
    """BodyPositions for the body table; None marks an unknown position."""
    return _positions_for


@pytest.fixture
def oracle_client():
    """httpx.Client whose requests are answered by `handler`."""
    def build(handler):
        return httpx.Client(transport=httpx.MockTransport(handler))
    return build
