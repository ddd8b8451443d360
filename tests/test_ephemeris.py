from datetime import date, time

import pytest
import swisseph as swe

from celestial import ephemeris
from celestial.ephemeris import (
    BirthMoment,
    compute_positions,
    configure_ephemeris,
    project_body,
    vector_longitude,
)
from celestial.zodiac import CELESTIAL_BODIES, SECTOR_BY_NAME, SECTOR_WIDTH


MOMENT = BirthMoment(1990, 6, 15, 14, 30)


def test_combine_drops_seconds():
    moment = BirthMoment.combine(date(1990, 6, 15), time(14, 30, 59))
    assert moment == MOMENT
    assert moment.to_datetime().second == 0


def test_vector_longitude_quadrants():
    assert vector_longitude(1.0, 0.0) == 0.0
    assert vector_longitude(0.0, 1.0) == pytest.approx(90.0)
    assert vector_longitude(-1.0, 0.0) == pytest.approx(180.0)
    assert vector_longitude(0.0, -1.0) == pytest.approx(270.0)
    assert vector_longitude(1.0, -1e-300) < 360.0


def test_scenario_1990():
    positions = compute_positions(MOMENT)

    assert [p.body for p in positions] == list(CELESTIAL_BODIES)
    for p in positions:
        assert p.known
        assert 0.0 <= p.longitude < 360.0
        assert p.sector
        sector = SECTOR_BY_NAME[p.sector]
        assert sector.start <= p.longitude < sector.start + SECTOR_WIDTH

    # Mid-June: the Sun is in the last third of Gemini whatever the local zone
    assert positions[0].sector == "Gemini"


def test_projection_is_deterministic():
    first = compute_positions(MOMENT)
    second = compute_positions(MOMENT)
    assert [p.longitude for p in first] == [p.longitude for p in second]
    assert [p.sector for p in first] == [p.sector for p in second]


def test_failed_body_is_isolated(monkeypatch):
    real_calc_ut = swe.calc_ut

    def flaky_calc_ut(jd, body_id, flags):
        if body_id == swe.MARS:
            raise swe.Error("ephemeris file not found")
        return real_calc_ut(jd, body_id, flags)

    monkeypatch.setattr(ephemeris.swe, "calc_ut", flaky_calc_ut)

    positions = compute_positions(MOMENT)
    assert len(positions) == 7
    mars = positions[4]
    assert mars.body.name == "Mars"
    assert not mars.known
    assert mars.sector == ""
    assert "not found" in mars.error
    assert mars.describe() == "position unavailable"
    assert all(p.known for i, p in enumerate(positions) if i != 4)


def test_project_body_reports_error(monkeypatch):
    def broken(jd, body_id, flags):
        raise swe.Error("out of range")

    monkeypatch.setattr(ephemeris.swe, "calc_ut", broken)
    pos = project_body(CELESTIAL_BODIES[0], MOMENT.julian_day())
    assert pos.as_dict() == {"body": "Sun", "longitude": None, "sector": "", "error": "out of range"}


def test_describe():
    pos = compute_positions(MOMENT)[0]
    assert pos.describe().endswith("in Gemini")
    assert pos.describe().split("°")[0].isdigit()


def test_configure_ephemeris_sets_path(monkeypatch, tmp_path):
    calls = []
    monkeypatch.setattr(ephemeris.swe, "set_ephe_path", calls.append)
    configure_ephemeris(str(tmp_path))
    assert calls == [str(tmp_path)]
