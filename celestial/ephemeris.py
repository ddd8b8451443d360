"""
Geocentric planetary projection.

Turns a civil birth date and time into a geocentric longitude and
zodiac sector for each body in CELESTIAL_BODIES.

Uses Swiss Ephemeris. If no data files are found in the ephemeris
directory the library falls back to its built-in Moshier theory, which
covers the seven classical bodies for several millennia around the
present.

The birth time is read as local clock time of the running process. No
birth-place timezone correction is made.
"""

import logging
import math
import os
from dataclasses import dataclass
from datetime import date, datetime, time, timezone
from typing import Iterable, List, Optional

import swisseph as swe

from celestial.config import DEFAULT_EPHE_PATH
from celestial.zodiac import (
    CELESTIAL_BODIES,
    CelestialBody,
    normalize_longitude,
    sector_name,
)

logger = logging.getLogger(__name__)


def configure_ephemeris(ephe_path: str) -> None:
    """Point Swiss Ephemeris at a data directory (missing files fall back to Moshier)."""
    logger.debug("Swiss Ephemeris path: %s", ephe_path)
    swe.set_ephe_path(ephe_path)


configure_ephemeris(os.getenv("CELESTIAL_EPHE_PATH", DEFAULT_EPHE_PATH))

# Apparent geocentric position (light-time and aberration applied),
# returned as an ecliptic-of-date Cartesian vector.
CALC_FLAGS = swe.FLG_SWIEPH | swe.FLG_XYZ


# ============================================================
# TYPES
# ============================================================

@dataclass(frozen=True)
class BirthMoment:
    year: int
    month: int
    day: int
    hour: int
    minute: int

    @classmethod
    def combine(cls, birth_date: date, birth_time: time) -> "BirthMoment":
        """Date's year/month/day with time's hour/minute; seconds dropped."""
        return cls(birth_date.year, birth_date.month, birth_date.day,
                   birth_time.hour, birth_time.minute)

    def to_datetime(self) -> datetime:
        """Naive local datetime for this moment."""
        return datetime(self.year, self.month, self.day, self.hour, self.minute)

    def julian_day(self) -> float:
        """Julian Day (UT), treating the moment as local system time."""
        utc = self.to_datetime().astimezone(timezone.utc)
        decimal_hours = utc.hour + utc.minute / 60.0 + utc.second / 3600.0
        return swe.julday(utc.year, utc.month, utc.day, decimal_hours)


@dataclass(frozen=True)
class BodyPosition:
    body: CelestialBody
    longitude: Optional[float]
    sector: str
    error: Optional[str] = None

    @property
    def known(self) -> bool:
        return self.longitude is not None

    def describe(self) -> str:
        """Short form such as '23° in Gemini'."""
        if not self.known:
            return "position unavailable"
        return f"{math.floor(self.longitude)}° in {self.sector}"

    def as_dict(self) -> dict:
        return {
            "body": self.body.name,
            "longitude": None if self.longitude is None else round(self.longitude, 4),
            "sector": self.sector,
            "error": self.error,
        }


# ============================================================
# PROJECTION
# ============================================================

def vector_longitude(x: float, y: float) -> float:
    """Angle of the (x, y) projection in degrees, folded into [0, 360)."""
    return normalize_longitude(math.degrees(math.atan2(y, x)))


def project_body(body: CelestialBody, jd: float) -> BodyPosition:
    """
    Compute one body's position at Julian Day `jd` (UT).

    A Swiss Ephemeris failure for this body is returned as an unknown
    position instead of being raised.
    """
    try:
        result, _flag = swe.calc_ut(jd, body.body_id, CALC_FLAGS)
    except swe.Error as e:
        logger.warning("Ephemeris lookup failed for %s at JD %.5f: %s", body.name, jd, e)
        return BodyPosition(body=body, longitude=None, sector="", error=str(e))

    longitude = vector_longitude(result[0], result[1])
    return BodyPosition(body=body, longitude=longitude, sector=sector_name(longitude))


def compute_positions(moment: BirthMoment,
                      bodies: Iterable[CelestialBody] = CELESTIAL_BODIES) -> List[BodyPosition]:
    """
    Compute positions for every body at the birth moment.

    Args:
        moment: civil birth date and time (local clock)
        bodies: bodies to project, in presentation order

    Returns:
        One BodyPosition per body, in the same order. Bodies whose
        lookup failed carry longitude None and an empty sector.
    """
    jd = moment.julian_day()
    logger.debug("Projecting bodies for %s (JD %.5f)", moment.to_datetime().isoformat(), jd)
    return [project_body(body, jd) for body in bodies]
