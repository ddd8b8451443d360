"""
Static zodiac and body tables.

Twelve 30° sectors in ecliptic order, and the seven classical bodies
resolved through Swiss Ephemeris. Both tables are read-only and built
once at import.
"""

import math
from dataclasses import dataclass
from typing import Optional

import swisseph as swe


# ============================================================
# TYPES
# ============================================================

@dataclass(frozen=True)
class ZodiacSector:
    name: str
    glyph: str
    color: str
    start: float
    description: str

    @property
    def tooltip(self) -> str:
        return f"{self.name}: {self.description}"


@dataclass(frozen=True)
class CelestialBody:
    name: str
    body_id: int
    glyph: str
    color: str


# ============================================================
# CONSTANTS
# ============================================================

SECTOR_WIDTH = 30.0

ZODIAC_SECTORS = (
    ZodiacSector("Aries", "♈", "#FF5733", 0, "The Ram"),
    ZodiacSector("Taurus", "♉", "#4CAF50", 30, "The Bull"),
    ZodiacSector("Gemini", "♊", "#FFC107", 60, "The Twins"),
    ZodiacSector("Cancer", "♋", "#B23EFF", 90, "The Crab"),
    ZodiacSector("Leo", "♌", "#FF9800", 120, "The Lion"),
    ZodiacSector("Virgo", "♍", "#8BC34A", 150, "The Virgin"),
    ZodiacSector("Libra", "♎", "#03A9F4", 180, "The Scales"),
    ZodiacSector("Scorpio", "♏", "#E91E63", 210, "The Scorpion"),
    ZodiacSector("Sagittarius", "♐", "#9C27B0", 240, "The Archer"),
    ZodiacSector("Capricorn", "♑", "#795548", 270, "The Goat"),
    ZodiacSector("Aquarius", "♒", "#00BCD4", 300, "The Water Bearer"),
    ZodiacSector("Pisces", "♓", "#3F51B5", 330, "The Fish"),
)

CELESTIAL_BODIES = (
    CelestialBody("Sun", swe.SUN, "☉", "#FFD700"),
    CelestialBody("Moon", swe.MOON, "☽", "#E0E0E0"),
    CelestialBody("Mercury", swe.MERCURY, "☿", "#B0BEC5"),
    CelestialBody("Venus", swe.VENUS, "♀", "#F48FB1"),
    CelestialBody("Mars", swe.MARS, "♂", "#EF5350"),
    CelestialBody("Jupiter", swe.JUPITER, "♃", "#FFCA28"),
    CelestialBody("Saturn", swe.SATURN, "♄", "#8D6E63"),
)

SECTOR_BY_NAME = {sector.name: sector for sector in ZODIAC_SECTORS}


# ============================================================
# HELPERS
# ============================================================

def normalize_longitude(angle: float) -> float:
    """Fold an angle in degrees into [0, 360)."""
    lon = angle % 360.0
    # -1e-15 % 360.0 rounds up to exactly 360.0
    if lon >= 360.0:
        lon = 0.0
    return lon


def sector_for_longitude(longitude: Optional[float]) -> Optional[ZodiacSector]:
    """
    Return the sector whose half-open interval [start, start + 30)
    contains the longitude, or None if it lies outside [0, 360).
    """
    if longitude is None or math.isnan(longitude):
        return None
    if not 0.0 <= longitude < 360.0:
        return None
    return ZODIAC_SECTORS[int(longitude // SECTOR_WIDTH)]


def sector_name(longitude: Optional[float]) -> str:
    """Sector name for a longitude, or "" when it cannot be classified."""
    sector = sector_for_longitude(longitude)
    return sector.name if sector else ""
