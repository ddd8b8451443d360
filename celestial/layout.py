"""
Chart wheel geometry.

Maps sector boundaries and body longitudes onto concentric rings of a
square diagram and returns plain drawable primitives. Nothing here
touches SVG; see celestial.visualize for serialization.

Angle convention: 0° at 3 o'clock, longitude increasing clockwise on
screen (y grows downward), i.e. angle = -degree.
"""

import math
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Tuple

from celestial.ephemeris import BodyPosition
from celestial.zodiac import ZodiacSector


# ============================================================
# CONSTANTS
# ============================================================

DEFAULT_SIZE = 320
MARGIN = 10
RING_WIDTH = 40

SIGN_INSET = 20
BODY_INSET = 20
BODY_STAGGER = 15
BODY_MARKER_RADIUS = 10
CENTER_MARKER_RADIUS = 5

RING_COLOR = "#b23eff"
MARKER_FILL = "#1B2735"
CENTER_COLOR = "#ffd700"


# ============================================================
# PRIMITIVES
# ============================================================

@dataclass(frozen=True)
class Circle:
    cx: float
    cy: float
    r: float
    fill: str = "none"
    stroke: Optional[str] = None
    stroke_width: float = 1.0
    opacity: float = 1.0


@dataclass(frozen=True)
class Line:
    x1: float
    y1: float
    x2: float
    y2: float
    stroke: str
    stroke_width: float = 1.0
    opacity: float = 1.0
    dash: str = ""


@dataclass(frozen=True)
class Glyph:
    x: float
    y: float
    text: str
    fill: str
    font_size: int = 14
    bold: bool = False
    title: str = ""


@dataclass(frozen=True)
class BodyMarker:
    name: str
    radius: float
    guide: Line
    marker: Circle
    glyph: Glyph


@dataclass(frozen=True)
class ChartLayout:
    size: float
    rings: Tuple[Circle, ...]
    dividers: Tuple[Line, ...]
    sector_glyphs: Tuple[Glyph, ...]
    bodies: Tuple[BodyMarker, ...]
    center: Circle


# ============================================================
# GEOMETRY
# ============================================================

@dataclass(frozen=True)
class ChartGeometry:
    size: float = DEFAULT_SIZE
    margin: float = MARGIN
    ring_width: float = RING_WIDTH

    @property
    def center(self) -> float:
        return self.size / 2

    @property
    def radius(self) -> float:
        return self.size / 2 - self.margin

    @property
    def inner_radius(self) -> float:
        return self.radius - self.ring_width

    def point(self, degree: float, r: float) -> Tuple[float, float]:
        """Polar (degree, r) to diagram x, y."""
        angle = -degree * (math.pi / 180)
        return (self.center + r * math.cos(angle),
                self.center + r * math.sin(angle))

    def body_radius(self, index: int) -> float:
        """Alternate between two radii by table index to spread neighbours."""
        return self.inner_radius - BODY_INSET - (index % 2) * BODY_STAGGER


# ============================================================
# LAYOUT
# ============================================================

def _sector_parts(geom: ChartGeometry, sector: ZodiacSector) -> Tuple[Line, Glyph]:
    c = geom.center
    x2, y2 = geom.point(sector.start, geom.radius)
    divider = Line(c, c, x2, y2, stroke=RING_COLOR, stroke_width=0.5, opacity=0.2)

    tx, ty = geom.point(sector.start + 15, geom.radius - SIGN_INSET)
    glyph = Glyph(tx, ty, sector.glyph, fill=sector.color, font_size=16,
                  bold=True, title=sector.tooltip)
    return divider, glyph


def _body_marker(geom: ChartGeometry, index: int, position: BodyPosition) -> BodyMarker:
    body = position.body
    c = geom.center
    r = geom.body_radius(index)
    x, y = geom.point(position.longitude, r)
    return BodyMarker(
        name=body.name,
        radius=r,
        guide=Line(c, c, x, y, stroke=body.color, stroke_width=1, opacity=0.3, dash="2,2"),
        marker=Circle(x, y, BODY_MARKER_RADIUS, fill=MARKER_FILL, stroke=body.color),
        glyph=Glyph(x, y + 1, body.glyph, fill=body.color, font_size=14,
                    title=f"{body.name}: {position.describe()}"),
    )


def layout(sectors: Iterable[ZodiacSector],
           positions: Sequence[BodyPosition],
           size: float = DEFAULT_SIZE) -> ChartLayout:
    """
    Lay out the chart wheel.

    Args:
        sectors: zodiac sectors, each drawn as a divider and a glyph
        positions: body positions in table order; unknown ones are skipped
            but keep their index for the radius alternation
        size: diagram width and height

    Returns:
        ChartLayout of immutable primitives.
    """
    geom = ChartGeometry(size=size)
    c = geom.center

    rings = (
        Circle(c, c, geom.radius, stroke=RING_COLOR, opacity=0.3),
        Circle(c, c, geom.inner_radius, stroke=RING_COLOR, opacity=0.3),
    )

    dividers = []
    glyphs = []
    for sector in sectors:
        divider, glyph = _sector_parts(geom, sector)
        dividers.append(divider)
        glyphs.append(glyph)

    markers = tuple(
        _body_marker(geom, i, pos)
        for i, pos in enumerate(positions)
        if pos.known
    )

    return ChartLayout(
        size=size,
        rings=rings,
        dividers=tuple(dividers),
        sector_glyphs=tuple(glyphs),
        bodies=markers,
        center=Circle(c, c, CENTER_MARKER_RADIUS, fill=CENTER_COLOR, opacity=0.8),
    )
