"""
Natal chart page: inline SVG wheel, planet table and AI reading in one
self-contained HTML file. Opens in any browser.

The reading is rendered from markdown (tables and strikethrough on, raw
HTML off, so any markup in the reply is escaped).
"""

from datetime import datetime
from pathlib import Path
from typing import Optional, Sequence

from markdown_it import MarkdownIt

from celestial.ephemeris import BodyPosition
from celestial.layout import ChartLayout, Circle, Glyph, Line, layout
from celestial.zodiac import SECTOR_BY_NAME, ZODIAC_SECTORS


DISCLAIMER = "* Readings are generated by AI for entertainment and guidance."

_markdown = (
    MarkdownIt("commonmark", {"html": False})
    .enable(["table", "strikethrough"])
)


# ============================================================
# HELPERS
# ============================================================

def escape_html(text):
    """Escape HTML special characters."""
    return (
        str(text).replace("&", "&amp;")
                 .replace("<", "&lt;")
                 .replace(">", "&gt;")
                 .replace('"', "&quot;")
    )


def render_markdown(text: str) -> str:
    """Markdown reading to HTML; raw HTML in the source is escaped."""
    return _markdown.render(text)


def _title(text):
    return f"<title>{escape_html(text)}</title>" if text else ""


def _circle_svg(c: Circle) -> str:
    stroke = (f' stroke="{c.stroke}" stroke-width="{c.stroke_width:g}"'
              if c.stroke else "")
    return (f'<circle cx="{c.cx:.1f}" cy="{c.cy:.1f}" r="{c.r:g}" '
            f'fill="{c.fill}"{stroke} opacity="{c.opacity:g}"/>')


def _line_svg(ln: Line) -> str:
    dash = f' stroke-dasharray="{ln.dash}"' if ln.dash else ""
    return (f'<line x1="{ln.x1:.1f}" y1="{ln.y1:.1f}" x2="{ln.x2:.1f}" y2="{ln.y2:.1f}" '
            f'stroke="{ln.stroke}" stroke-width="{ln.stroke_width:g}" '
            f'opacity="{ln.opacity:g}"{dash}/>')


def _glyph_svg(g: Glyph, cursor: str = "help") -> str:
    weight = ' font-weight="bold"' if g.bold else ""
    return (f'<text x="{g.x:.1f}" y="{g.y:.1f}" fill="{g.fill}" '
            f'font-size="{g.font_size}"{weight} text-anchor="middle" '
            f'dominant-baseline="middle" style="cursor:{cursor}">'
            f'{_title(g.title)}{escape_html(g.text)}</text>')


# ============================================================
# CHART WHEEL SVG
# ============================================================

def render_svg(chart: ChartLayout) -> str:
    """Serialize a ChartLayout to an inline SVG string."""
    size = chart.size
    parts = [f'<svg width="{size:g}" height="{size:g}" viewBox="0 0 {size:g} {size:g}" '
             f'xmlns="http://www.w3.org/2000/svg">']

    # --- Zodiac ring ---
    for ring in chart.rings:
        parts.append(_circle_svg(ring))

    for divider, glyph in zip(chart.dividers, chart.sector_glyphs):
        parts.append('<g>')
        parts.append(_line_svg(divider))
        parts.append(_glyph_svg(glyph))
        parts.append('</g>')

    # --- Bodies ---
    for marker in chart.bodies:
        parts.append(f'<g class="body" data-body="{escape_html(marker.name)}" '
                     f'style="cursor:pointer">')
        parts.append(_title(marker.glyph.title))
        parts.append(_line_svg(marker.guide))
        parts.append(_circle_svg(marker.marker))
        parts.append(_glyph_svg(marker.glyph, cursor="pointer"))
        parts.append('</g>')

    # --- Observer ---
    parts.append(_circle_svg(chart.center))

    parts.append('</svg>')
    return "\n".join(parts)


def generate_wheel_svg(positions: Sequence[BodyPosition], size: float = 320) -> str:
    return render_svg(layout(ZODIAC_SECTORS, positions, size))


# ============================================================
# PLANET TABLE
# ============================================================

def generate_planet_table_html(positions: Sequence[BodyPosition]) -> str:
    """One row per body, in table order."""
    rows = []
    for pos in positions:
        body = pos.body
        if pos.known:
            sector = SECTOR_BY_NAME.get(pos.sector)
            color = sector.color if sector else body.color
            sign_glyph = sector.glyph if sector else ""
            degree_in_sign = pos.longitude % 30
            where = (f'<span style="color:{color}">{degree_in_sign:.1f}° '
                     f'{escape_html(pos.sector)}</span> {sign_glyph}')
            lon = f"{pos.longitude:.2f}°"
        else:
            where = '<span class="pt-unknown">position unavailable</span>'
            lon = ""

        rows.append(
            f'<tr>'
            f'<td class="pt-glyph" style="color:{body.color}">{body.glyph}</td>'
            f'<td class="pt-name">{escape_html(body.name)}</td>'
            f'<td class="pt-pos">{where}</td>'
            f'<td class="pt-lon">{lon}</td>'
            f'</tr>'
        )

    return (
        '<table class="planet-table">'
        '<tbody>' + "\n".join(rows) + '</tbody>'
        '</table>'
    )


# ============================================================
# CSS
# ============================================================

CSS = """
* { box-sizing: border-box; margin: 0; padding: 0; }
body {
    background: radial-gradient(ellipse at bottom, #1B2735 0%, #090A0F 100%);
    color: #e5ddd0;
    font-family: 'Quicksand', sans-serif;
    min-height: 100vh;
    padding: 40px 20px;
}
.card {
    max-width: 700px;
    margin: 0 auto;
    padding: 32px;
    border-radius: 8px;
    background: rgba(0, 0, 0, 0.2);
}
.header { text-align: center; margin-bottom: 30px; }
.header .moon { font-size: 40px; color: #ffd700; }
.header h1 {
    font-family: 'Cinzel Decorative', Georgia, serif;
    font-size: 32px;
    color: #e5ddd0;
}
.header .tagline { color: #bfa5d6; font-size: 16px; }
.header .meta { color: #8a8178; font-size: 13px; margin-top: 8px; }
.divider {
    border-top: 1px dashed #ffd700;
    color: #ffd700;
    text-align: center;
    margin: 24px 0;
    padding-top: 8px;
}
.chart { text-align: center; margin: 20px 0; }
.chart .hint { color: #bfa5d6; font-size: 12px; margin-top: 10px; }
.planet-table { margin: 0 auto 24px; border-collapse: collapse; font-size: 14px; }
.planet-table td { padding: 4px 10px; border-bottom: 1px solid #2e2a24; }
.pt-glyph { font-size: 18px; text-align: center; }
.pt-lon { color: #8a8178; font-size: 12px; text-align: right; }
.pt-unknown { color: #5c564e; font-style: italic; }
.error-banner {
    margin-top: 20px;
    padding: 12px 16px;
    border-radius: 8px;
    background: rgba(255, 0, 0, 0.1);
    border: 1px solid #ff4d4f;
    color: #ffccc7;
}
.mystic-markdown {
    line-height: 1.75;
    font-size: 15px;
    padding: 16px 20px;
    border-radius: 8px;
    border: 1px solid rgba(178, 62, 255, 0.3);
}
.mystic-markdown h1, .mystic-markdown h2, .mystic-markdown h3 { color: #ffd700; margin: 12px 0 6px; }
.mystic-markdown p, .mystic-markdown ul, .mystic-markdown ol { margin: 8px 0; }
.mystic-markdown ul, .mystic-markdown ol { padding-left: 22px; }
.mystic-markdown strong { color: #f5e6ff; }
.mystic-markdown a { color: #ffd700; text-decoration: underline; }
.mystic-markdown blockquote {
    border-left: 3px solid #b23eff;
    padding-left: 12px;
    color: #bfa5d6;
    font-style: italic;
}
.mystic-markdown table { border-collapse: collapse; margin: 8px 0; }
.mystic-markdown th, .mystic-markdown td { border: 1px solid #2e2a24; padding: 4px 8px; }
.disclaimer {
    text-align: center;
    margin-top: 20px;
    opacity: 0.7;
    font-size: 12px;
    color: #bfa5d6;
}
"""


# ============================================================
# HTML ASSEMBLY
# ============================================================

def _format_meta(request) -> str:
    when = datetime.combine(request.birth_date, request.birth_time)
    return (f"{request.gender} · born {when:%B} {when.day}, {when.year} "
            f"at {when:%H:%M}")


def build_page(request, positions: Sequence[BodyPosition],
               reading: Optional[str] = None, error: Optional[str] = None,
               size: float = 320) -> str:
    """
    Assemble the full HTML page.

    Args:
        request: ReadingRequest with name, gender, birth_date, birth_time
        positions: body positions in table order
        reading: markdown text from the oracle, if any
        error: message shown in the error banner, if any
        size: chart diameter

    Returns:
        Self-contained HTML document as a string.
    """
    wheel_svg = generate_wheel_svg(positions, size)
    planet_table = generate_planet_table_html(positions)

    error_html = ""
    if error:
        error_html = f'<div class="error-banner" role="alert">{escape_html(error)}</div>'

    reading_html = ""
    if reading:
        reading_html = (
            '<div class="mystic-result-container">'
            f'<div class="mystic-markdown">{render_markdown(reading)}</div>'
            '</div>'
        )

    plotted = sum(1 for p in positions if p.known)
    hint = "Hover over symbols for details"
    if plotted < len(positions):
        hint += f" · {len(positions) - plotted} body position(s) unavailable"

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>Celestial Guide — {escape_html(request.name)}</title>
<style>
{CSS}
</style>
</head>
<body>
<div class="card">
<div class="header">
<div class="moon">☽</div>
<h1>Celestial Guide</h1>
<div class="tagline">Unlock the secrets of your birth chart</div>
<div class="meta">{escape_html(request.name)} — {escape_html(_format_meta(request))}</div>
</div>

{error_html}

<div class="divider">★ Your Reading ★</div>

<div class="chart">
{wheel_svg}
<div class="hint">{hint}</div>
</div>

{planet_table}

{reading_html}

<div class="disclaimer">{escape_html(DISCLAIMER)}</div>
</div>
</body>
</html>"""


def save_page(html: str, path) -> str:
    """Write the page, creating parent directories. Returns the path."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(html)
    return str(path)
