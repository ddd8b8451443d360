"""
Astrologer prompt for the AI reading endpoint.
"""

from datetime import date, time
from typing import Optional, Sequence

from celestial.ephemeris import BodyPosition


PROMPT_TEMPLATE = """
Act as a warm, intuitive, and mystical Astrologer.
Reveal the celestial secrets for:
- Name: {name}
- Gender: {gender}
- Born: {born_date} at {born_time}
{positions_line}
Please format your response using **Markdown**:
1. **Celestial Trinity**: Identify Sun, Moon, and Ascendant signs with a brief, poetic description of the combination.
2. **Soul Signature**: A summary of their personality and inner light.
3. **Destiny & Heart**: A forecast for career paths and romantic connections.

Tone: Empowering, mysterious, and kind. Use bullet points and bold text for readability.
"""


def format_birth_date(d: date) -> str:
    """'June 15, 1990'."""
    return f"{d:%B} {d.day}, {d.year}"


def format_birth_time(t: time) -> str:
    """12-hour clock, e.g. '2:30 PM'."""
    hour = t.hour % 12 or 12
    suffix = "AM" if t.hour < 12 else "PM"
    return f"{hour}:{t.minute:02d} {suffix}"


def format_positions(positions: Sequence[BodyPosition]) -> str:
    """'Sun 23° in Gemini, Moon 4° in Libra, ...' for known bodies only."""
    return ", ".join(f"{p.body.name} {p.describe()}" for p in positions if p.known)


def build_prompt(request, positions: Optional[Sequence[BodyPosition]] = None) -> str:
    """
    Build the reading prompt for a ReadingRequest.

    When positions are given, the computed placements are listed so the
    reading agrees with the chart shown beside it.
    """
    positions_line = ""
    if positions:
        listed = format_positions(positions)
        if listed:
            positions_line = f"- Planetary positions: {listed}\n"

    return PROMPT_TEMPLATE.format(
        name=request.name,
        gender=request.gender,
        born_date=format_birth_date(request.birth_date),
        born_time=format_birth_time(request.birth_time),
        positions_line=positions_line,
    ).strip()
