"""
Reading orchestration.

Validates birth data, computes the chart, asks the AI endpoint for a
reading and writes the combined HTML page.

Usage from Python:
    from celestial.reader import ReadingRequest, create_reading
    create_reading(ReadingRequest.from_strings(
        name="Luna", gender="Female",
        birth_date="1990-06-15", birth_time="14:30",
    ))
"""

import logging
import re
from dataclasses import dataclass
from datetime import date, datetime, time
from pathlib import Path
from typing import Optional

import httpx

from celestial.config import Settings
from celestial.ephemeris import BirthMoment, compute_positions, configure_ephemeris
from celestial.errors import InvalidRequest, OracleError
from celestial.oracle import ask_oracle
from celestial.prompt import build_prompt
from celestial.visualize import build_page, save_page

logger = logging.getLogger(__name__)

GENDERS = ("Female", "Male", "Non-Binary", "Other")
DEFAULT_GENDER = "Female"

ORACLE_FAILURE_MESSAGE = (
    "The connection to the stars is cloudy (API Error). Please try again."
)


@dataclass(frozen=True)
class ReadingRequest:
    name: str
    birth_date: Optional[date]
    birth_time: Optional[time]
    gender: str = DEFAULT_GENDER

    @classmethod
    def from_strings(cls, name: str, birth_date: str, birth_time: str,
                     gender: str = DEFAULT_GENDER) -> "ReadingRequest":
        """Parse 'YYYY-MM-DD' and 'HH:MM'; raises InvalidRequest on bad input."""
        try:
            d = datetime.strptime(birth_date, "%Y-%m-%d").date() if birth_date else None
        except ValueError as e:
            raise InvalidRequest(f"Invalid birth date {birth_date!r}: expected YYYY-MM-DD") from e
        try:
            t = datetime.strptime(birth_time, "%H:%M").time() if birth_time else None
        except ValueError as e:
            raise InvalidRequest(f"Invalid birth time {birth_time!r}: expected HH:MM") from e
        return cls(name=name, birth_date=d, birth_time=t, gender=gender)

    def validate(self) -> "ReadingRequest":
        if not self.name or not self.name.strip():
            raise InvalidRequest("Please tell us your name")
        if self.gender not in GENDERS:
            raise InvalidRequest(f"Unknown gender {self.gender!r}. Options: {list(GENDERS)}")
        if self.birth_date is None:
            raise InvalidRequest("Date of birth is required for the Sun sign")
        if self.birth_time is None:
            raise InvalidRequest("Time of birth is required for the Ascendant sign")
        return self

    @property
    def moment(self) -> BirthMoment:
        return BirthMoment.combine(self.birth_date, self.birth_time)


def slugify(name: str) -> str:
    """Filesystem-safe stem: word characters joined by underscores."""
    return re.sub(r"\W+", "_", name.strip().lower()).strip("_") or "chart"


def default_output_path(request: ReadingRequest, settings: Settings) -> Path:
    filename = slugify(request.name)
    return Path(settings.output_dir) / f"{filename}_chart.html"


def create_reading(request: ReadingRequest, output_path=None,
                   settings: Optional[Settings] = None,
                   client: Optional[httpx.Client] = None,
                   with_reading: bool = True) -> dict:
    """
    Compute the chart, fetch the reading and save the page.

    The chart is always produced. An endpoint failure is shown as an
    error banner on the page and reported in the summary; it is not
    raised.

    Args:
        request: birth data
        output_path: where to write the HTML (default: <output_dir>/<name>_chart.html)
        settings: runtime settings (default: from the environment)
        client: optional httpx.Client passed to the oracle
        with_reading: skip the AI call when False

    Returns:
        dict with keys: path, positions, reading, error

    Raises:
        InvalidRequest: if the birth data fails validation.
    """
    request.validate()
    settings = settings or Settings.from_env()
    configure_ephemeris(settings.ephe_path)

    positions = compute_positions(request.moment)
    missing = [p.body.name for p in positions if not p.known]
    if missing:
        logger.warning("Chart drawn without %s", ", ".join(missing))

    reading = None
    error = None
    if with_reading:
        prompt = build_prompt(request, positions)
        try:
            reading = ask_oracle(prompt, settings=settings, client=client)
        except OracleError as e:
            logger.warning("Reading unavailable: %s", e)
            error = ORACLE_FAILURE_MESSAGE

    html = build_page(request, positions, reading=reading, error=error,
                      size=settings.chart_size)
    path = save_page(html, output_path or default_output_path(request, settings))
    logger.info("Chart saved to %s", path)

    return {
        "path": path,
        "positions": [p.as_dict() for p in positions],
        "reading": reading,
        "error": error,
    }
