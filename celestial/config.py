"""
Runtime settings, read from the environment (and a local .env file).

    CELESTIAL_ORACLE_URL       AI reading endpoint
    CELESTIAL_ORACLE_TIMEOUT   request timeout in seconds
    CELESTIAL_EPHE_PATH        Swiss Ephemeris data directory
    CELESTIAL_CHART_SIZE       chart diameter in SVG units
    CELESTIAL_OUTPUT_DIR       where generated pages are written
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_ORACLE_URL = "https://groqprompt.netlify.app/api/ai"
DEFAULT_ORACLE_TIMEOUT = 60.0
DEFAULT_EPHE_PATH = str(Path(__file__).parent.parent / "ephe")
DEFAULT_CHART_SIZE = 320
DEFAULT_OUTPUT_DIR = "chart_data"


def _number(name: str, default, cast):
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return cast(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not a valid %s", name, raw, cast.__name__)
        return default


@dataclass(frozen=True)
class Settings:
    oracle_url: str = DEFAULT_ORACLE_URL
    oracle_timeout: float = DEFAULT_ORACLE_TIMEOUT
    ephe_path: str = DEFAULT_EPHE_PATH
    chart_size: int = DEFAULT_CHART_SIZE
    output_dir: str = DEFAULT_OUTPUT_DIR

    @classmethod
    def from_env(cls, dotenv: bool = True) -> "Settings":
        if dotenv:
            load_dotenv()
        return cls(
            oracle_url=os.getenv("CELESTIAL_ORACLE_URL", DEFAULT_ORACLE_URL),
            oracle_timeout=_number("CELESTIAL_ORACLE_TIMEOUT", DEFAULT_ORACLE_TIMEOUT, float),
            ephe_path=os.getenv("CELESTIAL_EPHE_PATH", DEFAULT_EPHE_PATH),
            chart_size=_number("CELESTIAL_CHART_SIZE", DEFAULT_CHART_SIZE, int),
            output_dir=os.getenv("CELESTIAL_OUTPUT_DIR", DEFAULT_OUTPUT_DIR),
        )
