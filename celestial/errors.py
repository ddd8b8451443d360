"""Exception hierarchy for chart and reading failures."""


class CelestialError(Exception):
    """Base class for errors raised by this package."""


class InvalidRequest(CelestialError, ValueError):
    """Birth data failed validation before any computation ran."""


class OracleError(CelestialError):
    """The AI reading endpoint could not produce a reading."""
