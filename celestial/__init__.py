"""Celestial Guide: natal chart wheel and AI astrologer reading."""

__version__ = "0.1.0"
