"""Cooking time utilities."""

from .minutes import MINUTES_PER_HOUR, format_minutes, parse_minutes

__all__ = ["parse_minutes", "format_minutes", "MINUTES_PER_HOUR"]
