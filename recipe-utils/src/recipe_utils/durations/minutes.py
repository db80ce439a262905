"""Duration parsing and formatting utilities."""

import logging
import re
from typing import Any, Optional

logger = logging.getLogger(__name__)

# --- Constants ---

MINUTES_PER_HOUR = 60

# Patterns run against lowercased text
HOURS_RE = re.compile(r"(\d+)\s*hour", re.ASCII)
MINUTES_RE = re.compile(r"(\d+)\s*(?:minute|min)s?", re.ASCII)
MINUTES_SHORT_RE = re.compile(r"(\d+)\s*m\b", re.ASCII)
BARE_NUMBER_RE = re.compile(r"(\d+)\b", re.ASCII)

# --- Functions ---


def parse_minutes(text: Any) -> Optional[int]:
    """Parse a free-text duration into a number of minutes.

    Hour and minute components are found independently and summed, so word
    order does not matter. Text with neither component falls back to the
    first bare number, read as minutes.

    Args:
        text: Duration text such as "1 hour 30 minutes", "45 min" or "90".

    Returns:
        Total minutes, or None if the input is not text or holds no number.

    Examples:
        >>> parse_minutes("2 Hours 15 Mins")
        135
        >>> parse_minutes("45")
        45
        >>> parse_minutes("overnight") is None
        True
    """
    if not isinstance(text, str) or not text:
        return None

    low = text.lower()
    try:
        hours = HOURS_RE.search(low)
        minutes = MINUTES_RE.search(low) or MINUTES_SHORT_RE.search(low)
        if hours or minutes:
            total = 0
            if hours:
                total += int(hours.group(1)) * MINUTES_PER_HOUR
            if minutes:
                total += int(minutes.group(1))
            return total

        bare = BARE_NUMBER_RE.search(low)
        if bare:
            return int(bare.group(1))
    except ValueError as e:
        logger.debug(f"Could not parse duration {text!r}: {e}")
        return None

    return None


def format_minutes(minutes: Optional[int]) -> str:
    """Format a number of minutes as "Xh Ym".

    Examples:
        >>> format_minutes(90)
        '1h 30m'
        >>> format_minutes(120)
        '2h'
        >>> format_minutes(None)
        ''
    """
    if minutes is None:
        return ""

    if minutes >= MINUTES_PER_HOUR:
        hours, remainder = divmod(minutes, MINUTES_PER_HOUR)
        if remainder == 0:
            return f"{hours}h"
        return f"{hours}h {remainder}m"

    return f"{minutes}m"
