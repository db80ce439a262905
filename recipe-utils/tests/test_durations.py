import logging
import sys

import pytest

from recipe_utils.durations import format_minutes, parse_minutes


@pytest.mark.parametrize(
    "input_text, expected_minutes",
    [
        # Hours only
        ("1 hour", 60),
        ("2 hours", 120),
        ("3hour", 180),
        # Minutes only
        ("30 minutes", 30),
        ("45 mins", 45),
        ("15 min", 15),
        ("20m", 20),
        # Hours and minutes, in either order
        ("1 hour 30 minutes", 90),
        ("2 hours 15 mins", 135),
        ("1hour 45min", 105),
        ("30 minutes plus 1 hour", 90),
        # Case-insensitive
        ("1 HOUR 30 MINUTES", 90),
        ("2 Hours 15 Mins", 135),
        # Bare numbers are minutes
        ("45", 45),
        ("120", 120),
        ("about 25", 25),
        ("0", 0),
        ("0 minutes", 0),
    ],
)
def test_parse_minutes(input_text, expected_minutes):
    """Test hour/minute extraction and the bare-number fallback."""
    assert parse_minutes(input_text) == expected_minutes


@pytest.mark.parametrize(
    "value",
    [None, "", "abc", "no time here", "just text", 123, {}, ["30 minutes"]],
)
def test_parse_minutes_invalid(value):
    """Test that non-text or number-free input gives None."""
    assert parse_minutes(value) is None


@pytest.mark.skipif(
    not hasattr(sys, "get_int_max_str_digits"),
    reason="integer string conversion is unlimited on this interpreter",
)
def test_parse_minutes_unconvertible_number_degrades_to_none(caplog):
    with caplog.at_level(logging.DEBUG, logger="recipe_utils.durations.minutes"):
        assert parse_minutes("9" * 5000 + " minutes") is None
    assert "Could not parse duration" in caplog.text


@pytest.mark.parametrize(
    "minutes, expected_text",
    [
        (0, "0m"),
        (1, "1m"),
        (30, "30m"),
        (45, "45m"),
        (60, "1h"),
        (120, "2h"),
        (180, "3h"),
        (90, "1h 30m"),
        (135, "2h 15m"),
        (105, "1h 45m"),
        (1440, "24h"),
        (1441, "24h 1m"),
        (None, ""),
    ],
)
def test_format_minutes(minutes, expected_text):
    assert format_minutes(minutes) == expected_text


def test_parse_then_format():
    assert format_minutes(parse_minutes("1 hour 30 minutes")) == "1h 30m"
