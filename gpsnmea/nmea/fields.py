"""NMEA field parsing utilities.

This module provides utilities for reading individual fields out of a token
list. NMEA fields are comma-separated and may be empty (consecutive commas
indicate missing data). Every failure is raised as ``SentenceError`` with
``ParseError.MISSING_FIELDS`` or ``ParseError.INVALID_DIRECTION`` so the
decoder can classify it, never as a bare ``IndexError`` or ``ValueError``.
"""

import math

from gpsnmea.nmea.errors import ParseError, SentenceError
from gpsnmea.nmea.types import Coordinate, SpeedUnit

# Conversion factors from knots.
KNOTS_TO_METERS_PER_SECOND = 0.514444444
KNOTS_TO_KILOMETERS_PER_HOUR = 1.85

LATITUDE_DIRECTIONS = ("N", "S")
LONGITUDE_DIRECTIONS = ("E", "W")


def token_at(tokens: list[str], index: int) -> str:
    """Return ``tokens[index]``, raising MISSING_FIELDS when out of range.

    Example:
        >>> token_at(["GNVTG", "054.7"], 1)
        '054.7'
    """
    if not 0 <= index < len(tokens):
        raise SentenceError(
            ParseError.MISSING_FIELDS,
            f"field {index} missing from {len(tokens)} tokens",
        )
    return tokens[index]


def read_fields(tokens: list[str], indices: dict[str, int]) -> dict[str, str]:
    """Map each field name in ``indices`` to its token.

    Example:
        >>> read_fields(["GNVTG", "054.7"], {"type": 0, "course": 1})
        {'type': 'GNVTG', 'course': '054.7'}
    """
    return {name: token_at(tokens, index) for name, index in indices.items()}


def require_token_count(tokens: list[str], minimum: int) -> None:
    """Reject a token list shorter than a sentence type's minimum."""
    if len(tokens) < minimum:
        raise SentenceError(
            ParseError.MISSING_FIELDS,
            f"expected at least {minimum} tokens, got {len(tokens)}",
        )


def _parse_number(value: str) -> float:
    # float() also takes "nan", "inf" and "1_000"; none of them is an NMEA number
    try:
        if "_" in value:
            raise ValueError(value)
        number = float(value)
    except ValueError as e:
        raise SentenceError(
            ParseError.MISSING_FIELDS, f"not a number: {value!r}"
        ) from e
    if not math.isfinite(number):
        raise SentenceError(ParseError.MISSING_FIELDS, f"not finite: {value!r}")
    return number


def parse_direction(value: str, allowed: tuple[str, str]) -> str:
    """Return the first character of ``value`` if it is an allowed letter.

    Example:
        >>> parse_direction("N", LATITUDE_DIRECTIONS)
        'N'
        >>> parse_direction("X", LATITUDE_DIRECTIONS)
        Traceback (most recent call last):
        SentenceError: invalid_direction: ...
    """
    if not value or value[0] not in allowed:
        raise SentenceError(
            ParseError.INVALID_DIRECTION, f"{value!r} not in {allowed}"
        )
    return value[0]


def parse_latitude(value: str) -> float:
    """Convert a latitude token to degrees by dividing it by 100.

    DDMM.MMMM is flattened to DD.MMMMMM; the minutes are not rescaled.
    Use ``to_decimal_degrees`` for true decimal degrees.

    Example:
        >>> parse_latitude("4024.98796")
        40.2498796
    """
    return _parse_number(value) / 100.0


def parse_longitude(value: str, direction: str) -> float:
    """Convert a longitude token to signed degrees (West is negative).

    Example:
        >>> parse_longitude("00340.22512", "W")
        -3.4022512
    """
    sign = -1.0 if direction == "W" else 1.0
    return _parse_number(value) / 100.0 * sign


def parse_coordinates(
    tokens: list[str],
    latitude_index: int,
    longitude_index: int,
) -> tuple[Coordinate, Coordinate]:
    """Read a latitude/longitude pair, each followed by its direction token.

    Checks run in this order: latitude value, latitude direction, longitude
    direction, longitude value. The longitude direction is needed first
    because it decides the sign of the value.

    Args:
        tokens: Sentence tokens.
        latitude_index: Index of the latitude value; its direction follows.
        longitude_index: Index of the longitude value; its direction follows.

    Returns:
        ``(latitude, longitude)``

    Raises:
        SentenceError: MISSING_FIELDS for a non-numeric value,
            INVALID_DIRECTION for an empty or illegal direction letter.
    """
    latitude_value = parse_latitude(token_at(tokens, latitude_index))
    latitude_direction = parse_direction(
        token_at(tokens, latitude_index + 1), LATITUDE_DIRECTIONS
    )

    longitude_direction = parse_direction(
        token_at(tokens, longitude_index + 1), LONGITUDE_DIRECTIONS
    )
    longitude_value = parse_longitude(
        token_at(tokens, longitude_index), longitude_direction
    )

    return (
        Coordinate(value=latitude_value, direction=latitude_direction),
        Coordinate(value=longitude_value, direction=longitude_direction),
    )


def to_decimal_degrees(coordinate: Coordinate) -> float:
    """Convert a decoded coordinate to true decimal degrees.

    Decoded values are DDMM.MMMM divided by 100, so the integer part is
    whole degrees and the fraction times 100 is minutes:

        decimal_degrees = degrees + (minutes / 60)

    The sign of ``coordinate.value`` is kept, and a South latitude is made
    negative as well.

    Example:
        >>> to_decimal_degrees(Coordinate(value=48.07038, direction="N"))
        48.1173
        >>> to_decimal_degrees(Coordinate(value=-11.31, direction="W"))
        -11.5166667
    """
    magnitude = abs(coordinate.value)
    degrees = int(magnitude)
    minutes = (magnitude - degrees) * 100.0
    decimal_degrees = degrees + minutes / 60.0

    if coordinate.value < 0 or coordinate.direction in ("S", "W"):
        return -decimal_degrees

    return decimal_degrees


def _slice_pairs(value: str, what: str) -> tuple[str, str, str]:
    if len(value) < 6:
        raise SentenceError(
            ParseError.MISSING_FIELDS, f"{what} too short: {value!r}"
        )
    return value[0:2], value[2:4], value[4:6]


def parse_utc_time(utc_time: str) -> tuple[str, str, str]:
    """Split an HHMMSS(.ss) time into ``(hours, minutes, seconds)``.

    Fractional seconds are dropped.

    Example:
        >>> parse_utc_time("211041.00")
        ('21', '10', '41')
    """
    return _slice_pairs(utc_time, "UTC time")


def parse_utc_date(utc_date: str) -> tuple[str, str, str]:
    """Split a DDMMYY date into ``(day, month, year)``.

    Example:
        >>> parse_utc_date("010218")
        ('01', '02', '18')
    """
    return _slice_pairs(utc_date, "UTC date")


def parse_speed(speed: str, unit: SpeedUnit) -> float:
    """Convert a speed in knots to m/s or km/h.

    Example:
        >>> parse_speed("10.0", SpeedUnit.KILOMETERS_PER_HOUR)
        18.5
    """
    knots = _parse_number(speed)
    if unit is SpeedUnit.METERS_PER_SECOND:
        return knots * KNOTS_TO_METERS_PER_SECOND
    return knots * KNOTS_TO_KILOMETERS_PER_HOUR
