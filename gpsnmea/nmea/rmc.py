"""RMC sentence decoder.

RMC (Recommended Minimum Specific GNSS Data) packs time, date, position,
speed and course into one sentence and is the most commonly logged NMEA
sentence.

RMC Sentence Format:
    $GNRMC,211041.00,A,4024.98796,N,00340.22512,W,0.027,,010218,,,D*7B
           |         | |          | |           | |     | |     | | |
           |         | |          | |           | |     | |     | | +-- Mode (A/D/E/N), token 12
           |         | |          | |           | |     | |     +-+-- Magnetic variation + E/W
           |         | |          | |           | |     | +-- UTC date (DDMMYY)
           |         | |          | |           | |     +-- Course over ground (degrees)
           |         | |          | |           | +-- Speed over ground (knots)
           |         | |          | +-----------+-- Longitude + E/W
           |         | +----------+-- Latitude + N/S
           |         +-- Status (A=active, V=void)
           +-- UTC time (HHMMSS.ss)

The mode indicator is the last field. Sentences that stop at the 12-token
minimum are read with token 11 as the mode.
"""

from gpsnmea.nmea.fields import (
    parse_coordinates,
    read_fields,
    require_token_count,
    token_at,
)
from gpsnmea.nmea.types import RMCData

MINIMUM_TOKEN_COUNT = 12

LATITUDE_INDEX = 3
LONGITUDE_INDEX = 5

MODE_INDEX = 12
SHORT_MODE_INDEX = 11

FIELD_INDICES = {
    "type": 0,
    "utc_time": 1,
    "status": 2,
    "speed": 7,
    "course": 8,
    "utc_date": 9,
}


def _mode_index(tokens: list[str]) -> int:
    return MODE_INDEX if len(tokens) > MODE_INDEX else SHORT_MODE_INDEX


def decode_rmc(tokens: list[str]) -> RMCData:
    """Build an RMCData from the tokens of a checksum-validated sentence.

    Magnetic variation is not kept.
    """
    require_token_count(tokens, MINIMUM_TOKEN_COUNT)
    latitude, longitude = parse_coordinates(tokens, LATITUDE_INDEX, LONGITUDE_INDEX)
    return RMCData(
        latitude=latitude,
        longitude=longitude,
        mode=token_at(tokens, _mode_index(tokens)),
        **read_fields(tokens, FIELD_INDICES),
    )
