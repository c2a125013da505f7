"""GGA sentence decoder.

GGA (Global Positioning System Fix Data) is one of the most important NMEA
sentences, providing position fix information including coordinates, altitude,
fix quality, and satellite/accuracy metrics.

GGA Sentence Format:
    $GNGGA,123519.00,4807.038,N,01131.000,E,1,08,0.9,545.4,M,47.0,M,,*7F
           |         |        | |         | | |  |   |     | |    | | |
           |         |        | |         | | |  |   |     | |    | | +-- DGPS station ID
           |         |        | |         | | |  |   |     | |    | +-- DGPS age
           |         |        | |         | | |  |   |     | +----+-- Geoidal separation
           |         |        | |         | | |  |   +-----+-- Altitude above MSL
           |         |        | |         | | |  +-- HDOP (horizontal dilution)
           |         |        | |         | | +-- Number of satellites
           |         |        | |         | +-- Fix quality (0-6)
           |         |        | +---------+-- Longitude + E/W
           |         +--------+-- Latitude + N/S
           +-- UTC time (HHMMSS.ss)

Fix Quality Values:
    0 = Invalid (no fix)
    1 = GPS fix (SPS - Standard Positioning Service)
    2 = DGPS fix (Differential GPS)
    4 = RTK Fixed (Real-Time Kinematic, cm-level accuracy)
    5 = RTK Float (RTK converging, dm-level accuracy)
    6 = Dead reckoning mode
"""

from gpsnmea.nmea.fields import parse_coordinates, read_fields, require_token_count
from gpsnmea.nmea.types import GGAData

# Token 0 plus 14 fields; the DGPS station ID is the last one
MINIMUM_TOKEN_COUNT = 15

# Coordinate values; each direction letter sits at the next index
LATITUDE_INDEX = 2
LONGITUDE_INDEX = 4

FIELD_INDICES = {
    "type": 0,
    "utc_time": 1,
    "quality": 6,
    "satellites_used": 7,
    "hdop": 8,
    "altitude": 9,
    "geoidal_separation": 11,
    "dgps": 14,
}


def decode_gga(tokens: list[str]) -> GGAData:
    """Build a GGAData from the tokens of a checksum-validated sentence.

    Unit tokens (index 10 and 12) and the DGPS age (index 13) are skipped.

    Raises:
        SentenceError: MISSING_FIELDS if there are fewer than 15 tokens or a
            coordinate is not numeric, INVALID_DIRECTION for a bad N/S or
            E/W letter.
    """
    require_token_count(tokens, MINIMUM_TOKEN_COUNT)
    latitude, longitude = parse_coordinates(tokens, LATITUDE_INDEX, LONGITUDE_INDEX)
    return GGAData(
        latitude=latitude,
        longitude=longitude,
        **read_fields(tokens, FIELD_INDICES),
    )
