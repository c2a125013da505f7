"""ZDA sentence decoder.

ZDA (Time and Date) reports UTC time, the full date with a four-digit year,
and the local time zone offset.

ZDA Sentence Format:
    $GPZDA,201530.00,04,07,2002,00,00*60
           |         |  |  |    |  |
           |         |  |  |    |  +-- Local zone minutes
           |         |  |  |    +-- Local zone hours
           |         |  |  +-- Year
           |         |  +-- Month
           |         +-- Day
           +-- UTC time (HHMMSS.ss)
"""

from gpsnmea.nmea.fields import read_fields, require_token_count
from gpsnmea.nmea.types import ZDAData

MINIMUM_TOKEN_COUNT = 7

FIELD_INDICES = {
    "type": 0,
    "utc_time": 1,
    "utc_day": 2,
    "utc_month": 3,
    "utc_year": 4,
    "local_zone_hours": 5,
    "local_zone_minutes": 6,
}


def decode_zda(tokens: list[str]) -> ZDAData:
    """Build a ZDAData from the tokens of a checksum-validated sentence."""
    require_token_count(tokens, MINIMUM_TOKEN_COUNT)
    return ZDAData(**read_fields(tokens, FIELD_INDICES))
