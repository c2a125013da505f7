"""GSA sentence decoder.

GSA (GNSS DOP and Active Satellites) lists the satellites used in the fix
and the resulting dilution of precision values.

GSA Sentence Format:
    $GNGSA,A,3,80,71,73,79,69,,,,,,,,1.83,1.09,1.47*17
           | | |                       |    |    |
           | | |                       |    |    +-- VDOP
           | | |                       |    +-- HDOP
           | | |                       +-- PDOP
           | | +-- 12 satellite ID slots (empty when unused)
           | +-- Fix type (1=no fix, 2=2D, 3=3D)
           +-- Selection mode (M=manual, A=automatic)
"""

from gpsnmea.nmea.fields import read_fields, require_token_count
from gpsnmea.nmea.types import GSAData

MINIMUM_TOKEN_COUNT = 18

SATELLITE_SLOTS = 12
FIRST_SATELLITE_INDEX = 3

FIELD_INDICES = {
    "type": 0,
    "mode": 1,
    "fix_type": 2,
    "pdop": 15,
    "hdop": 16,
    "vdop": 17,
}


def decode_gsa(tokens: list[str]) -> GSAData:
    """Build a GSAData from the tokens of a checksum-validated sentence.

    All 12 slots are returned, empty ones included, so a slot's position in
    ``satellites`` matches its position in the sentence.
    """
    require_token_count(tokens, MINIMUM_TOKEN_COUNT)
    end = FIRST_SATELLITE_INDEX + SATELLITE_SLOTS
    return GSAData(
        satellites=tokens[FIRST_SATELLITE_INDEX:end],
        **read_fields(tokens, FIELD_INDICES),
    )
