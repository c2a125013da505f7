"""VTG sentence decoder.

VTG (Track Made Good and Ground Speed) provides velocity information from GNSS.

VTG Sentence Format:
    $GNVTG,054.7,T,034.4,M,005.5,N,010.2,K,A*3B
           |     | |     | |     | |     | |
           |     | |     | |     | |     | +-- Mode indicator (A/D/E/N)
           |     | |     | |     | +-----+-- Speed in km/h
           |     | |     | +-----+-- Speed in knots
           |     | +-----+-- Track (magnetic north, degrees)
           +-----+-- Track (true north, degrees)

Mode Indicators (FAA mode, NMEA 2.3+):
    A = Autonomous (standard GPS positioning)
    D = Differential (DGPS or RTK)
    E = Estimated (dead reckoning)
    N = Not valid (no fix)

The mode indicator is required: sentences from pre-2.3 receivers, which stop
after the 'K' unit, are rejected with MISSING_FIELDS.
"""

from gpsnmea.nmea.fields import read_fields, require_token_count
from gpsnmea.nmea.types import VTGData

MINIMUM_TOKEN_COUNT = 10

FIELD_INDICES = {
    "type": 0,
    "course": 1,
    "course_magnetic": 3,
    "speed_kn": 5,
    "speed_kh": 7,
    "mode": 9,
}


def decode_vtg(tokens: list[str]) -> VTGData:
    """Build a VTGData from the tokens of a checksum-validated sentence.

    Unit letters (T, M, N, K) at the even indices are skipped.
    """
    require_token_count(tokens, MINIMUM_TOKEN_COUNT)
    return VTGData(**read_fields(tokens, FIELD_INDICES))
