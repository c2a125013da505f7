"""GSV sentence decoder.

GSV (GNSS Satellites in View) reports up to four satellites per sentence.
A receiver tracking more satellites emits a numbered series of GSV
sentences.

GSV Sentence Format:
    $GPGSV,3,1,11,03,03,111,00,04,15,270,00,06,01,010,00,13,06,292,00*74
           | | |  |            |            |            |
           | | |  |            |            |            +-- Satellite block 4
           | | |  |            |            +-- Satellite block 3
           | | |  |            +-- Satellite block 2
           | | |  +-- Satellite block 1: ID, elevation, azimuth, SNR
           | | +-- Satellites in view (all sentences of the series)
           | +-- Sequence number of this sentence
           +-- Number of sentences in the series

Satellite blocks start at token 4 and are four tokens wide. The last
sentence of a series carries fewer than four blocks, and NMEA 4.10
receivers append a single signal ID token; only complete blocks are read.
``number_of_messages`` counts sentences, not satellites, so it does not
bound the block loop, but it must be an integer for the sentence to be
accepted.
"""

from gpsnmea.nmea.errors import ParseError, SentenceError
from gpsnmea.nmea.fields import read_fields, require_token_count, token_at
from gpsnmea.nmea.types import GSVData, Satellite

MINIMUM_TOKEN_COUNT = 4

FIRST_SATELLITE_INDEX = 4
SATELLITE_BLOCK_SIZE = 4

FIELD_INDICES = {
    "type": 0,
    "number_of_messages": 1,
    "sequence_number": 2,
    "satellites_in_view": 3,
}


def _require_message_count(value: str) -> None:
    try:
        int(value)
    except ValueError as e:
        raise SentenceError(
            ParseError.MISSING_FIELDS, f"number of messages {value!r}"
        ) from e


def _decode_satellites(tokens: list[str]) -> list[Satellite]:
    """Read every complete four-token satellite block.

    Example:
        tokens[4:12] = ["03", "03", "111", "00", "04", "15", "270", "00"]
        -> [Satellite("03", "03", "111", "00"), Satellite("04", "15", "270", "00")]
    """
    satellites = []
    start = FIRST_SATELLITE_INDEX
    while start + SATELLITE_BLOCK_SIZE <= len(tokens):
        satellites.append(
            Satellite(
                id=token_at(tokens, start),
                elevation=token_at(tokens, start + 1),
                azimuth=token_at(tokens, start + 2),
                snr=token_at(tokens, start + 3),
            )
        )
        start += SATELLITE_BLOCK_SIZE
    return satellites


def decode_gsv(tokens: list[str]) -> GSVData:
    """Build a GSVData from the tokens of a checksum-validated sentence.

    Raises:
        SentenceError: MISSING_FIELDS if there are fewer than 4 tokens or
            the number of messages is not an integer.
    """
    require_token_count(tokens, MINIMUM_TOKEN_COUNT)
    fields = read_fields(tokens, FIELD_INDICES)
    _require_message_count(fields["number_of_messages"])
    return GSVData(satellites=_decode_satellites(tokens), **fields)
