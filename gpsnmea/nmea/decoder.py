"""Sentence dispatch: one entry point for every supported sentence type.

``parse`` performs:
    1. Checksum validation (INVALID_FORMAT on failure)
    2. Tokenization (UNKNOWN_ERROR on an empty token list)
    3. Type lookup by substring match on token 0 (UNSUPPORTED_TYPE)
    4. Per-type decoding (MISSING_FIELDS, INVALID_DIRECTION)

The type match is a substring search rather than a talker ID check, so
``GPRMC``, ``GNRMC`` and ``GLRMC`` all decode as RMC. Types are tried in the
order of ``_DECODERS``; the first match wins.
"""

from collections.abc import Callable

from gpsnmea.nmea.checksum import is_valid_sample
from gpsnmea.nmea.errors import ParseError, SentenceError
from gpsnmea.nmea.gga import decode_gga
from gpsnmea.nmea.gll import decode_gll
from gpsnmea.nmea.gsa import decode_gsa
from gpsnmea.nmea.gsv import decode_gsv
from gpsnmea.nmea.rmc import decode_rmc
from gpsnmea.nmea.tokens import tokenize
from gpsnmea.nmea.types import Sample
from gpsnmea.nmea.vtg import decode_vtg
from gpsnmea.nmea.zda import decode_zda

_DECODERS: tuple[tuple[str, Callable[[list[str]], Sample]], ...] = (
    ("GGA", decode_gga),
    ("GLL", decode_gll),
    ("GSA", decode_gsa),
    ("GSV", decode_gsv),
    ("RMC", decode_rmc),
    ("VTG", decode_vtg),
    ("ZDA", decode_zda),
)

SUPPORTED_TYPES = tuple(sentence_type for sentence_type, _ in _DECODERS)


def _find_decoder(type_token: str) -> Callable[[list[str]], Sample] | None:
    for sentence_type, decoder in _DECODERS:
        if sentence_type in type_token:
            return decoder
    return None


def parse(sample: str) -> Sample | ParseError:
    """Decode one NMEA sentence into a typed record.

    Args:
        sample: One sentence without its line terminator, optionally
            starting with '$' and ending with '*' plus the checksum.

    Returns:
        One of GGAData, GLLData, GSAData, GSVData, RMCData, VTGData or
        ZDAData on success, otherwise the ``ParseError`` member classifying
        the failure. No exception escapes for any string input.

    Example:
        >>> parse("$GNRMC,211041.00,A,4024.98796,N,00340.22512,W,0.027,,010218,,,D*7B")
        RMCData(type='GNRMC', utc_time='211041.00', status='A', ...)
        >>> parse("$GNRMC,211041.00,A,4024.98796,N,00340.22512,W,0.027,,010218,,,E*7B")
        <ParseError.INVALID_FORMAT: 'invalid_format'>
    """
    if not is_valid_sample(sample):
        return ParseError.INVALID_FORMAT

    tokens = tokenize(sample)
    if not tokens:
        return ParseError.UNKNOWN_ERROR

    decoder = _find_decoder(tokens[0])
    if decoder is None:
        return ParseError.UNSUPPORTED_TYPE

    try:
        return decoder(tokens)
    except SentenceError as e:
        return e.kind
