"""Error classification for rejected NMEA sentences.

Every sentence that cannot be decoded is rejected with exactly one
``ParseError`` member. The taxonomy is closed and flat:

    INVALID_FORMAT     checksum missing, malformed, or mismatched
    MISSING_FIELDS     too few tokens, or a required number does not parse
    INVALID_DIRECTION  latitude/longitude direction empty or not a legal letter
    UNSUPPORTED_TYPE   token 0 names none of GGA, GLL, GSA, GSV, RMC, VTG, ZDA
    UNKNOWN_ERROR      empty token list after a passing checksum

``parse`` returns these members as values. Internally, field decoders raise
``SentenceError`` so that a failure deep inside a decoder unwinds straight to
``parse``, which turns it back into the returned member.
"""

from enum import Enum


class ParseError(Enum):
    """Reason a sentence was rejected."""

    INVALID_FORMAT = "invalid_format"
    MISSING_FIELDS = "missing_fields"
    INVALID_DIRECTION = "invalid_direction"
    UNSUPPORTED_TYPE = "unsupported_type"
    UNKNOWN_ERROR = "unknown_error"


class SentenceError(Exception):
    """Raised by field decoders when a sentence cannot be decoded.

    Attributes:
        kind: The ``ParseError`` classifying the failure.
    """

    def __init__(self, kind: ParseError, detail: str = "") -> None:
        super().__init__(f"{kind.value}: {detail}" if detail else kind.value)
        self.kind = kind
