"""NMEA checksum validation.

NMEA 0183 sentences use a simple XOR checksum for data integrity verification.
The checksum is calculated over all bytes between the optional leading '$' and
the '*' (exclusive), then represented as a two-digit uppercase hexadecimal
number after the '*'.

Example sentence structure:
    $GNRMC,211041.00,A,4024.98796,N,00340.22512,W,0.027,,010218,,,D*7B
    ^                    checksum content                          ^^
    start (optional)                                  checksum (0x7B = 123)

The comparison is textual: "7b" or " 7B" do not match "7B". Callers are
expected to strip line terminators before validating.
"""

from gpsnmea.nmea.tokens import split


def _extract_checksum_parts(sentence: str) -> tuple[str, str] | None:
    """Extract the checksummed body and the transmitted checksum.

    Args:
        sentence: Raw NMEA sentence string (e.g., "$GNRMC,...*7B")

    Returns:
        A tuple of (body, checksum_text) with any leading '$' removed from
        the body, or None if:
        - There is no '*' delimiter
        - Nothing follows the '*'

    Example:
        >>> _extract_checksum_parts("$GNVTG,054.7*3B")
        ('GNVTG,054.7', '3B')
    """
    parts = split(sentence, "*")
    if len(parts) < 2 or not parts[1]:
        return None

    body = parts[0]
    if body.startswith("$"):
        body = body[1:]

    return body, parts[1]


def calculate_checksum(body: str) -> str:
    """Calculate the checksum of a sentence body as two uppercase hex digits.

    Every byte of the UTF-8 encoded body is XORed into an accumulator seeded
    at zero.

    Example:
        >>> calculate_checksum("GNVTG,,T,,M,0.0,N,0.0,K,A")
        '3D'
    """
    result = 0
    for byte in body.encode("utf-8", errors="surrogatepass"):
        result ^= byte
    return f"{result:02X}"


def is_valid_sample(sentence: str) -> bool:
    """Validate the checksum of an NMEA sentence.

    Args:
        sentence: Complete NMEA sentence, optionally starting with '$' and
            ending with '*' plus the two-digit checksum.

    Returns:
        True if the recomputed checksum equals the transmitted text exactly,
        False if the '*' or checksum is missing or the values differ.

    Example:
        >>> is_valid_sample("$GNVTG,054.7,T,034.4,M,005.5,N,010.2,K,A*3B")
        True
        >>> is_valid_sample("$GNVTG,054.7,T,034.4,M,005.5,N,010.2,K,A*FF")
        False
    """
    parts = _extract_checksum_parts(sentence)
    if parts is None:
        return False

    body, provided = parts
    return calculate_checksum(body) == provided
