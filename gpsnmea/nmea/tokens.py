"""Sentence tokenization.

An NMEA sentence is split twice: once on ``*`` to separate the payload from
the transmitted checksum, and once on ``,`` to break the payload into fields.

    $GNRMC,211041.00,A,4024.98796,N,...,D*7B
     +-------------- payload -----------+ ++ checksum

Empty fields are significant (",," means "no data"), so splitting never drops
empty tokens.
"""


def split(text: str, separator: str) -> list[str]:
    """Split ``text`` on every occurrence of ``separator``.

    N occurrences produce N + 1 tokens, including leading and trailing empty
    tokens. Empty input produces ``[""]``, never an empty list.

    Example:
        >>> split("GNVTG,,T,", ",")
        ['GNVTG', '', 'T', '']
    """
    return text.split(separator)


def tokenize(sample: str) -> list[str]:
    """Return the comma-separated fields of a sentence's payload.

    The checksum suffix is discarded and a single leading ``$`` is removed,
    so token 0 is always the talker ID plus sentence type (e.g. ``"GNRMC"``).
    Malformed input yields a degenerate token list rather than an error;
    the decoder is responsible for rejecting it.

    Example:
        >>> tokenize("$GNVTG,054.7,T*3B")
        ['GNVTG', '054.7', 'T']
    """
    payload = split(sample, "*")[0]
    if payload.startswith("$"):
        payload = payload[1:]
    return split(payload, ",")
