"""NMEA data types for decoded sentences.

This module defines dataclasses for structured NMEA sentence data.

Design Decisions:
    1. Raw string fields: apart from coordinates, every field keeps the exact
       token text. Receivers routinely leave DOP, course, or mode fields empty,
       and an empty string preserves "field absent" without inventing a
       number. Consumers convert what they need (see ``parse_speed``).

    2. Coordinates as value + direction: ``Coordinate.value`` carries the
       sign (West longitudes are negative), while ``direction``
       keeps the letter from the sentence for display and round-tripping.

    3. ``type`` is the raw token 0, talker ID included (``"GNRMC"``), so two
       constellations reporting the same sentence stay distinguishable.

    4. ``Sample`` is a closed union. Unknown sentence types never produce a
       value; they are rejected with ``ParseError.UNSUPPORTED_TYPE``.
"""

from dataclasses import dataclass
from enum import Enum


class SpeedUnit(Enum):
    """Target unit for ``parse_speed``."""

    METERS_PER_SECOND = "m/s"
    KILOMETERS_PER_HOUR = "km/h"


@dataclass
class Coordinate:
    """A latitude or longitude taken from a sentence.

    Attributes:
        value: Token value divided by 100 (DDMM.MMMM becomes DD.MMMMMM).
            Longitude is negative when ``direction`` is ``"W"``.
        direction: Hemisphere letter, ``"N"``/``"S"`` for latitude,
            ``"E"``/``"W"`` for longitude.

    Example:
        "00340.22512" with "W" decodes to
        Coordinate(value=-3.4022512, direction="W")
    """

    value: float
    direction: str


@dataclass
class Satellite:
    """One satellite block of a GSV sentence.

    Attributes:
        id: Satellite PRN number.
        elevation: Elevation in degrees (0-90).
        azimuth: Azimuth in degrees from true north (0-359).
        snr: Signal-to-noise ratio in dB-Hz, empty when not tracking.
    """

    id: str
    elevation: str
    azimuth: str
    snr: str


@dataclass
class GGAData:
    """Decoded GGA (Global Positioning System Fix Data) sentence.

    Attributes:
        type: Token 0, e.g. ``"GNGGA"``.
        utc_time: UTC time in HHMMSS.ss format.
        latitude: Latitude with N/S direction.
        longitude: Longitude with E/W direction.
        quality: Fix quality indicator (0=invalid, 1=GPS, 2=DGPS,
            4=RTK fixed, 5=RTK float, 6=dead reckoning).
        satellites_used: Number of satellites in the solution.
        hdop: Horizontal dilution of precision.
        altitude: Altitude above mean sea level in meters.
        geoidal_separation: Geoid height above the WGS84 ellipsoid in meters.
        dgps: Differential reference station ID.
    """

    type: str
    utc_time: str
    latitude: Coordinate
    longitude: Coordinate
    quality: str
    satellites_used: str
    hdop: str
    altitude: str
    geoidal_separation: str
    dgps: str


@dataclass
class GLLData:
    """Decoded GLL (Geographic Position, Latitude/Longitude) sentence."""

    type: str
    latitude: Coordinate
    longitude: Coordinate
    utc_time: str
    status: str


@dataclass
class GSAData:
    """Decoded GSA (GNSS DOP and Active Satellites) sentence.

    Attributes:
        type: Token 0, e.g. ``"GNGSA"``.
        mode: Selection mode, ``"M"`` manual or ``"A"`` automatic.
        fix_type: 1 = no fix, 2 = 2D fix, 3 = 3D fix.
        satellites: The 12 satellite slots in order; unused slots are empty
            strings.
        pdop: Position dilution of precision.
        hdop: Horizontal dilution of precision.
        vdop: Vertical dilution of precision.
    """

    type: str
    mode: str
    fix_type: str
    satellites: list[str]
    pdop: str
    hdop: str
    vdop: str


@dataclass
class GSVData:
    """Decoded GSV (GNSS Satellites in View) sentence.

    A receiver spreads its satellites over several GSV sentences, four per
    sentence. ``satellites`` only holds the blocks carried by this sentence.
    """

    type: str
    number_of_messages: str
    sequence_number: str
    satellites_in_view: str
    satellites: list[Satellite]


@dataclass
class RMCData:
    """Decoded RMC (Recommended Minimum Specific GNSS Data) sentence.

    Attributes:
        type: Token 0, e.g. ``"GNRMC"``.
        utc_time: UTC time in HHMMSS.ss format.
        status: ``"A"`` active or ``"V"`` void.
        latitude: Latitude with N/S direction.
        longitude: Longitude with E/W direction.
        speed: Speed over ground in knots.
        course: Course over ground in degrees true.
        utc_date: UTC date in DDMMYY format.
        mode: FAA mode indicator (A=autonomous, D=differential,
            E=estimated, N=not valid).

    Example:
        >>> rmc = parse("$GNRMC,211041.00,A,4024.98796,N,00340.22512,W,0.027,,010218,,,D*7B")
        >>> rmc.longitude
        Coordinate(value=-3.4022512, direction='W')
    """

    type: str
    utc_time: str
    status: str
    latitude: Coordinate
    longitude: Coordinate
    speed: str
    course: str
    utc_date: str
    mode: str


@dataclass
class VTGData:
    """Decoded VTG (Track Made Good and Ground Speed) sentence.

    Attributes:
        type: Token 0, e.g. ``"GNVTG"``.
        course: Track relative to true north in degrees.
        course_magnetic: Track relative to magnetic north in degrees.
        speed_kn: Ground speed in knots.
        speed_kh: Ground speed in km/h.
        mode: FAA mode indicator.
    """

    type: str
    course: str
    course_magnetic: str
    speed_kn: str
    speed_kh: str
    mode: str


@dataclass
class ZDAData:
    """Decoded ZDA (Time and Date) sentence."""

    type: str
    utc_time: str
    utc_day: str
    utc_month: str
    utc_year: str
    local_zone_hours: str
    local_zone_minutes: str


Sample = GGAData | GLLData | GSAData | GSVData | RMCData | VTGData | ZDAData
