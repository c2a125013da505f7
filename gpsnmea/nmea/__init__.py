"""NMEA 0183 decoder for GGA, GLL, GSA, GSV, RMC, VTG and ZDA sentences."""

from gpsnmea.nmea.checksum import calculate_checksum, is_valid_sample
from gpsnmea.nmea.decoder import SUPPORTED_TYPES, parse
from gpsnmea.nmea.errors import ParseError, SentenceError
from gpsnmea.nmea.fields import (
    parse_latitude,
    parse_longitude,
    parse_speed,
    parse_utc_date,
    parse_utc_time,
    to_decimal_degrees,
)
from gpsnmea.nmea.tokens import split, tokenize
from gpsnmea.nmea.types import (
    Coordinate,
    GGAData,
    GLLData,
    GSAData,
    GSVData,
    RMCData,
    Sample,
    Satellite,
    SpeedUnit,
    VTGData,
    ZDAData,
)

__all__ = [
    "SUPPORTED_TYPES",
    "Coordinate",
    "GGAData",
    "GLLData",
    "GSAData",
    "GSVData",
    "ParseError",
    "RMCData",
    "Sample",
    "Satellite",
    "SentenceError",
    "SpeedUnit",
    "VTGData",
    "ZDAData",
    "calculate_checksum",
    "is_valid_sample",
    "parse",
    "parse_latitude",
    "parse_longitude",
    "parse_speed",
    "parse_utc_date",
    "parse_utc_time",
    "split",
    "to_decimal_degrees",
    "tokenize",
]
