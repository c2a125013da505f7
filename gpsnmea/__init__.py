"""gpsnmea package for decoding NMEA 0183 GPS sentences."""

from gpsnmea.gnss import NMEAReader, decode_lines, read_lines
from gpsnmea.nmea import (
    Coordinate,
    GGAData,
    GLLData,
    GSAData,
    GSVData,
    ParseError,
    RMCData,
    Sample,
    Satellite,
    SpeedUnit,
    VTGData,
    ZDAData,
    is_valid_sample,
    parse,
    parse_speed,
    parse_utc_date,
    parse_utc_time,
    tokenize,
)
from gpsnmea.output import format_sample, sample_to_dict, sample_to_json, save_to_json

__all__ = [
    "Coordinate",
    "GGAData",
    "GLLData",
    "GSAData",
    "GSVData",
    "NMEAReader",
    "ParseError",
    "RMCData",
    "Sample",
    "Satellite",
    "SpeedUnit",
    "VTGData",
    "ZDAData",
    "decode_lines",
    "format_sample",
    "is_valid_sample",
    "parse",
    "parse_speed",
    "parse_utc_date",
    "parse_utc_time",
    "read_lines",
    "sample_to_dict",
    "sample_to_json",
    "save_to_json",
    "tokenize",
]
