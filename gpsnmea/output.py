"""JSON serialization and text formatting of decoded samples."""

import dataclasses
import json
import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

from gpsnmea.nmea.types import (
    GGAData,
    GLLData,
    GSAData,
    GSVData,
    RMCData,
    Sample,
    VTGData,
    ZDAData,
)

__all__ = ["format_sample", "sample_to_dict", "sample_to_json", "save_to_json"]

logger = logging.getLogger(__name__)


def sample_to_dict(sample: Sample) -> dict[str, Any]:
    """Convert a sample to ``{"type": ..., "data": {...}}``.

    Keys of ``data`` are the record's attribute names; coordinates and
    satellites become nested dicts.
    """
    return {"type": sample.type, "data": dataclasses.asdict(sample)}


def sample_to_json(sample: Sample, indent: int | None = None) -> str:
    """Serialize a sample into a strict JSON string.

    Raises:
        ValueError: If a coordinate is NaN or infinite, which JSON cannot
            represent. ``parse`` never produces such a value.
    """
    return json.dumps(sample_to_dict(sample), indent=indent, allow_nan=False)


def save_to_json(sample: Sample, path: str | Path) -> bool:
    """Write a sample to ``path`` as indented JSON.

    Returns:
        True if the file was written, False if it could not be opened or
        written (the error is logged).
    """
    try:
        text = sample_to_json(sample, indent=2) + "\n"
        Path(path).write_text(text, encoding="utf-8")
    except OSError as e:
        logger.error("Error saving JSON to %s: %s", path, e)
        return False
    return True


def _join(*values: object) -> str:
    return ", ".join(str(value) for value in values)


def _format_gga(data: GGAData) -> list[str]:
    return [
        "GGA: "
        + _join(
            data.utc_time,
            data.latitude.value,
            data.latitude.direction,
            data.longitude.value,
            data.longitude.direction,
            data.quality,
            data.satellites_used,
            data.hdop,
            data.altitude,
            data.geoidal_separation,
        )
    ]


def _format_gll(data: GLLData) -> list[str]:
    return [
        "GLL: "
        + _join(
            data.latitude.value,
            data.latitude.direction,
            data.longitude.value,
            data.longitude.direction,
            data.utc_time,
            data.status,
        )
    ]


def _format_gsa(data: GSAData) -> list[str]:
    lines = [
        "GSA: "
        + _join(
            data.mode,
            data.fix_type,
            len(data.satellites),
            data.pdop,
            data.hdop,
            data.vdop,
        )
    ]
    lines.extend(f"Satellite: {satellite}" for satellite in data.satellites)
    return lines


def _format_gsv(data: GSVData) -> list[str]:
    lines = [
        "GSV: "
        + _join(
            data.number_of_messages,
            data.sequence_number,
            data.satellites_in_view,
            len(data.satellites),
        )
    ]
    lines.extend(
        f"Satellite ID: {s.id}, Elevation: {s.elevation}, "
        f"Azimuth: {s.azimuth}, SNR: {s.snr}"
        for s in data.satellites
    )
    return lines


def _format_rmc(data: RMCData) -> list[str]:
    return [
        "RMC: "
        + _join(
            data.utc_time,
            data.status,
            data.latitude.value,
            data.latitude.direction,
            data.longitude.value,
            data.longitude.direction,
            data.speed,
            data.course,
            data.utc_date,
            data.mode,
        )
    ]


def _format_vtg(data: VTGData) -> list[str]:
    return ["VTG: " + _join(data.course, data.speed_kn, data.speed_kh, data.mode)]


def _format_zda(data: ZDAData) -> list[str]:
    return [
        "ZDA: "
        + _join(
            data.utc_time,
            data.utc_day,
            data.utc_month,
            data.utc_year,
            data.local_zone_hours,
            data.local_zone_minutes,
        )
    ]


_FORMATTERS: dict[type, Callable[[Any], list[str]]] = {
    GGAData: _format_gga,
    GLLData: _format_gll,
    GSAData: _format_gsa,
    GSVData: _format_gsv,
    RMCData: _format_rmc,
    VTGData: _format_vtg,
    ZDAData: _format_zda,
}


def format_sample(sample: Sample) -> str:
    """Render a sample for human inspection.

    The first line starts with the sentence type (``"RMC: ..."``); GSA and
    GSV add one line per satellite.

    Example:
        >>> print(format_sample(parse("$GPZDA,201530.00,04,07,2002,00,00*60")))
        ZDA: 201530.00, 04, 07, 2002, 00, 00
    """
    formatter = _FORMATTERS.get(type(sample))
    if formatter is None:
        raise TypeError(f"not a decoded sample: {sample!r}")
    return "\n".join(formatter(sample))
