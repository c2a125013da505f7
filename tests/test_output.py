"""Tests for JSON serialization and text formatting of samples."""

import json
import logging

import pytest

from gpsnmea.nmea import Coordinate, parse
from gpsnmea.output import format_sample, sample_to_dict, sample_to_json, save_to_json

RMC = "$GNRMC,211041.00,A,4024.98796,N,00340.22512,W,0.027,,010218,,,D*7B"
GSV = "$GPGSV,3,3,11,22,42,067,42,24,14,311,43,27,05,244,00*4D"
GSA = "$GNGSA,A,3,80,71,73,79,69,,,,,,,,1.83,1.09,1.47*17"
ZDA = "$GPZDA,201530.00,04,07,2002,00,00*60"


class TestSampleToDict:
    def test_type_and_data(self):
        result = sample_to_dict(parse(ZDA))
        assert result["type"] == "GPZDA"
        assert result["data"]["utc_year"] == "2002"

    def test_coordinates_are_nested(self):
        data = sample_to_dict(parse(RMC))["data"]
        assert data["latitude"]["direction"] == "N"
        assert data["longitude"]["value"] == pytest.approx(-3.4022512)

    def test_satellites_are_nested(self):
        data = sample_to_dict(parse(GSV))["data"]
        assert data["satellites"][0] == {
            "id": "22",
            "elevation": "42",
            "azimuth": "067",
            "snr": "42",
        }


class TestSampleToJson:
    def test_is_valid_json(self):
        decoded = json.loads(sample_to_json(parse(RMC)))
        assert decoded["type"] == "GNRMC"
        assert decoded["data"]["mode"] == "D"

    def test_indent(self):
        assert "\n  " in sample_to_json(parse(ZDA), indent=2)

    def test_non_finite_value_is_rejected(self):
        sample = parse(RMC)
        sample.latitude = Coordinate(value=float("nan"), direction="N")
        with pytest.raises(ValueError):
            sample_to_json(sample)


class TestSaveToJson:
    def test_writes_file(self, tmp_path):
        path = tmp_path / "000000_GNRMC.json"
        assert save_to_json(parse(RMC), path) is True
        decoded = json.loads(path.read_text(encoding="utf-8"))
        assert decoded["data"]["utc_date"] == "010218"

    def test_unwritable_path_returns_false(self, tmp_path, caplog):
        path = tmp_path / "missing" / "out.json"
        with caplog.at_level(logging.ERROR, logger="gpsnmea.output"):
            assert save_to_json(parse(RMC), path) is False
        assert "Error saving JSON" in caplog.text


class TestFormatSample:
    def test_first_word_names_type(self):
        assert format_sample(parse(RMC)).startswith("RMC: 211041.00, A, ")

    def test_zda_single_line(self):
        assert format_sample(parse(ZDA)) == "ZDA: 201530.00, 04, 07, 2002, 00, 00"

    def test_gsv_adds_one_line_per_satellite(self):
        lines = format_sample(parse(GSV)).splitlines()
        assert lines[0] == "GSV: 3, 3, 11, 3"
        assert lines[1] == "Satellite ID: 22, Elevation: 42, Azimuth: 067, SNR: 42"
        assert len(lines) == 4

    def test_gsa_lists_every_slot(self):
        lines = format_sample(parse(GSA)).splitlines()
        assert lines[0] == "GSA: A, 3, 12, 1.83, 1.09, 1.47"
        assert lines[1] == "Satellite: 80"
        assert len(lines) == 13

    def test_not_a_sample_raises_type_error(self):
        with pytest.raises(TypeError):
            format_sample("GNRMC")  # type: ignore[arg-type]
