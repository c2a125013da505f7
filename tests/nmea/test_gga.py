"""Tests for GGA sentence decoding."""

import pytest

from gpsnmea.nmea import GGAData, ParseError, parse
from gpsnmea.nmea.gga import FIELD_INDICES, MINIMUM_TOKEN_COUNT, decode_gga

GGA_VALID = "$GNGGA,123519.00,4807.038,N,01131.000,E,1,08,0.9,545.4,M,47.0,M,,*7F"


class TestParseGGA:
    """Tests for GGA sentences passed through parse."""

    def test_valid_gga_with_fix(self):
        result = parse(GGA_VALID)
        assert isinstance(result, GGAData)
        assert result.type == "GNGGA"
        assert result.utc_time == "123519.00"
        assert result.latitude.value == pytest.approx(48.07038)
        assert result.latitude.direction == "N"
        assert result.longitude.value == pytest.approx(11.31)
        assert result.longitude.direction == "E"
        assert result.quality == "1"
        assert result.satellites_used == "08"
        assert result.hdop == "0.9"
        assert result.altitude == "545.4"
        assert result.geoidal_separation == "47.0"
        assert result.dgps == ""

    def test_gga_with_dgps_station(self):
        sentence = (
            "$GNGGA,123519.00,4807.038,N,01131.000,E,1,08,0.9,545.4,M,47.0,M,,0000*7F"
        )
        result = parse(sentence)
        assert isinstance(result, GGAData)
        assert result.dgps == "0000"

    def test_gga_southern_western_hemisphere(self):
        sentence = "$GPGGA,123519.00,3356.123,S,15112.456,W,2,10,0.8,100.0,M,20.0,M,,*65"
        result = parse(sentence)
        assert isinstance(result, GGAData)
        assert result.latitude.value == pytest.approx(33.56123)
        assert result.latitude.direction == "S"
        assert result.longitude.value == pytest.approx(-151.12456)
        assert result.quality == "2"

    def test_gga_rtk_fixed_with_negative_separation(self):
        sentence = (
            "$GNGGA,081836.00,3723.46587,N,12202.26957,W,4,12,0.7,10.5,M,-30.0,M,1.0,0000*51"
        )
        result = parse(sentence)
        assert isinstance(result, GGAData)
        assert result.quality == "4"
        assert result.geoidal_separation == "-30.0"
        assert result.dgps == "0000"

    def test_gga_no_fix_has_no_position(self):
        sentence = "$GNGGA,123519.00,,,,,0,00,,,,,,,*5B"
        assert parse(sentence) is ParseError.MISSING_FIELDS

    def test_gga_one_token_short(self):
        sentence = "$GNGGA,123519.00,4807.038,N,01131.000,E,1,08,0.9,545.4,M,47.0,M,*53"
        assert parse(sentence) is ParseError.MISSING_FIELDS

    def test_gga_invalid_longitude_direction(self):
        sentence = "$GNGGA,123519.00,4807.038,N,01131.000,X,1,08,0.9,545.4,M,47.0,M,,*62"
        assert parse(sentence) is ParseError.INVALID_DIRECTION


class TestDecodeGGA:
    """Tests for decode_gga on token lists."""

    TOKENS = [
        "GNGGA", "t", "4807.038", "N", "01131.000", "E",
        "q", "s", "h", "a", "M", "g", "M", "", "d",
    ]

    def test_minimum_token_count(self):
        assert MINIMUM_TOKEN_COUNT == 15

    @pytest.mark.parametrize("name", sorted(FIELD_INDICES))
    def test_field_read_from_its_index(self, name):
        result = decode_gga(self.TOKENS)
        assert getattr(result, name) == self.TOKENS[FIELD_INDICES[name]]

    def test_field_values(self):
        result = decode_gga(self.TOKENS)
        assert (result.utc_time, result.quality, result.dgps) == ("t", "q", "d")
