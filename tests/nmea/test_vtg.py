"""Tests for VTG sentence decoding."""

import pytest

from gpsnmea.nmea import ParseError, VTGData, parse
from gpsnmea.nmea.vtg import FIELD_INDICES, MINIMUM_TOKEN_COUNT, decode_vtg


class TestParseVTG:
    """Tests for VTG sentences passed through parse."""

    def test_valid_vtg_autonomous(self):
        sentence = "$GNVTG,054.7,T,034.4,M,005.5,N,010.2,K,A*3B"
        result = parse(sentence)
        assert isinstance(result, VTGData)
        assert result.type == "GNVTG"
        assert result.course == "054.7"
        assert result.course_magnetic == "034.4"
        assert result.speed_kn == "005.5"
        assert result.speed_kh == "010.2"
        assert result.mode == "A"

    def test_vtg_differential_mode(self):
        sentence = "$GNVTG,325.5,T,337.8,M,0.5,N,0.9,K,D*3A"
        result = parse(sentence)
        assert isinstance(result, VTGData)
        assert result.mode == "D"

    def test_vtg_empty_course(self):
        sentence = "$GNVTG,,T,,M,0.0,N,0.0,K,A*3D"
        result = parse(sentence)
        assert isinstance(result, VTGData)
        assert result.course == ""
        assert result.speed_kn == "0.0"

    def test_vtg_not_valid_keeps_empty_fields(self):
        result = parse("$GNVTG,,T,,M,,N,,K,N*32")
        assert isinstance(result, VTGData)
        assert result.speed_kh == ""
        assert result.mode == "N"

    def test_vtg_without_mode_indicator(self):
        sentence = "$GNVTG,054.7,T,034.4,M,005.5,N,010.2,K*56"
        assert parse(sentence) is ParseError.MISSING_FIELDS

    def test_vtg_invalid_checksum(self):
        sentence = "$GNVTG,054.7,T,034.4,M,005.5,N,010.2,K,A*FF"
        assert parse(sentence) is ParseError.INVALID_FORMAT


class TestDecodeVTG:
    TOKENS = ["GNVTG", "c", "T", "cm", "M", "kn", "N", "kh", "K", "m"]

    def test_minimum_token_count(self):
        assert MINIMUM_TOKEN_COUNT == 10

    @pytest.mark.parametrize("name", sorted(FIELD_INDICES))
    def test_field_read_from_its_index(self, name):
        result = decode_vtg(self.TOKENS)
        assert getattr(result, name) == self.TOKENS[FIELD_INDICES[name]]
