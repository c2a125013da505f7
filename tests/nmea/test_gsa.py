"""Tests for GSA sentence decoding."""

import pytest

from gpsnmea.nmea import GSAData, ParseError, parse
from gpsnmea.nmea.gsa import FIELD_INDICES, MINIMUM_TOKEN_COUNT, decode_gsa

GSA_VALID = "$GNGSA,A,3,80,71,73,79,69,,,,,,,,1.83,1.09,1.47*17"


class TestParseGSA:
    """Tests for GSA sentences passed through parse."""

    def test_valid_gsa(self):
        result = parse(GSA_VALID)
        assert isinstance(result, GSAData)
        assert result.type == "GNGSA"
        assert result.mode == "A"
        assert result.fix_type == "3"
        assert result.pdop == "1.83"
        assert result.hdop == "1.09"
        assert result.vdop == "1.47"

    def test_all_twelve_slots_kept(self):
        result = parse(GSA_VALID)
        assert isinstance(result, GSAData)
        assert result.satellites == ["80", "71", "73", "79", "69"] + [""] * 7

    def test_ten_tokens_is_missing_fields(self):
        sentence = "$GNGSA,A,3,80,71,73,79,69,,*09"
        assert parse(sentence) is ParseError.MISSING_FIELDS

    def test_seventeen_tokens_is_missing_fields(self):
        sentence = "$GNGSA,A,3,80,71,73,79,69,,,,,,,,1.83,1.09*27"
        assert parse(sentence) is ParseError.MISSING_FIELDS


class TestDecodeGSA:
    TOKENS = ["GNGSA", "m", "f"] + [f"s{i}" for i in range(12)] + ["p", "h", "v"]

    def test_minimum_token_count(self):
        assert MINIMUM_TOKEN_COUNT == 18

    @pytest.mark.parametrize("name", sorted(FIELD_INDICES))
    def test_field_read_from_its_index(self, name):
        result = decode_gsa(self.TOKENS)
        assert getattr(result, name) == self.TOKENS[FIELD_INDICES[name]]

    def test_satellites_are_tokens_3_to_14(self):
        result = decode_gsa(self.TOKENS)
        assert result.satellites == [f"s{i}" for i in range(12)]
