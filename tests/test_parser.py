"""Tests for the MAC address parser."""

import pytest

from mac_normalizer.errors import (
    ConflictingPriorityError,
    EmptyInputError,
    InvalidFormatError,
    MACAddressError,
    WrongArgumentTypeError,
)
from mac_normalizer.parser import parse_mac, split_groups, try_parse

OCTETS = (0x00, 0x11, 0x22, 0xAA, 0xBB, 0xCC)
OCTETS64 = (0x00, 0x11, 0x22, 0xFF, 0xFE, 0xAA, 0xBB, 0xCC)


class TestParseFormats:
    @pytest.mark.parametrize(
        "text",
        [
            "00:11:22:aa:bb:cc",
            "00-11-22-aa-bb-cc",
            "0011.22aa.bbcc",
            "001122aabbcc",
            "001122:aabbcc",
            "001122-aabbcc",
            "00 11 22 AA BB CC",
            "0:11:22:aa:bb:cc",
            "1,6,00:11:22:aa:bb:cc",
            "0011.22AA.BBCC",
            "00.11.22.aa.bb.cc",
            "00_11_22_aa_bb_cc",
        ],
    )
    def test_eui48_formats(self, text):
        assert parse_mac(text).octets == OCTETS

    @pytest.mark.parametrize(
        "text",
        [
            "00:11:22:ff:fe:aa:bb:cc",
            "0011.22ff.feaa.bbcc",
            "001122fffeaabbcc",
            "001122ff-feaabbcc",
            "1,8,00:11:22:ff:fe:aa:bb:cc",
        ],
    )
    def test_eui64_formats(self, text):
        assert parse_mac(text).octets == OCTETS64

    def test_mixed_grouping(self):
        assert parse_mac("aabb.cc.00.11.22").octets == (0xAA, 0xBB, 0xCC, 0x00, 0x11, 0x22)
        assert parse_mac("11.22.33.aabbcc").octets == (0x11, 0x22, 0x33, 0xAA, 0xBB, 0xCC)

    def test_sun_format_unpadded(self):
        assert parse_mac("0-1-22-aa-b-cc").octets == (0x00, 0x01, 0x22, 0xAA, 0x0B, 0xCC)

    def test_with_whitespace(self):
        parsed = parse_mac("  00:11:22:AA:BB:CC  ")
        assert parsed.octets == OCTETS
        assert parsed.original == "  00:11:22:AA:BB:CC  "

    def test_byte_order_preserved(self):
        assert parse_mac("01:02:03:04:05:06").octets == (1, 2, 3, 4, 5, 6)

    @pytest.mark.parametrize(
        "octets",
        [
            (0, 0, 0, 0, 0, 0),
            (0xFF,) * 6,
            (0x01, 0x80, 0xC2, 0x00, 0x00, 0x0E),
            (0x0A, 0x0B, 0x0C, 0x0D, 0x0E, 0x0F, 0x10, 0x11),
        ],
    )
    def test_basic_round_trip(self, octets):
        basic = "".join(f"{o:02x}" for o in octets)
        assert parse_mac(basic).octets == octets


class TestParseRejects:
    def test_empty_string(self):
        with pytest.raises(EmptyInputError) as exc:
            parse_mac("")
        assert exc.value.message == "Please provide a mac address"

    def test_none(self):
        with pytest.raises(EmptyInputError):
            parse_mac(None)

    def test_whitespace_only(self):
        with pytest.raises(InvalidFormatError):
            parse_mac("   ")

    def test_not_a_string(self):
        with pytest.raises(WrongArgumentTypeError):
            parse_mac(0x001122AABBCC)

    def test_three_short_groups(self):
        with pytest.raises(InvalidFormatError) as exc:
            parse_mac("11:22:33")
        assert str(exc.value) == "Invalid MAC format '11:22:33'"

    def test_invalid_characters(self):
        with pytest.raises(InvalidFormatError):
            parse_mac("11:22:33:44:xx:55")

    def test_no_leading_zero_elision_in_words(self):
        with pytest.raises(InvalidFormatError):
            parse_mac("1:22:33")
        with pytest.raises(InvalidFormatError):
            parse_mac("011:122:aab:bcc")

    @pytest.mark.parametrize(
        "text",
        [
            "00:11:22:aa:bb",
            "00:11:22:aa:bb:cc:dd",
            "00:11:22:aa:bb:ccc",
            "001122aabbc",
            "001122aabbccdd",
            "GG:HH:II:JJ:KK:LL",
            "0x00112233aabb",
        ],
    )
    def test_invalid_shapes(self, text):
        with pytest.raises(InvalidFormatError):
            parse_mac(text)

    def test_message_quotes_trimmed_text(self):
        with pytest.raises(InvalidFormatError) as exc:
            parse_mac("  zz:11  ")
        assert exc.value.message == "Invalid MAC format 'zz:11'"
        assert exc.value.text == "zz:11"

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            parse_mac("nonsense")


class TestPriority:
    def test_default_priority(self):
        assert parse_mac("0011.22aa.bbcc").priority == 0

    def test_priority_argument(self):
        assert parse_mac("0011.22aa.bbcc", priority=45).priority == 45

    def test_embedded_priority(self):
        parsed = parse_mac("45#0011.22aa.bbcc")
        assert parsed.priority == 45
        assert parsed.octets == OCTETS

    @pytest.mark.parametrize("text", ["60#00:11:22:aa:bb:cc", "60#001122aabbcc", "60#00-11-22-aa-bb-cc"])
    def test_embedded_priority_any_format(self, text):
        parsed = parse_mac(text)
        assert parsed.priority == 60
        assert parsed.octets == OCTETS

    def test_matching_priorities(self):
        assert parse_mac("45#0011.22aa.bbcc", priority=45).priority == 45

    def test_conflicting_priorities(self):
        with pytest.raises(ConflictingPriorityError) as exc:
            parse_mac("45#0011.22aa.bbcc", priority=60)
        assert exc.value.message == (
            "Conflicting priority in '45#0011.22aa.bbcc' and priority argument 60"
        )

    def test_zero_priority_argument_is_not_a_conflict(self):
        assert parse_mac("45#0011.22aa.bbcc", priority=0).priority == 45

    def test_invalid_address_after_priority(self):
        with pytest.raises(InvalidFormatError):
            parse_mac("45#0011.22aa")


class TestSplitGroups:
    def test_even_groups_split_into_pairs(self):
        assert split_groups("aabb.cc.0011") == ["aa", "bb", "cc", "00", "11"]

    def test_odd_groups_kept_whole(self):
        assert split_groups("abc:1:22") == ["abc", "1", "22"]

    def test_empty_groups_dropped(self):
        assert split_groups("::aa::bb::") == ["aa", "bb"]

    def test_non_hex_rejected(self):
        with pytest.raises(InvalidFormatError):
            split_groups("aa:zz")


class TestTryParse:
    def test_success(self):
        result = try_parse("00:11:22:aa:bb:cc")
        assert result.ok
        assert result.error is None
        assert result.value.octets == OCTETS
        assert result.unwrap() is result.value

    def test_failure(self):
        result = try_parse("11:22:33")
        assert not result.ok
        assert result.value is None
        assert isinstance(result.error, InvalidFormatError)
        with pytest.raises(InvalidFormatError):
            result.unwrap()

    def test_empty_input_kind(self):
        result = try_parse("")
        assert isinstance(result.error, EmptyInputError)

    def test_same_message_as_raised(self):
        with pytest.raises(MACAddressError) as exc:
            parse_mac("11:22:33:44:xx:55")
        assert try_parse("11:22:33:44:xx:55").error.message == exc.value.message
