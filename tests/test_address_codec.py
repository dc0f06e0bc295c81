"""Tests for dotted-decimal address conversion."""

import pytest

from asset_discovery.core.address_codec import (
    MAX_ADDRESS, format_address, is_valid_address, parse_address,
)
from asset_discovery.utils.error_handler import InvalidFormatError


class TestParseAddress:
    """Tests for parse_address."""

    def test_parses_host_byte_order(self):
        """The first octet is the most significant byte."""
        assert parse_address("192.168.1.10") == 0xC0A8010A

    def test_extremes(self):
        """All-zero and all-ones addresses map to the integer bounds."""
        assert parse_address("0.0.0.0") == 0
        assert parse_address("255.255.255.255") == MAX_ADDRESS

    def test_leading_zeros_are_accepted(self):
        """Octets are read as decimal numbers, leading zeros included."""
        assert parse_address("010.001.000.001") == parse_address("10.1.0.1")

    @pytest.mark.parametrize("text", [
        "256.0.0.1",
        "1.2.3",
        "1.2.3.4.5",
        "a.b.c.d",
        "1.2.3.4 ",
        " 1.2.3.4",
        "1.2.3.-4",
        "",
    ])
    def test_rejects_malformed_text(self, text):
        """Wrong octet counts, stray characters and large octets are rejected."""
        with pytest.raises(InvalidFormatError):
            parse_address(text)

    def test_rejects_overlong_digit_runs(self):
        """Huge octets are a format error, not an integer conversion failure."""
        with pytest.raises(InvalidFormatError):
            parse_address("9" * 5000 + ".1.1.1")
        with pytest.raises(InvalidFormatError):
            parse_address("0001.2.3.1234")

    def test_many_leading_zeros_are_accepted(self):
        """Only significant digits count toward the octet length."""
        assert parse_address("0" * 5000 + "7.0.0.1") == parse_address("7.0.0.1")

    def test_rejects_non_text(self):
        """Only strings are accepted."""
        with pytest.raises(InvalidFormatError):
            parse_address(3232235777)

    def test_error_is_a_value_error(self):
        """Callers catching ValueError also catch format errors."""
        with pytest.raises(ValueError):
            parse_address("999.1.1.1")


class TestFormatAddress:
    """Tests for format_address."""

    def test_formats_without_leading_zeros(self):
        """Octets are printed in plain decimal."""
        assert format_address(0x0A010001) == "10.1.0.1"

    def test_round_trip(self):
        """Formatting a parsed address gives the canonical text back."""
        for text in ("0.0.0.0", "127.0.0.1", "192.168.1.255", "255.255.255.255"):
            assert format_address(parse_address(text)) == text

    @pytest.mark.parametrize("value", [-1, MAX_ADDRESS + 1])
    def test_rejects_out_of_range(self, value):
        """Values outside 32 bits cannot be formatted."""
        with pytest.raises(InvalidFormatError):
            format_address(value)


def test_is_valid_address():
    """is_valid_address mirrors parse_address without raising."""
    assert is_valid_address("192.168.0.1")
    assert not is_valid_address("192.168.0.256")
    assert not is_valid_address("192.168.0")
    assert not is_valid_address("9" * 5000 + ".1.1.1")
