"""Tests for bit-width conversion and fixed-width extraction."""

import pytest

from bolt11_decoder.bits import convert_bits, extract_uint
from bolt11_decoder.exceptions import ConversionError, TruncatedError


class TestConvertBits:
    def test_empty_input(self):
        assert convert_bits([], 5, 8, pad=False) == []
        assert convert_bits([], 8, 5, pad=True) == []

    def test_bytes_to_symbols_padded(self):
        # 0xff = 11111111 -> 11111 111(00)
        assert convert_bits([0xFF], 8, 5, pad=True) == [31, 28]

    def test_bytes_to_symbols_unpadded_rejects_leftover(self):
        with pytest.raises(ConversionError, match="non-zero padding"):
            convert_bits([0xFF], 8, 5, pad=False)

    def test_symbols_to_bytes_exact(self):
        # 40 bits, no leftover
        assert convert_bits([0, 0, 0, 0, 0, 0, 0, 31], 5, 8, pad=False) == [0, 0, 0, 0, 31]

    def test_symbols_to_bytes_zero_padding_accepted(self):
        # 10 bits -> one byte plus 2 zero bits
        assert convert_bits([31, 28], 5, 8, pad=False) == [0xFF]

    def test_symbols_to_bytes_nonzero_padding_rejected(self):
        with pytest.raises(ConversionError, match="non-zero padding"):
            convert_bits([31, 29], 5, 8, pad=False)

    def test_whole_leftover_symbol_rejected(self):
        # 15 bits -> one byte with 7 bits left, more than a symbol
        with pytest.raises(ConversionError, match="whole input symbol"):
            convert_bits([0, 0, 0], 5, 8, pad=False)

    def test_padding_emits_final_partial_group(self):
        assert convert_bits([31, 29], 5, 8, pad=True) == [0xFF, 0x40]

    def test_value_too_wide_rejected(self):
        with pytest.raises(ConversionError, match="does not fit in 5 bits"):
            convert_bits([32], 5, 8)

    def test_negative_value_rejected(self):
        with pytest.raises(ConversionError):
            convert_bits([-1], 5, 8)

    @pytest.mark.parametrize("frombits, tobits", [(0, 8), (5, 9), (9, 5), (5, 0)])
    def test_invalid_widths(self, frombits, tobits):
        with pytest.raises(ValueError):
            convert_bits([1], frombits, tobits)

    def test_same_width_is_identity(self):
        assert convert_bits([1, 2, 3], 5, 5, pad=False) == [1, 2, 3]

    def test_one_bit_output(self):
        assert convert_bits([0b10100000], 8, 1) == [1, 0, 1, 0, 0, 0, 0, 0]


class TestExtractUint:
    def test_timestamp_from_vector(self):
        # "pvjluez" is the BOLT #11 example timestamp
        symbols = [1, 12, 18, 31, 28, 25, 2]
        assert extract_uint(symbols, 35) == 1496314658

    def test_ten_bit_length(self):
        # "p5": 1 * 32 + 20
        assert extract_uint([1, 20], 10) == 52

    def test_max_ten_bit_length(self):
        assert extract_uint([31, 31], 10) == 1023

    def test_reads_only_needed_symbols(self):
        assert extract_uint([1, 20, 31, 31, 31], 10) == 52

    def test_partial_symbol_takes_top_bits(self):
        # 3 bits from 10101 -> 101
        assert extract_uint([0b10101], 3) == 0b101

    def test_sixty_four_bits(self):
        # 13 symbols carry 65 bits; the top 64 are returned
        symbols = [31] * 12 + [30]
        assert extract_uint(symbols, 64) == 2**64 - 1

    def test_truncated_input(self):
        with pytest.raises(TruncatedError) as exc:
            extract_uint([1, 2, 3], 35)
        assert exc.value.needed == 7
        assert exc.value.available == 3

    @pytest.mark.parametrize("databits", [0, 65])
    def test_invalid_databits(self, databits):
        with pytest.raises(ValueError):
            extract_uint([0] * 14, databits)
