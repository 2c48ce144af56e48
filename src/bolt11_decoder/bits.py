"""Bit-level helpers for bech32 data parts.

bech32 carries its payload as 5-bit symbols. These helpers regroup such a
stream into other power-of-two widths and pull fixed-width big-endian
integers off the front of it.
"""

from __future__ import annotations

from collections.abc import Sequence

from bolt11_decoder.exceptions import ConversionError, TruncatedError

SYMBOL_BITS = 5
BYTE_BITS = 8
MAX_UINT_BITS = 64


def convert_bits(
    data: Sequence[int], frombits: int, tobits: int, pad: bool = True
) -> list[int]:
    """Regroup a stream of ``frombits``-wide values into ``tobits``-wide values.

    Args:
        data: Input values, each below ``2 ** frombits``.
        frombits: Width of each input value, 1 to 8.
        tobits: Width of each output value, 1 to 8.
        pad: Zero-fill a trailing partial group instead of rejecting it.

    Returns:
        The regrouped values. Empty input yields an empty list.

    Raises:
        ValueError: If either width is outside 1..8.
        ConversionError: If an input value is too wide, or, without ``pad``,
            if the leftover bits form a whole input symbol or are non-zero.
    """
    if not 1 <= frombits <= 8 or not 1 <= tobits <= 8:
        raise ValueError(f"bit widths must be in 1..8, got {frombits}->{tobits}")

    acc = 0
    bits = 0
    out: list[int] = []
    maxv = (1 << tobits) - 1
    max_acc = (1 << (frombits + tobits - 1)) - 1
    for value in data:
        if value < 0 or value >> frombits:
            raise ConversionError(f"value {value} does not fit in {frombits} bits")
        acc = ((acc << frombits) | value) & max_acc
        bits += frombits
        while bits >= tobits:
            bits -= tobits
            out.append((acc >> bits) & maxv)

    if pad:
        if bits:
            out.append((acc << (tobits - bits)) & maxv)
    elif bits >= frombits:
        raise ConversionError(f"{bits} leftover bits form a whole input symbol")
    elif (acc << (tobits - bits)) & maxv:
        raise ConversionError("non-zero padding bits")
    return out


def extract_uint(data: Sequence[int], databits: int) -> int:
    """Read an unsigned big-endian integer of ``databits`` bits.

    Only the first ``ceil(databits / 5)`` symbols of ``data`` are read.

    Raises:
        ValueError: If ``databits`` is outside 1..64.
        TruncatedError: If ``data`` holds too few symbols.
    """
    if not 1 <= databits <= MAX_UINT_BITS:
        raise ValueError(f"databits must be in 1..{MAX_UINT_BITS}, got {databits}")

    needed = -(-databits // SYMBOL_BITS)
    if len(data) < needed:
        raise TruncatedError(needed, len(data), what=f"{databits}-bit integer")

    octets = convert_bits(data[:needed], SYMBOL_BITS, BYTE_BITS, pad=True)
    value = int.from_bytes(bytes(octets), "big")
    return value >> (len(octets) * BYTE_BITS - databits)
