"""Tagged-field walking for the BOLT11 data part.

After the 35-bit timestamp the data part is a run of tagged fields::

    tag (1 symbol) | data_length (2 symbols) | data (data_length symbols)

followed by a fixed 104-symbol (520-bit) signature. The walker stops when
exactly the signature remains and rejects any field that reaches into it.
"""

from __future__ import annotations

import enum
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from bolt11_decoder.bits import BYTE_BITS, SYMBOL_BITS, convert_bits, extract_uint
from bolt11_decoder.exceptions import MalformedFieldError, TruncatedError

TIMESTAMP_SYMBOLS = 7
TIMESTAMP_BITS = 35
SIGNATURE_SYMBOLS = 104
TAG_SYMBOLS = 1
LENGTH_SYMBOLS = 2
LENGTH_BITS = 10


class Tag(enum.IntEnum):
    """Tagged field types, named after their bech32 character."""

    PAYMENT_HASH = 1  # p
    ROUTE_HINT = 3  # r
    FEATURES = 5  # 9
    EXPIRY = 6  # x
    FALLBACK = 9  # f
    DESCRIPTION = 13  # d
    PAYMENT_SECRET = 16  # s
    PAYEE = 19  # n
    DESCRIPTION_HASH = 23  # h
    MIN_FINAL_CLTV_EXPIRY = 24  # c
    METADATA = 27  # m


KNOWN_TAGS = frozenset(Tag)


@dataclass(frozen=True)
class TaggedField:
    """One (tag, length, data) triple from the data part."""

    tag: int
    length: int
    data: tuple[int, ...]

    @property
    def is_known(self) -> bool:
        return self.tag in KNOWN_TAGS

    @property
    def payload(self) -> bytes:
        """Field data regrouped into bytes.

        Padding is only allowed when the field's bit count is byte-aligned;
        otherwise leftover bits must be zero and shorter than one symbol.

        Raises:
            ConversionError: If the leftover bits are invalid.
        """
        pad = (self.length * SYMBOL_BITS) % BYTE_BITS == 0
        return bytes(convert_bits(self.data, SYMBOL_BITS, BYTE_BITS, pad=pad))


def iter_tagged_fields(
    data: Sequence[int], signature_symbols: int = SIGNATURE_SYMBOLS
) -> Iterator[TaggedField]:
    """Yield every tagged field between the timestamp and the signature.

    Args:
        data: The full data part (timestamp included, checksum removed).
        signature_symbols: Size of the trailing signature.

    Raises:
        TruncatedError: If ``data`` cannot hold the timestamp and signature.
        MalformedFieldError: If a field header or payload crosses into the
            signature.
    """
    end = len(data) - signature_symbols
    if end < TIMESTAMP_SYMBOLS:
        raise TruncatedError(
            TIMESTAMP_SYMBOLS + signature_symbols, len(data), what="data part"
        )

    pos = TIMESTAMP_SYMBOLS
    while pos < end:
        if pos + TAG_SYMBOLS + LENGTH_SYMBOLS > end:
            raise MalformedFieldError(
                None, f"field header at symbol {pos} overruns the signature"
            )
        tag = data[pos]
        pos += TAG_SYMBOLS
        length = extract_uint(data[pos:pos + LENGTH_SYMBOLS], LENGTH_BITS)
        pos += LENGTH_SYMBOLS
        if pos + length > end:
            raise MalformedFieldError(
                tag,
                f"length {length} overruns the signature by {pos + length - end} symbols",
            )
        yield TaggedField(tag=tag, length=length, data=tuple(data[pos:pos + length]))
        pos += length
