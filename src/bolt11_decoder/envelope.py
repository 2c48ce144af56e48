"""bech32 envelope handling for BOLT11 strings.

Checksum arithmetic comes from the ``bech32`` package. Its ``bech32_decode``
refuses strings longer than 90 characters (the BIP-173 address limit), which
every BOLT11 invoice exceeds, so the HRP/data split is done here and only the
checksum check is delegated.
"""

from __future__ import annotations

from dataclasses import dataclass

from bech32 import CHARSET, bech32_verify_checksum

from bolt11_decoder.exceptions import EncodingError

CHECKSUM_SYMBOLS = 6
_URI_SCHEME = "lightning:"
_CHARSET_INDEX = {c: i for i, c in enumerate(CHARSET)}


@dataclass(frozen=True)
class RawInvoice:
    """Human-readable part and 5-bit data symbols, checksum removed."""

    hrp: str
    data: tuple[int, ...]


def decode_envelope(invoice: str) -> RawInvoice:
    """Split a bech32 string into HRP and data, verifying the checksum.

    Surrounding whitespace and a ``lightning:`` URI scheme are ignored.

    Raises:
        EncodingError: If the string is not valid bech32 or carries no data.
    """
    text = invoice.strip()
    if text[: len(_URI_SCHEME)].lower() == _URI_SCHEME:
        text = text[len(_URI_SCHEME):]

    if any(ord(c) < 33 or ord(c) > 126 for c in text):
        raise EncodingError("character out of range", invoice)
    if text.lower() != text and text.upper() != text:
        raise EncodingError("mixed case", invoice)
    text = text.lower()

    pos = text.rfind("1")
    if pos < 1:
        raise EncodingError("missing human-readable part or separator", invoice)
    if pos + CHECKSUM_SYMBOLS + 1 > len(text):
        raise EncodingError("too short for a checksum", invoice)

    hrp = text[:pos]
    try:
        symbols = [_CHARSET_INDEX[c] for c in text[pos + 1:]]
    except KeyError as e:
        raise EncodingError(f"invalid data character {e.args[0]!r}", invoice) from None

    if not bech32_verify_checksum(hrp, symbols):
        raise EncodingError("checksum mismatch", invoice)

    data = tuple(symbols[:-CHECKSUM_SYMBOLS])
    if not data:
        raise EncodingError("empty data part", invoice)
    return RawInvoice(hrp=hrp, data=data)
