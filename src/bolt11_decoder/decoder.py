"""Decode BOLT11 payment requests into Invoice values.

Decoding is all-or-nothing: the first problem raises a DecodeError subclass
and no partial invoice is returned.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from bolt11_decoder.amount import parse_hrp
from bolt11_decoder.bits import BYTE_BITS, MAX_UINT_BITS, SYMBOL_BITS, convert_bits, extract_uint
from bolt11_decoder.envelope import decode_envelope
from bolt11_decoder.exceptions import MalformedFieldError, TruncatedError, UnknownPrefixError
from bolt11_decoder.fields import (
    SIGNATURE_SYMBOLS,
    TIMESTAMP_BITS,
    TIMESTAMP_SYMBOLS,
    Tag,
    TaggedField,
    iter_tagged_fields,
)
from bolt11_decoder.invoice import Invoice

logger = logging.getLogger(__name__)

NETWORK_PREFIXES: frozenset[str] = frozenset({"lnbc", "lntb", "lntbs", "lnbcrt"})

# Fixed-size byte fields and their required length
_FIXED_FIELDS: dict[int, tuple[str, int]] = {
    Tag.PAYMENT_HASH: ("payment_hash", 32),
    Tag.PAYMENT_SECRET: ("payment_secret", 32),
    Tag.DESCRIPTION_HASH: ("description_hash", 32),
    Tag.PAYEE: ("payee", 33),
}

_INT_FIELDS: dict[int, str] = {
    Tag.EXPIRY: "expiry",
    Tag.MIN_FINAL_CLTV_EXPIRY: "min_final_cltv_expiry",
}

# Recognized, but their structure is not parsed
_SKIPPED_TAGS = frozenset({Tag.ROUTE_HINT, Tag.FEATURES, Tag.FALLBACK})


@dataclass(frozen=True)
class Bolt11Decoder:
    """BOLT11 decoder with a configurable network-prefix whitelist.

    Args:
        prefixes: Network prefixes accepted (default: mainnet, testnet,
            signet and regtest).
    """

    prefixes: frozenset[str] = NETWORK_PREFIXES

    def decode(self, invoice: str) -> Invoice:
        """Decode a BOLT11 string.

        Args:
            invoice: The payment request, optionally prefixed "lightning:".

        Returns:
            The decoded Invoice.

        Raises:
            EncodingError: Bad bech32 envelope or checksum, or no data.
            AmountError: Unparseable amount in the human-readable part.
            UnknownPrefixError: Network prefix not in ``prefixes``.
            TruncatedError: Data part too short for the timestamp or signature.
            MalformedFieldError: A tagged field overruns or has a bad payload.
            ConversionError: A byte field carries non-zero padding bits.
        """
        raw = decode_envelope(invoice)

        parsed = parse_hrp(raw.hrp)
        if parsed.prefix not in self.prefixes:
            raise UnknownPrefixError(parsed.prefix)

        if len(raw.data) < TIMESTAMP_SYMBOLS:
            raise TruncatedError(TIMESTAMP_SYMBOLS, len(raw.data), what="timestamp")
        timestamp = extract_uint(raw.data[:TIMESTAMP_SYMBOLS], TIMESTAMP_BITS)

        values: dict[str, Any] = {}
        for tagged in iter_tagged_fields(raw.data):
            values.update(_read_field(tagged))

        sig = bytes(convert_bits(raw.data[-SIGNATURE_SYMBOLS:], SYMBOL_BITS, BYTE_BITS))
        return Invoice(
            prefix=parsed.prefix,
            timestamp=timestamp,
            amount_msat=parsed.amount_msat,
            signature=sig[:64],
            recovery_id=sig[64],
            **values,
        )


def _read_field(tagged: TaggedField) -> dict[str, Any]:
    """Map one tagged field onto Invoice keyword arguments."""
    tag = tagged.tag

    if tag in _FIXED_FIELDS:
        name, size = _FIXED_FIELDS[tag]
        symbols = -(-size * BYTE_BITS // SYMBOL_BITS)
        if tagged.length != symbols:
            raise MalformedFieldError(
                tag, f"{name} must be {size} bytes ({symbols} symbols), got {tagged.length} symbols"
            )
        return {name: tagged.payload}

    if tag in _INT_FIELDS:
        bits = tagged.length * SYMBOL_BITS
        if bits > MAX_UINT_BITS:
            raise MalformedFieldError(tag, f"{bits}-bit integer is too wide")
        if not bits:
            return {_INT_FIELDS[tag]: 0}
        return {_INT_FIELDS[tag]: extract_uint(tagged.data, bits)}

    if tag == Tag.DESCRIPTION:
        try:
            return {"description": tagged.payload.decode("utf-8")}
        except UnicodeDecodeError as e:
            raise MalformedFieldError(tag, f"description is not UTF-8: {e}") from e

    if tag == Tag.METADATA:
        return {"metadata": tagged.payload}

    if tag in _SKIPPED_TAGS:
        logger.debug("Ignoring %s field (%d symbols)", Tag(tag).name, tagged.length)
    else:
        logger.debug("Skipping unknown tag %d (%d symbols)", tag, tagged.length)
    return {}
