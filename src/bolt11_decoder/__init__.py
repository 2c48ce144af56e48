"""bolt11-decoder: BOLT11 Lightning payment request decoding for Python.

Turns a ``lnbc...`` payment request into an immutable Invoice with the
network prefix, amount, timestamp and tagged fields (payment hash, payment
secret, description, expiry, ...). Signatures are exposed but not verified.

Usage:
    import bolt11_decoder

    # Module-level convenience (default network prefixes)
    invoice = bolt11_decoder.decode("lnbc2500u1pvjluez...")
    print(invoice.amount_msat, invoice.payment_hash.hex())

    # Or use a decoder directly for more control
    from bolt11_decoder import Bolt11Decoder

    decoder = Bolt11Decoder(prefixes=frozenset({"lnbc"}))
    invoice = decoder.decode("lnbc2500u1pvjluez...")
"""

from __future__ import annotations

from bolt11_decoder.amount import ParsedAmount, extract_amount_sats, parse_hrp
from bolt11_decoder.bits import convert_bits, extract_uint
from bolt11_decoder.decoder import NETWORK_PREFIXES, Bolt11Decoder
from bolt11_decoder.envelope import RawInvoice, decode_envelope
from bolt11_decoder.exceptions import (
    AmountError,
    ConversionError,
    DecodeError,
    EncodingError,
    MalformedFieldError,
    TruncatedError,
    UnknownPrefixError,
)
from bolt11_decoder.fields import Tag, TaggedField, iter_tagged_fields
from bolt11_decoder.invoice import Invoice

__version__ = "0.1.0"

__all__ = [
    # Decoding
    "Bolt11Decoder",
    "decode",
    "NETWORK_PREFIXES",
    "Invoice",
    # Building blocks
    "RawInvoice",
    "decode_envelope",
    "ParsedAmount",
    "parse_hrp",
    "extract_amount_sats",
    "convert_bits",
    "extract_uint",
    "Tag",
    "TaggedField",
    "iter_tagged_fields",
    # Exceptions
    "DecodeError",
    "EncodingError",
    "AmountError",
    "UnknownPrefixError",
    "TruncatedError",
    "MalformedFieldError",
    "ConversionError",
]

# Module-level convenience function using a default decoder
_default_decoder: Bolt11Decoder | None = None


def _get_default_decoder() -> Bolt11Decoder:
    global _default_decoder
    if _default_decoder is None:
        _default_decoder = Bolt11Decoder()
    return _default_decoder


def decode(invoice: str) -> Invoice:
    """Convenience: decode with the default decoder."""
    return _get_default_decoder().decode(invoice)
