"""Shared fixtures: a minimal BOLT11 encoder built on the bech32 package."""

from __future__ import annotations

import pytest
from bech32 import bech32_encode, convertbits

# BOLT #11 test vectors (signed with the document's example key).
#
# "Please send $3 for a cup of coffee to the same peer, within 1 minute"
COFFEE_INVOICE = (
    "lnbc2500u1pvjluezpp5qqqsyqcyq5rqwzqfqqqsyqcyq5rqwzqfqqqsyqcyq5rqwzqf"
    "qypqdq5xysxxatsyp3k7enxv4jsxqzpuaztrnwngzn3kdzw5hydlzf03qdgm2hdq27cq"
    "v3agm2awhz5se903vruatfhq77w3ls4evs3ch9zw97j25emudupq63nyw24cg27h2rsp"
    "fj9srp"
)
# "Please make a donation of any amount using payment_hash 0001020304050607080900010203040506070809000102030405060708090102"
DONATION_INVOICE = (
    "lnbc1pvjluezpp5qqqsyqcyq5rqwzqfqqqsyqcyq5rqwzqfqqqsyqcyq5rqwzqfqypqd"
    "pl2pkx2ctnv5sxxmmwwd5kgetjypeh2ursdae8g6twvus8g6rfwvs8qun0dfjkxaq8rk"
    "x3yf5tcsyz3d73gafnh3cax9rn449d9p5uxz9ezhhypd0elx87sjle52x86fux2ypatg"
    "ddc6k63n7erqz25le42c4u4ecky03ylcqca784w"
)
# "On testnet, with a fallback address mk2QpYatsKicvFVuTAQLBryyccRXMUaGHP"
FALLBACK_INVOICE = (
    "lntb20m1pvjluezhp58yjmdan79s6qqdhdzgynm4zwqd5d7xmw5fk98klysy043l2ahr"
    "qspp5qqqsyqcyq5rqwzqfqqqsyqcyq5rqwzqfqqqsyqcyq5rqwzqfqypqfpp3x9et2e20"
    "v6pu37c5d9vax37wxq72un98kmzzhznpurw9sgl2v0nklu2g4d0keph5t7tj9tcqd8re"
    "xnd07ux4uv2cjvcqwaxgj7v4uwn5wmypjd5n69z2xm3xgksg28nwht7f6zspwp3f9t"
)

VECTOR_TIMESTAMP = 1496314658
VECTOR_PAYMENT_HASH = bytes.fromhex(
    "0001020304050607080900010203040506070809000102030405060708090102"
)


def to_u5(data: bytes) -> list[int]:
    """Bytes to zero-padded 5-bit symbols."""
    return convertbits(data, 8, 5, True)


def timestamp_u5(timestamp: int) -> list[int]:
    return [(timestamp >> (5 * (6 - i))) & 31 for i in range(7)]


def tagged(tag: int, symbols: list[int]) -> list[int]:
    """Encode one tagged field: tag, 10-bit length, data."""
    length = len(symbols)
    return [tag, length >> 5, length & 31, *symbols]


def build_invoice(
    hrp: str = "lnbc2500u",
    fields: list[list[int]] | None = None,
    timestamp: int = VECTOR_TIMESTAMP,
    signature: bytes = bytes(64) + b"\x01",
) -> str:
    """Encode a BOLT11 string from pre-encoded tagged fields.

    The signature is arbitrary: nothing in the decoder verifies it.
    """
    data = timestamp_u5(timestamp)
    for f in fields or []:
        data.extend(f)
    data.extend(to_u5(signature))
    return bech32_encode(hrp, data)


@pytest.fixture
def make_invoice():
    return build_invoice
