"""Amount parsing for the BOLT11 human-readable part.

The human-readable part is ``{prefix}{amount}{multiplier}``, e.g. ``lnbc2500u``.
The prefix runs up to the first digit; an HRP with no digit carries no
amount ("any amount" invoice).

Multipliers: m (milli = 0.001), u (micro = 0.000001),
             n (nano = 0.000000001), p (pico = 0.000000000001)

All arithmetic is done in integer milli-satoshi. Pico amounts below one
msat are truncated toward zero.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from bolt11_decoder.envelope import decode_envelope
from bolt11_decoder.exceptions import AmountError, DecodeError

_DIGIT_RE = re.compile(r"\d")

MSAT_PER_BTC = 100_000_000 * 1_000

# msat per unit of amount, as (numerator, denominator)
_MULTIPLIERS: dict[str, tuple[int, int]] = {
    "m": (100_000_000, 1),
    "u": (100_000, 1),
    "n": (100, 1),
    "p": (1, 10),
}

MAX_MSAT = 2**64 - 1


@dataclass(frozen=True)
class ParsedAmount:
    """Network prefix and optional amount split out of an HRP."""

    prefix: str
    amount_msat: int | None = None


def parse_hrp(hrp: str) -> ParsedAmount:
    """Split a human-readable part into network prefix and msat amount.

    Args:
        hrp: The bech32 human-readable part, e.g. ``"lnbc2500u"``.

    Returns:
        ParsedAmount with the prefix and the amount in milli-satoshi, or
        ``amount_msat=None`` when the HRP contains no digit.

    Raises:
        AmountError: If the multiplier is unknown, the amount is not a
            decimal number, or the result does not fit in 64 bits.
    """
    match = _DIGIT_RE.search(hrp)
    if not match:
        return ParsedAmount(prefix=hrp)

    prefix, amount = hrp[: match.start()], hrp[match.start():]
    return ParsedAmount(prefix=prefix, amount_msat=amount_to_msat(amount))


def amount_to_msat(amount: str) -> int:
    """Convert an amount string such as ``"2500u"`` into milli-satoshi."""
    if amount[-1].isdigit():
        digits, multiplier = amount, None
    else:
        digits, multiplier = amount[:-1], amount[-1]

    if not digits.isascii() or not digits.isdigit():
        raise AmountError(amount, "amount is not a decimal number")

    value = int(digits)
    if multiplier is None:
        msat = value * MSAT_PER_BTC
    else:
        try:
            num, den = _MULTIPLIERS[multiplier]
        except KeyError:
            raise AmountError(amount, f"unknown multiplier {multiplier!r}") from None
        msat = value * num // den

    if msat > MAX_MSAT:
        raise AmountError(amount, "amount exceeds 64 bits of milli-satoshi")
    return msat


def extract_amount_sats(bolt11: str) -> int | None:
    """Extract the amount in satoshis from a BOLT11 invoice string.

    The bech32 checksum is verified; tagged fields are not decoded.

    Args:
        bolt11: A BOLT11-encoded Lightning invoice (e.g., "lnbc10u1p...").

    Returns:
        Amount in whole satoshis, or None if no amount is encoded
        (zero-amount / "any amount" invoices) or the string is not parseable.
    """
    if not bolt11:
        return None

    try:
        parsed = parse_hrp(decode_envelope(bolt11).hrp)
    except DecodeError:
        return None

    if parsed.amount_msat is None:
        return None
    return parsed.amount_msat // 1000
