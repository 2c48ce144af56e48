"""Decoded BOLT11 invoice."""

from __future__ import annotations

import time
from dataclasses import dataclass

DEFAULT_EXPIRY = 3600
DEFAULT_MIN_FINAL_CLTV_EXPIRY = 18


@dataclass(frozen=True)
class Invoice:
    """A decoded BOLT11 payment request.

    Amounts are in milli-satoshi. Byte fields are raw bytes; call ``.hex()``
    for display. The signature is exposed as-is and has not been verified.
    """

    prefix: str
    timestamp: int
    amount_msat: int | None = None
    payment_hash: bytes | None = None
    payment_secret: bytes | None = None
    description: str | None = None
    description_hash: bytes | None = None
    payee: bytes | None = None
    expiry: int = DEFAULT_EXPIRY
    min_final_cltv_expiry: int = DEFAULT_MIN_FINAL_CLTV_EXPIRY
    metadata: bytes | None = None
    signature: bytes = b""
    recovery_id: int = 0

    @property
    def amount_sats(self) -> int | None:
        """Amount in whole satoshis (rounded down), or None for any-amount."""
        if self.amount_msat is None:
            return None
        return self.amount_msat // 1000

    @property
    def expires_at(self) -> int:
        return self.timestamp + self.expiry

    def is_expired(self, now: float | None = None) -> bool:
        if now is None:
            now = time.time()
        return now >= self.expires_at
