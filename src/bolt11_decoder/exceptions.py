"""BOLT11 decoding exceptions."""

from __future__ import annotations


class DecodeError(Exception):
    """Base exception for bolt11-decoder."""


class EncodingError(DecodeError):
    """The bech32 envelope is malformed or its checksum does not verify."""

    def __init__(self, reason: str, invoice: str | None = None):
        self.reason = reason
        self.invoice = invoice
        super().__init__(f"Invalid bech32 encoding: {reason}")


class AmountError(DecodeError):
    """The amount in the human-readable part cannot be parsed."""

    def __init__(self, amount: str, reason: str):
        self.amount = amount
        self.reason = reason
        super().__init__(f"Invalid amount {amount!r}: {reason}")


class UnknownPrefixError(DecodeError):
    """The network prefix is not one we understand."""

    def __init__(self, prefix: str):
        self.prefix = prefix
        super().__init__(f"Unknown network prefix: {prefix!r}")


class TruncatedError(DecodeError):
    """Fewer symbols remain than a fixed-width field requires."""

    def __init__(self, needed: int, available: int, what: str = "field"):
        self.needed = needed
        self.available = available
        self.what = what
        super().__init__(
            f"Truncated {what}: need {needed} symbols, only {available} available"
        )


class MalformedFieldError(DecodeError):
    """A tagged field overruns the data part or has an invalid payload."""

    def __init__(self, tag: int | None, reason: str):
        self.tag = tag
        self.reason = reason
        where = "tagged field" if tag is None else f"tagged field {tag}"
        super().__init__(f"Malformed {where}: {reason}")


class ConversionError(DecodeError):
    """Bit-width conversion found invalid input or non-zero padding."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Bit conversion failed: {reason}")
