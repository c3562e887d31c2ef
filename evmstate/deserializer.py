"""Parsers for the string-encoded values found in state test JSON."""

from __future__ import annotations

import re
from collections.abc import Iterable

_U64_MAX = (1 << 64) - 1
_U256_MAX = (1 << 256) - 1
_HEX = re.compile(r"[0-9a-fA-F]+")
_HEX_OR_EMPTY = re.compile(r"(?:[0-9a-fA-F]{2})*")
_DEC = re.compile(r"[0-9]+")


def _parse_int(text: str, maximum: int) -> int:
    if text.startswith("0x"):
        digits = text[2:]
        if not _HEX.fullmatch(digits):
            raise ValueError(f"invalid hex number: {text!r}")
        value = int(digits, 16)
    else:
        if not _DEC.fullmatch(text):
            raise ValueError(f"invalid decimal number: {text!r}")
        value = int(text)
    if value > maximum:
        raise ValueError(f"number out of range: {text!r}")
    return value


def parse_u64(text: str) -> int:
    """Parse a ``0x``-prefixed hex or a decimal string as a 64-bit integer."""
    return _parse_int(text, _U64_MAX)


def parse_u256(text: str) -> int:
    """Parse a ``0x``-prefixed hex or a decimal string as a 256-bit integer."""
    return _parse_int(text, _U256_MAX)


def parse_bytes(text: str) -> bytes:
    """Decode a hex string, with or without ``0x`` prefix."""
    digits = text[2:] if text.startswith("0x") else text
    if not _HEX_OR_EMPTY.fullmatch(digits):
        raise ValueError(f"invalid hex data: {text!r}")
    return bytes.fromhex(digits)


def parse_bytes_list(strings: Iterable[str]) -> list[bytes]:
    return [parse_bytes(s) for s in strings]


def parse_optional_address(text: str) -> bytes | None:
    """Parse a 20-byte address; an empty string means no address."""
    if not text:
        return None
    digits = text[2:] if text.startswith("0x") else text
    if len(digits) != 40 or not _HEX.fullmatch(digits):
        raise ValueError(f"invalid address: {text!r}")
    return bytes.fromhex(digits)


def parse_optional_bytes(value: str | None) -> bytes | None:
    return None if value is None else parse_bytes(value)