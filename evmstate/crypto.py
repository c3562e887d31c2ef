"""Keccak-256 hashing and RLP encoding."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Union

from Crypto.Hash import keccak

RlpItem = Union[bytes, bytearray, int, Sequence["RlpItem"]]


def keccak256(data: bytes) -> bytes:
    """Return the 32-byte Keccak-256 digest of ``data``."""
    return keccak.new(digest_bits=256, data=bytes(data)).digest()


def _length_prefix(length: int, offset: int) -> bytes:
    if length < 56:
        return bytes([offset + length])
    encoded = length.to_bytes((length.bit_length() + 7) // 8, "big")
    return bytes([offset + 55 + len(encoded)]) + encoded


def rlp_encode(item: RlpItem) -> bytes:
    """RLP-encode bytes, non-negative integers and nested lists of them."""
    if isinstance(item, bool):
        raise TypeError("booleans are not RLP-encodable")
    if isinstance(item, int):
        if item < 0:
            raise ValueError("negative integers are not RLP-encodable")
        item = item.to_bytes((item.bit_length() + 7) // 8, "big")
    if isinstance(item, (bytes, bytearray)):
        data = bytes(item)
        if len(data) == 1 and data[0] < 0x80:
            return data
        return _length_prefix(len(data), 0x80) + data
    if isinstance(item, (list, tuple)):
        payload = b"".join(rlp_encode(element) for element in item)
        return _length_prefix(len(payload), 0xC0) + payload
    raise TypeError(f"cannot RLP-encode {type(item).__name__}")