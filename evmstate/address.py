"""Addresses of contracts created by CREATE and CREATE2."""

from __future__ import annotations

from .crypto import keccak256, rlp_encode


def _check_length(name: str, value: bytes, length: int) -> bytes:
    value = bytes(value)
    if len(value) != length:
        raise ValueError(f"{name} must be {length} bytes, got {len(value)}")
    return value


def create_address(caller: bytes, nonce: int) -> bytes:
    """Address of a contract created with CREATE by ``caller`` at ``nonce``."""
    caller = _check_length("caller", caller, 20)
    if nonce < 0:
        raise ValueError("nonce must not be negative")
    return keccak256(rlp_encode([caller, nonce]))[12:]


def create2_address(caller: bytes, code_hash: bytes, salt: int) -> bytes:
    """Address of a contract created with CREATE2 (EIP-1014)."""
    caller = _check_length("caller", caller, 20)
    code_hash = _check_length("code_hash", code_hash, 32)
    if not 0 <= salt < 1 << 256:
        raise ValueError("salt must fit in 256 bits")
    preimage = b"\xff" + caller + salt.to_bytes(32, "big") + code_hash
    return keccak256(preimage)[12:]