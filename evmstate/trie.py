"""Merkle Patricia trie roots of state and the hash of transaction logs."""

from __future__ import annotations

import os
from collections.abc import Iterable

from .crypto import RlpItem, keccak256, rlp_encode
from .state import DbAccount, Log

EMPTY_TRIE_ROOT = keccak256(rlp_encode(b""))

_Nibbles = tuple[int, ...]


def _to_nibbles(key: bytes) -> _Nibbles:
    return tuple(n for byte in key for n in (byte >> 4, byte & 0x0F))


def _hex_prefix(nibbles: _Nibbles, leaf: bool) -> bytes:
    flag = 2 if leaf else 0
    if len(nibbles) % 2:
        prefixed = (flag + 1, *nibbles)
    else:
        prefixed = (flag, 0, *nibbles)
    it = iter(prefixed)
    return bytes(high << 4 | low for high, low in zip(it, it))


def _reference(node: RlpItem) -> RlpItem:
    encoded = rlp_encode(node)
    return node if len(encoded) < 32 else keccak256(encoded)


def _build(items: list[tuple[_Nibbles, bytes]], depth: int) -> RlpItem:
    if len(items) == 1:
        key, value = items[0]
        return [_hex_prefix(key[depth:], True), value]

    prefix = len(os.path.commonprefix([key[depth:] for key, _ in items]))
    if prefix:
        shared = items[0][0][depth : depth + prefix]
        return [_hex_prefix(shared, False), _reference(_build(items, depth + prefix))]

    branch: list[RlpItem] = [b""] * 17
    groups: dict[int, list[tuple[_Nibbles, bytes]]] = {}
    for key, value in items:
        if len(key) == depth:
            branch[16] = value
        else:
            groups.setdefault(key[depth], []).append((key, value))
    for nibble, group in groups.items():
        branch[nibble] = _reference(_build(group, depth + 1))
    return branch


def _trie_root(items: Iterable[tuple[bytes, bytes]]) -> bytes:
    entries = {_to_nibbles(bytes(key)): bytes(value) for key, value in items}
    if not entries:
        return EMPTY_TRIE_ROOT
    return keccak256(rlp_encode(_build(sorted(entries.items()), 0)))


def sec_trie_root(items: Iterable[tuple[bytes, bytes]]) -> bytes:
    """Root of a secure trie: keys are hashed with Keccak-256 before insertion.

    A key given more than once keeps its last value.
    """
    return _trie_root((keccak256(key), value) for key, value in items)


def trie_root(items: Iterable[tuple[bytes, bytes]]) -> bytes:
    """Root of the state trie over (address, RLP-encoded account) pairs."""
    return sec_trie_root(items)


def log_rlp_hash(logs: Iterable[Log]) -> bytes:
    """Keccak-256 of the RLP list of logs, as in block receipts."""
    encoded = rlp_encode(
        [[log.address, list(log.topics), log.data] for log in logs]
    )
    return keccak256(encoded)


def trie_account_rlp(account: DbAccount) -> bytes:
    """RLP of an account as stored in the state trie."""
    storage_root = sec_trie_root(
        (key.to_bytes(32, "big"), rlp_encode(value))
        for key, value in account.storage.items()
        if value != 0
    )
    info = account.info
    return rlp_encode([info.nonce, info.balance, storage_root, info.code_hash])


def state_merkle_trie_root(accounts: Iterable[tuple[bytes, DbAccount]]) -> bytes:
    """State root of (address, account) pairs."""
    return trie_root(
        (address, trie_account_rlp(account)) for address, account in accounts
    )