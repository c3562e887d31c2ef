"""Account records held by the state database and produced by execution."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum

from .crypto import keccak256

KECCAK_EMPTY = keccak256(b"")
ZERO_HASH = bytes(32)


@dataclass
class AccountInfo:
    """Balance, nonce and code of an account."""

    balance: int = 0
    nonce: int = 0
    code_hash: bytes = KECCAK_EMPTY
    code: bytes | None = b""

    def is_empty(self) -> bool:
        """True when the account has no balance, no nonce and no code."""
        code_empty = self.code_hash in (KECCAK_EMPTY, ZERO_HASH)
        return self.balance == 0 and self.nonce == 0 and code_empty


class AccountState(Enum):
    """What the EVM has done to a cached account."""

    # Before Spurious Dragon an empty account differs from a missing one.
    NOT_EXISTING = "not_existing"
    # Touched; under newer forks an empty touched account may be removed.
    TOUCHED = "touched"
    # Storage was cleared (mostly by selfdestruct); missing slots read as zero.
    STORAGE_CLEARED = "storage_cleared"
    # Not interacted with.
    NONE = "none"


@dataclass
class DbAccount:
    """An account as cached by the in-memory database."""

    info: AccountInfo = field(default_factory=AccountInfo)
    account_state: AccountState = AccountState.NONE
    storage: dict[int, int] = field(default_factory=dict)

    @staticmethod
    def new_not_existing() -> DbAccount:
        return DbAccount(account_state=AccountState.NOT_EXISTING)

    @staticmethod
    def from_info(info: AccountInfo | None) -> DbAccount:
        """Wrap ``info``; None yields an account marked as not existing."""
        if info is None:
            return DbAccount.new_not_existing()
        return DbAccount(info=info, account_state=AccountState.NONE)

    def existing_info(self) -> AccountInfo | None:
        """A copy of the account info, or None if the account does not exist."""
        if self.account_state is AccountState.NOT_EXISTING:
            return None
        return replace(self.info)


@dataclass
class StorageSlot:
    """Value of a storage slot at transaction start and now."""

    original_value: int = 0
    present_value: int = 0


@dataclass
class Account:
    """An account changed by a transaction, ready to be committed."""

    info: AccountInfo = field(default_factory=AccountInfo)
    storage: dict[int, StorageSlot] = field(default_factory=dict)
    storage_cleared: bool = False
    is_destroyed: bool = False
    is_touched: bool = False


@dataclass(frozen=True)
class Log:
    """A log entry emitted by a contract."""

    address: bytes
    topics: tuple[bytes, ...] = ()
    data: bytes = b""

    def __post_init__(self) -> None:
        object.__setattr__(self, "topics", tuple(self.topics))