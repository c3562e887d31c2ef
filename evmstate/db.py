"""State database interfaces and an in-memory caching implementation."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import replace

from .crypto import keccak256
from .state import (
    KECCAK_EMPTY,
    ZERO_HASH,
    Account,
    AccountInfo,
    AccountState,
    DbAccount,
    Log,
)

ZERO_ADDRESS = bytes(20)


class Database(ABC):
    """State source whose reads may update internal caches."""

    @abstractmethod
    def basic(self, address: bytes) -> AccountInfo | None:
        """Basic account information, or None if the account does not exist."""

    @abstractmethod
    def code_by_hash(self, code_hash: bytes) -> bytes:
        """Account code by its hash."""

    @abstractmethod
    def storage(self, address: bytes, index: int) -> int:
        """Storage value of ``address`` at ``index``."""

    @abstractmethod
    def block_hash(self, number: int) -> bytes:
        """Hash of block ``number``."""


class DatabaseRef(ABC):
    """Read-only state source."""

    @abstractmethod
    def basic_ref(self, address: bytes) -> AccountInfo | None:
        """Basic account information, or None if the account does not exist."""

    @abstractmethod
    def code_by_hash_ref(self, code_hash: bytes) -> bytes:
        """Account code by its hash."""

    @abstractmethod
    def storage_ref(self, address: bytes, index: int) -> int:
        """Storage value of ``address`` at ``index``."""

    @abstractmethod
    def block_hash_ref(self, number: int) -> bytes:
        """Hash of block ``number``."""


class DatabaseCommit(ABC):
    """State store that accepts the changes of an executed transaction."""

    @abstractmethod
    def commit(self, changes: Mapping[bytes, Account]) -> None:
        """Apply changed accounts to the store."""


class RefDBWrapper(Database):
    """Present a read-only database through the mutable interface."""

    def __init__(self, db: DatabaseRef) -> None:
        self.db = db

    def basic(self, address: bytes) -> AccountInfo | None:
        return self.db.basic_ref(address)

    def code_by_hash(self, code_hash: bytes) -> bytes:
        return self.db.code_by_hash_ref(code_hash)

    def storage(self, address: bytes, index: int) -> int:
        return self.db.storage_ref(address, index)

    def block_hash(self, number: int) -> bytes:
        return self.db.block_hash_ref(number)


class EmptyDB(DatabaseRef):
    """A database with no accounts; block hashes are derived from the number."""

    def basic_ref(self, address: bytes) -> AccountInfo | None:
        return None

    def code_by_hash_ref(self, code_hash: bytes) -> bytes:
        return b""

    def storage_ref(self, address: bytes, index: int) -> int:
        return 0

    def block_hash_ref(self, number: int) -> bytes:
        return keccak256(number.to_bytes(32, "big"))


class CacheDB(Database, DatabaseRef, DatabaseCommit):
    """Caches accounts, code and block hashes in memory over another database.

    Account entries keep ``code`` as stored; code is looked up in ``contracts``.
    """

    def __init__(self, db: DatabaseRef) -> None:
        self.accounts: dict[bytes, DbAccount] = {}
        self.contracts: dict[bytes, bytes] = {KECCAK_EMPTY: b"", ZERO_HASH: b""}
        self.logs: list[Log] = []
        self.block_hashes: dict[int, bytes] = {}
        self.db = db

    def insert_contract(self, account: AccountInfo) -> None:
        """Store the account's code and set its code hash accordingly."""
        if account.code:
            account.code_hash = keccak256(account.code)
            self.contracts.setdefault(account.code_hash, bytes(account.code))
        if account.code_hash == ZERO_HASH:
            account.code_hash = KECCAK_EMPTY

    def insert_account_info(self, address: bytes, info: AccountInfo) -> None:
        """Set account info, keeping any storage already cached."""
        info = replace(info)
        self.insert_contract(info)
        self.accounts.setdefault(address, DbAccount()).info = info

    def _load_account(self, address: bytes) -> DbAccount:
        account = self.accounts.get(address)
        if account is None:
            account = DbAccount.from_info(self.db.basic_ref(address))
            self.accounts[address] = account
        return account

    def insert_account_storage(self, address: bytes, slot: int, value: int) -> None:
        """Set one storage slot, keeping the account info."""
        self._load_account(address).storage[slot] = value

    def replace_account_storage(self, address: bytes, storage: Mapping[int, int]) -> None:
        """Replace the whole storage of an account, keeping the account info."""
        account = self._load_account(address)
        account.account_state = AccountState.STORAGE_CLEARED
        account.storage = dict(storage)

    def commit(self, changes: Mapping[bytes, Account]) -> None:
        for address, account in changes.items():
            db_account = self.accounts.setdefault(address, DbAccount())
            if account.is_destroyed:
                db_account.storage.clear()
                db_account.account_state = AccountState.NOT_EXISTING
                db_account.info = AccountInfo()
                continue
            info = replace(account.info)
            self.insert_contract(info)
            db_account.info = info
            if account.storage_cleared:
                db_account.storage.clear()
                db_account.account_state = AccountState.STORAGE_CLEARED
            else:
                db_account.account_state = AccountState.TOUCHED
            db_account.storage.update(
                (key, slot.present_value) for key, slot in account.storage.items()
            )

    def basic(self, address: bytes) -> AccountInfo | None:
        return self._load_account(address).existing_info()

    def storage(self, address: bytes, index: int) -> int:
        """Storage value at ``index``, loading the account if needed."""
        account = self.accounts.get(address)
        if account is not None:
            if index in account.storage:
                return account.storage[index]
            if account.account_state in (
                AccountState.STORAGE_CLEARED,
                AccountState.NOT_EXISTING,
            ):
                return 0
            value = self.db.storage_ref(address, index)
            account.storage[index] = value
            return value

        info = self.db.basic_ref(address)
        account = DbAccount.from_info(info)
        value = 0
        if info is not None:
            value = self.db.storage_ref(address, index)
            account.storage[index] = value
        self.accounts[address] = account
        return value

    def code_by_hash(self, code_hash: bytes) -> bytes:
        code = self.contracts.get(code_hash)
        if code is None:
            code = self.db.code_by_hash_ref(code_hash)
            self.contracts[code_hash] = code
        return code

    def block_hash(self, number: int) -> bytes:
        block_hash = self.block_hashes.get(number)
        if block_hash is None:
            block_hash = self.db.block_hash_ref(number)
            self.block_hashes[number] = block_hash
        return block_hash

    def basic_ref(self, address: bytes) -> AccountInfo | None:
        account = self.accounts.get(address)
        if account is None:
            return self.db.basic_ref(address)
        return account.existing_info()

    def storage_ref(self, address: bytes, index: int) -> int:
        account = self.accounts.get(address)
        if account is None:
            return self.db.storage_ref(address, index)
        if index in account.storage:
            return account.storage[index]
        if account.account_state in (
            AccountState.STORAGE_CLEARED,
            AccountState.NOT_EXISTING,
        ):
            return 0
        return self.db.storage_ref(address, index)

    def code_by_hash_ref(self, code_hash: bytes) -> bytes:
        code = self.contracts.get(code_hash)
        return self.db.code_by_hash_ref(code_hash) if code is None else code

    def block_hash_ref(self, number: int) -> bytes:
        block_hash = self.block_hashes.get(number)
        return self.db.block_hash_ref(number) if block_hash is None else block_hash


class InMemoryDB(CacheDB):
    """A cache over an empty database: all state lives in memory."""

    def __init__(self) -> None:
        super().__init__(EmptyDB())


class BenchmarkDB(Database):
    """Database where only the zero address exists, holding the given code."""

    def __init__(self, bytecode: bytes) -> None:
        self.bytecode = bytes(bytecode)
        self.code_hash = keccak256(self.bytecode)

    def basic(self, address: bytes) -> AccountInfo | None:
        if address == ZERO_ADDRESS:
            return AccountInfo(
                balance=10000000,
                nonce=1,
                code_hash=self.code_hash,
                code=self.bytecode,
            )
        return None

    def code_by_hash(self, code_hash: bytes) -> bytes:
        return b""

    def storage(self, address: bytes, index: int) -> int:
        return 0

    def block_hash(self, number: int) -> bytes:
        return ZERO_HASH