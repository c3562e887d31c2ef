# evmstate

Building blocks for working with Ethereum execution state in Python: hard-fork
rules, gas accounting, Keccak-256 and RLP, Merkle Patricia state roots, and an
in-memory state database.

## Modules

- `evmstate.specs`: `SpecId`, the hard forks in activation order, with
  `SpecId.enabled(other)` telling whether a fork is active; `SpecName`, the fork
  names used in the `post` section of state-test fixtures, with
  `SpecName.to_spec_id()`. `Constantinople` and `ByzantiumToConstantinopleAt5`
  have no mapping and raise `ValueError`.
- `evmstate.gas`: the `Gas` meter of a call frame (`record_cost`,
  `record_memory`, `erase_cost`, `record_refund`, `spend`, `remaining`) and the
  gas constants (`SSTORE_SET`, `COLD_SLOAD_COST`, `CALL_STIPEND`, ...).
- `evmstate.gascost`: per-fork cost formulas: `sstore_cost`, `sstore_refund`,
  `sload_cost`, `call_cost`, `selfdestruct_cost`, `exp_cost`, `sha3_cost`,
  `log_cost`, `create2_cost`, `verylowcopy_cost`, `extcodecopy_cost`,
  `account_access_gas`, `hot_cold_cost` and `memory_gas`. Functions that can
  overflow return `None` when the cost does not fit in 64 bits.
- `evmstate.returns`: the `Return` exit-reason enum with `is_ok()` and
  `is_revert()`, and `settle_gas`, which gives a frame's unused gas (and, on
  success, its refund) back to the transaction's `Gas`.
- `evmstate.transaction`: `check_transaction` (the exit reason that rejects a
  transaction, or `None`), `intrinsic_gas`, `max_refund` and
  `coinbase_gas_price`.
- `evmstate.crypto`: `keccak256` and `rlp_encode` (bytes, non-negative
  integers and nested lists of them).
- `evmstate.address`: `create_address` (CREATE) and `create2_address`
  (CREATE2).
- `evmstate.state`: `AccountInfo`, `AccountState`, `DbAccount`,
  `StorageSlot`, `Account` and `Log`, plus `KECCAK_EMPTY`.
- `evmstate.trie`: `sec_trie_root`, `trie_root`, `trie_account_rlp`,
  `state_merkle_trie_root` and `log_rlp_hash`.
- `evmstate.db`: the `Database`, `DatabaseRef` and `DatabaseCommit`
  interfaces, `RefDBWrapper`, and the backends `CacheDB`, `InMemoryDB`
  (a `CacheDB` over `EmptyDB`), `EmptyDB` and `BenchmarkDB`.
- `evmstate.deserializer`: `parse_u64`, `parse_u256`, `parse_bytes`,
  `parse_bytes_list`, `parse_optional_address` and `parse_optional_bytes` for
  the hex and decimal strings found in state-test JSON. Malformed or
  out-of-range input raises `ValueError`.

Addresses and hashes are `bytes` (20 and 32 bytes); numbers are `int`.

## Installation

```
pip install .
```

## Example

```python
from evmstate.db import InMemoryDB
from evmstate.gascost import sload_cost
from evmstate.specs import SpecId
from evmstate.state import AccountInfo
from evmstate.trie import state_merkle_trie_root

address = bytes(19) + b"\x2a"

db = InMemoryDB()
db.insert_account_info(address, AccountInfo(nonce=42))
db.insert_account_storage(address, 123, 456)
assert db.storage(address, 123) == 456
assert db.basic(address).nonce == 42

root = state_merkle_trie_root(db.accounts.items())
assert len(root) == 32

assert SpecId.LONDON.enabled(SpecId.BERLIN)
assert sload_cost(SpecId.BERLIN, True) == 2100
```

`CacheDB.basic`, `storage`, `code_by_hash` and `block_hash` cache what they
read from the underlying database; the `*_ref` variants read without caching.
`CacheDB.commit` applies a mapping of address to `Account`.

## What this package does not do

There is no bytecode interpreter and no transaction executor: the package
provides the gas rules, checks, state records and databases around execution,
but does not run contract code. There is also no command-line tool for running
state-test suites; the deserializer parses individual fixture values only.

## Running the tests

```
pip install .[test]
pytest
```