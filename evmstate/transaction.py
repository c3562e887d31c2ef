"""Transaction-level checks and gas rules applied around execution."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .gas import (
    ACCESS_LIST_ADDRESS,
    ACCESS_LIST_STORAGE_KEY,
    TRANSACTION_NON_ZERO_DATA_FRONTIER,
    TRANSACTION_NON_ZERO_DATA_INIT,
    TRANSACTION_ZERO_DATA,
)
from .returns import Return
from .specs import SpecId

_TX_BASE = 21000
# EIP-2: Homestead contract creation cost
_TX_CREATE_HOMESTEAD = 53000


def intrinsic_gas(
    spec: SpecId,
    data: bytes,
    is_create: bool,
    access_list: Iterable[tuple[bytes, Sequence[int]]] = (),
) -> int:
    """Gas charged before any code runs: base cost, calldata and access list."""
    zero = data.count(0)
    non_zero = len(data) - zero

    if is_create and spec.enabled(SpecId.HOMESTEAD):
        base = _TX_CREATE_HOMESTEAD
    else:
        base = _TX_BASE

    # EIP-2028: Transaction data gas cost reduction
    if spec.enabled(SpecId.ISTANBUL):
        non_zero_cost = TRANSACTION_NON_ZERO_DATA_INIT
    else:
        non_zero_cost = TRANSACTION_NON_ZERO_DATA_FRONTIER

    accounts = slots = 0
    if spec.enabled(SpecId.BERLIN):
        for _address, keys in access_list:
            accounts += 1
            slots += len(keys)

    return (
        base
        + zero * TRANSACTION_ZERO_DATA
        + non_zero * non_zero_cost
        + accounts * ACCESS_LIST_ADDRESS
        + slots * ACCESS_LIST_STORAGE_KEY
    )


def max_refund(spec: SpecId, refunded: int, spend: int) -> int:
    """Refund actually paid back: capped at a share of the gas spent (EIP-3529)."""
    quotient = 5 if spec.enabled(SpecId.LONDON) else 2
    return min(refunded, spend // quotient)


def coinbase_gas_price(spec: SpecId, effective_gas_price: int, basefee: int) -> int:
    """Price per gas paid to the block's coinbase; the basefee is burnt (EIP-1559)."""
    if spec.enabled(SpecId.LONDON):
        return max(effective_gas_price - basefee, 0)
    return effective_gas_price


def check_transaction(
    spec: SpecId,
    gas_limit: int,
    gas_price: int,
    gas_priority_fee: int | None,
    effective_gas_price: int,
    basefee: int,
    block_gas_limit: int,
) -> Return | None:
    """Return the exit reason that rejects the transaction, or None if it may run."""
    if spec.enabled(SpecId.LONDON):
        if gas_priority_fee is not None and gas_priority_fee > gas_price:
            return Return.GAS_MAX_FEE_GREATER_THAN_PRIORITY_FEE
        if effective_gas_price < basefee:
            return Return.GAS_PRICE_LESS_THEN_BASEFEE
    if gas_limit > block_gas_limit:
        return Return.CALLER_GAS_LIMIT_MORE_THEN_BLOCK
    return None