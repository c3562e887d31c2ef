"""Dynamic gas cost formulas of the EVM, per hard fork.

Functions returning ``int | None`` return None when the cost does not fit in
a 64-bit word or the operation may not proceed, which the caller treats as
running out of gas.
"""

from __future__ import annotations

from .gas import (
    CALL_STIPEND,
    CALLVALUE,
    COLD_ACCOUNT_ACCESS_COST,
    COLD_SLOAD_COST,
    COPY,
    CREATE,
    EXP,
    LOG,
    LOGDATA,
    LOGTOPIC,
    MEMORY,
    NEWACCOUNT,
    ACCESS_LIST_STORAGE_KEY,
    REFUND_SSTORE_CLEARS,
    SHA3,
    SHA3WORD,
    SSTORE_RESET,
    SSTORE_SET,
    U64_MAX,
    VERYLOW,
    WARM_STORAGE_READ_COST,
)
from .specs import SpecId


def _checked(value: int) -> int | None:
    return value if value <= U64_MAX else None


def _saturate(value: int) -> int:
    return min(value, U64_MAX)


def _words(length: int) -> int:
    return -(-length // 32)


def sstore_refund(spec: SpecId, original: int, current: int, new: int) -> int:
    """Refund (possibly negative) for an SSTORE."""
    if not spec.enabled(SpecId.ISTANBUL):
        return REFUND_SSTORE_CLEARS if current != 0 and new == 0 else 0

    # EIP-3529: Reduction in refunds
    if spec.enabled(SpecId.LONDON):
        clears_schedule = SSTORE_RESET - COLD_SLOAD_COST + ACCESS_LIST_STORAGE_KEY
    else:
        clears_schedule = REFUND_SSTORE_CLEARS

    if current == new:
        return 0
    if original == current and new == 0:
        return clears_schedule

    refund = 0
    if original != 0:
        if current == 0:
            refund -= clears_schedule
        elif new == 0:
            refund += clears_schedule

    if original == new:
        if spec.enabled(SpecId.BERLIN):
            sstore_reset, sload = SSTORE_RESET - COLD_SLOAD_COST, WARM_STORAGE_READ_COST
        else:
            sstore_reset, sload = SSTORE_RESET, sload_cost(spec, False)
        if original == 0:
            refund += SSTORE_SET - sload
        else:
            refund += sstore_reset - sload
    return refund


def create2_cost(length: int) -> int | None:
    return _checked(CREATE + SHA3WORD * _words(length))


def exp_cost(spec: SpecId, power: int) -> int | None:
    if power == 0:
        return EXP
    # EIP-160: EXP cost increase
    gas_byte = 50 if spec.enabled(SpecId.SPURIOUS_DRAGON) else 10
    log2floor = power.bit_length() - 1
    return _checked(EXP + gas_byte * (log2floor // 8 + 1))


def verylowcopy_cost(length: int) -> int | None:
    return _checked(VERYLOW + COPY * _words(length))


def extcodecopy_cost(spec: SpecId, length: int, is_cold: bool) -> int | None:
    if spec.enabled(SpecId.BERLIN) and is_cold:
        # the warm read cost is charged separately
        base_gas = COLD_ACCOUNT_ACCESS_COST - WARM_STORAGE_READ_COST
    else:
        base_gas = 0
    return _checked(base_gas + COPY * _words(length))


def account_access_gas(spec: SpecId, is_cold: bool) -> int:
    if spec.enabled(SpecId.BERLIN):
        return COLD_ACCOUNT_ACCESS_COST if is_cold else WARM_STORAGE_READ_COST
    if spec.enabled(SpecId.ISTANBUL):
        return 700
    return 20


def log_cost(n: int, length: int) -> int | None:
    return _checked(LOG + LOGDATA * length + LOGTOPIC * n)


def sha3_cost(length: int) -> int | None:
    return _checked(SHA3 + SHA3WORD * _words(length))


def sload_cost(spec: SpecId, is_cold: bool) -> int:
    if spec.enabled(SpecId.BERLIN):
        return COLD_SLOAD_COST if is_cold else WARM_STORAGE_READ_COST
    if spec.enabled(SpecId.ISTANBUL):
        # EIP-1884: Repricing for trie-size-dependent opcodes
        return 800
    if spec.enabled(SpecId.TANGERINE):
        # EIP-150: Gas cost changes for IO-heavy operations
        return 200
    return 50


def sstore_cost(
    spec: SpecId, original: int, current: int, new: int, gas: int, is_cold: bool
) -> int | None:
    """Cost of an SSTORE, or None if the remaining gas forbids it (EIP-1706)."""
    if spec.enabled(SpecId.BERLIN):
        gas_sload, gas_sstore_reset = WARM_STORAGE_READ_COST, SSTORE_RESET - COLD_SLOAD_COST
    else:
        gas_sload, gas_sstore_reset = sload_cost(spec, is_cold), SSTORE_RESET

    if spec.enabled(SpecId.ISTANBUL):
        if gas <= CALL_STIPEND:
            return None
        if new == current:
            cost = gas_sload
        elif original == current:
            cost = SSTORE_SET if original == 0 else gas_sstore_reset
        else:
            cost = gas_sload
    elif current == 0 and new != 0:
        cost = SSTORE_SET
    else:
        cost = gas_sstore_reset

    # EIP-2929: extra charge for a slot not yet touched in this transaction
    if spec.enabled(SpecId.BERLIN) and is_cold:
        cost += COLD_SLOAD_COST
    return cost


def selfdestruct_cost(
    spec: SpecId, had_value: bool, target_exists: bool, is_cold: bool
) -> int:
    # EIP-161: State trie clearing
    if spec.enabled(SpecId.SPURIOUS_DRAGON):
        charge_topup = had_value and not target_exists
    else:
        charge_topup = not target_exists

    tangerine = spec.enabled(SpecId.TANGERINE)
    gas = (5000 if tangerine else 0) + (25000 if tangerine and charge_topup else 0)
    if spec.enabled(SpecId.BERLIN) and is_cold:
        gas += COLD_ACCOUNT_ACCESS_COST
    return gas


def call_cost(
    spec: SpecId,
    value: int,
    is_new: bool,
    is_cold: bool,
    is_call_or_callcode: bool,
    is_call_or_staticcall: bool,
) -> int:
    transfers_value = value != 0

    if spec.enabled(SpecId.BERLIN):
        call_gas = COLD_ACCOUNT_ACCESS_COST if is_cold else WARM_STORAGE_READ_COST
    elif spec.enabled(SpecId.TANGERINE):
        call_gas = 700
    else:
        call_gas = 40

    xfer = CALLVALUE if is_call_or_callcode and transfers_value else 0

    new_account = 0
    if is_call_or_staticcall:
        if spec.enabled(SpecId.SPURIOUS_DRAGON):
            if transfers_value and is_new:
                new_account = NEWACCOUNT
        elif is_new:
            new_account = NEWACCOUNT

    return call_gas + xfer + new_account


def hot_cold_cost(spec: SpecId, is_cold: bool, regular_value: int) -> int:
    if spec.enabled(SpecId.BERLIN):
        return COLD_ACCOUNT_ACCESS_COST if is_cold else WARM_STORAGE_READ_COST
    return regular_value


def memory_gas(a: int) -> int:
    """Memory cost for ``a`` words, saturating at the 64-bit maximum."""
    linear = _saturate(MEMORY * a)
    quadratic = _saturate(a * a) // 512
    return _saturate(linear + quadratic)