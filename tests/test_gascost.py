import pytest

from evmstate import gascost
from evmstate.gas import (
    CALL_STIPEND,
    CALLVALUE,
    COLD_ACCOUNT_ACCESS_COST,
    COLD_SLOAD_COST,
    ACCESS_LIST_STORAGE_KEY,
    COPY,
    CREATE,
    EXP,
    LOG,
    LOGDATA,
    LOGTOPIC,
    NEWACCOUNT,
    REFUND_SSTORE_CLEARS,
    SHA3,
    SHA3WORD,
    SSTORE_RESET,
    SSTORE_SET,
    U64_MAX,
    VERYLOW,
    WARM_STORAGE_READ_COST,
)
from evmstate.specs import SpecId


def test_sstore_refund_pre_istanbul():
    assert gascost.sstore_refund(SpecId.BYZANTIUM, 5, 5, 0) == REFUND_SSTORE_CLEARS
    assert gascost.sstore_refund(SpecId.BYZANTIUM, 5, 0, 0) == 0


def test_sstore_refund_london_clear():
    expected = SSTORE_RESET - COLD_SLOAD_COST + ACCESS_LIST_STORAGE_KEY
    assert gascost.sstore_refund(SpecId.LONDON, 7, 7, 0) == expected
    assert gascost.sstore_refund(SpecId.ISTANBUL, 7, 7, 0) == REFUND_SSTORE_CLEARS


def test_sstore_refund_no_change():
    assert gascost.sstore_refund(SpecId.BERLIN, 1, 2, 2) == 0


def test_sstore_refund_restore_original_berlin():
    # dirty slot set back to its zero original
    assert gascost.sstore_refund(SpecId.BERLIN, 0, 3, 0) == SSTORE_SET - WARM_STORAGE_READ_COST


def test_create2_cost_rounds_up_words():
    assert gascost.create2_cost(0) == CREATE
    assert gascost.create2_cost(1) == CREATE + SHA3WORD
    assert gascost.create2_cost(32) == gascost.create2_cost(1)
    assert gascost.create2_cost(33) == CREATE + 2 * SHA3WORD


def test_exp_cost():
    assert gascost.exp_cost(SpecId.LONDON, 0) == EXP
    assert gascost.exp_cost(SpecId.SPURIOUS_DRAGON, 255) == EXP + 50
    assert gascost.exp_cost(SpecId.SPURIOUS_DRAGON, 256) == EXP + 100
    assert gascost.exp_cost(SpecId.HOMESTEAD, 1) == EXP + 10


def test_copy_and_sha3_costs():
    assert gascost.verylowcopy_cost(0) == VERYLOW
    assert gascost.verylowcopy_cost(31) == VERYLOW + COPY
    assert gascost.sha3_cost(64) == SHA3 + 2 * SHA3WORD


def test_extcodecopy_cost():
    assert gascost.extcodecopy_cost(SpecId.ISTANBUL, 32, True) == COPY
    assert (
        gascost.extcodecopy_cost(SpecId.BERLIN, 32, True)
        == COLD_ACCOUNT_ACCESS_COST - WARM_STORAGE_READ_COST + COPY
    )


def test_overflow_returns_none():
    assert gascost.log_cost(0, U64_MAX) is None
    assert gascost.sha3_cost(U64_MAX) is None


def test_log_cost():
    assert gascost.log_cost(2, 10) == LOG + 10 * LOGDATA + 2 * LOGTOPIC


@pytest.mark.parametrize(
    "spec, cold, expected",
    [
        (SpecId.BERLIN, True, COLD_ACCOUNT_ACCESS_COST),
        (SpecId.BERLIN, False, WARM_STORAGE_READ_COST),
        (SpecId.ISTANBUL, True, 700),
        (SpecId.FRONTIER, True, 20),
    ],
)
def test_account_access_gas(spec, cold, expected):
    assert gascost.account_access_gas(spec, cold) == expected


@pytest.mark.parametrize(
    "spec, cold, expected",
    [
        (SpecId.BERLIN, True, COLD_SLOAD_COST),
        (SpecId.LONDON, False, WARM_STORAGE_READ_COST),
        (SpecId.ISTANBUL, True, 800),
        (SpecId.TANGERINE, True, 200),
        (SpecId.HOMESTEAD, True, 50),
    ],
)
def test_sload_cost(spec, cold, expected):
    assert gascost.sload_cost(spec, cold) == expected


def test_sstore_cost_stipend_guard():
    assert gascost.sstore_cost(SpecId.ISTANBUL, 0, 0, 1, CALL_STIPEND, False) is None
    assert gascost.sstore_cost(SpecId.ISTANBUL, 0, 0, 1, CALL_STIPEND + 1, False) == SSTORE_SET


def test_sstore_cost_berlin_cold_surcharge():
    warm = gascost.sstore_cost(SpecId.BERLIN, 1, 1, 2, 100000, False)
    cold = gascost.sstore_cost(SpecId.BERLIN, 1, 1, 2, 100000, True)
    assert warm == SSTORE_RESET - COLD_SLOAD_COST
    assert cold - warm == COLD_SLOAD_COST


def test_sstore_cost_frontier():
    assert gascost.sstore_cost(SpecId.FRONTIER, 0, 0, 5, 0, False) == SSTORE_SET
    assert gascost.sstore_cost(SpecId.FRONTIER, 0, 5, 0, 0, False) == SSTORE_RESET


def test_selfdestruct_cost():
    assert gascost.selfdestruct_cost(SpecId.FRONTIER, True, False, True) == 0
    assert gascost.selfdestruct_cost(SpecId.TANGERINE, False, False, False) == 5000 + 25000
    assert gascost.selfdestruct_cost(SpecId.SPURIOUS_DRAGON, False, False, False) == 5000
    assert (
        gascost.selfdestruct_cost(SpecId.BERLIN, True, False, True)
        == 5000 + 25000 + COLD_ACCOUNT_ACCESS_COST
    )


def test_call_cost():
    assert gascost.call_cost(SpecId.BERLIN, 0, False, True, True, True) == COLD_ACCOUNT_ACCESS_COST
    assert gascost.call_cost(SpecId.FRONTIER, 1, True, False, True, True) == 40 + CALLVALUE + NEWACCOUNT
    assert gascost.call_cost(SpecId.SPURIOUS_DRAGON, 0, True, False, True, True) == 700


def test_hot_cold_cost():
    assert gascost.hot_cold_cost(SpecId.ISTANBUL, True, 123) == 123
    assert gascost.hot_cold_cost(SpecId.BERLIN, False, 123) == WARM_STORAGE_READ_COST


def test_memory_gas():
    assert gascost.memory_gas(0) == 0
    assert gascost.memory_gas(U64_MAX) == U64_MAX
    assert gascost.memory_gas(2) < gascost.memory_gas(3)