from dataclasses import replace

import pytest

from evmstate.gas import Gas
from evmstate.returns import Return, settle_gas


OK = [Return.CONTINUE, Return.STOP, Return.RETURN, Return.SELF_DESTRUCT]
REVERTS = [Return.REVERT, Return.CALL_TOO_DEEP, Return.OUT_OF_FUND]


def test_pinned_codes():
    assert Return(0x00) is Return.CONTINUE
    assert Return(0x20) is Return.REVERT
    assert Return(0x50) is Return.OUT_OF_GAS


def test_unknown_code_is_rejected():
    with pytest.raises(ValueError):
        Return(0xFF)


@pytest.mark.parametrize("member", list(Return))
def test_codes_round_trip_without_aliases(member):
    assert Return(int(member)) is member


def test_error_codes_are_contiguous_after_out_of_gas():
    errors = [m for m in Return if m >= Return.OUT_OF_GAS]
    looked_up = [
        Return(value)
        for value in range(Return.OUT_OF_GAS, Return.OUT_OF_GAS + len(errors))
    ]
    assert looked_up == errors


@pytest.mark.parametrize("reason", OK)
def test_ok_reasons(reason):
    decoded = Return(int(reason))
    assert decoded.is_ok()
    assert not decoded.is_revert()


@pytest.mark.parametrize("reason", REVERTS)
def test_revert_reasons(reason):
    decoded = Return(int(reason))
    assert decoded.is_revert()
    assert not decoded.is_ok()


@pytest.mark.parametrize(
    "reason", [m for m in Return if m not in OK and m not in REVERTS]
)
def test_error_reasons_are_neither(reason):
    decoded = Return(int(reason))
    assert not decoded.is_ok()
    assert not decoded.is_revert()


def _spent_frame(limit, used, refund):
    frame = Gas(limit)
    assert frame.record_cost(used)
    frame.record_refund(refund)
    return frame


def _fully_charged(limit):
    gas = Gas(limit)
    assert gas.record_cost(limit)
    return gas


@pytest.mark.parametrize("reason", OK)
def test_settle_success_returns_gas_and_refund(reason):
    gas = _fully_charged(1000)
    frame = _spent_frame(1000, 300, 40)
    settle_gas(gas, reason, frame)
    assert gas.remaining() == frame.remaining()
    assert gas.spend() == frame.spend()
    assert gas.refunded == frame.refunded


@pytest.mark.parametrize("reason", REVERTS)
def test_settle_revert_returns_gas_without_refund(reason):
    gas = _fully_charged(1000)
    frame = _spent_frame(1000, 300, 40)
    settle_gas(gas, reason, frame)
    assert gas.remaining() == frame.remaining()
    assert gas.refunded == 0


@pytest.mark.parametrize("reason", [Return.OUT_OF_GAS, Return.INVALID_JUMP])
def test_settle_error_consumes_everything(reason):
    gas = _fully_charged(1000)
    before = replace(gas)
    settle_gas(gas, reason, _spent_frame(1000, 300, 40))
    assert gas == before
    assert gas.remaining() == 0


def test_settle_rejects_returning_more_than_used():
    gas = Gas(1000)
    assert gas.record_cost(10)
    with pytest.raises(ValueError):
        settle_gas(gas, Return.STOP, Gas(1000))