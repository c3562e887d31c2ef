"""Exit reasons of EVM execution and how they settle a caller's gas."""

from __future__ import annotations

from enum import IntEnum

from .gas import Gas


class Return(IntEnum):
    """Why execution of a frame or transaction stopped."""

    # success codes
    CONTINUE = 0x00
    STOP = 0x01
    RETURN = 0x02
    SELF_DESTRUCT = 0x03

    # revert codes
    REVERT = 0x20
    CALL_TOO_DEEP = 0x21
    OUT_OF_FUND = 0x22

    # error codes
    OUT_OF_GAS = 0x50
    OPCODE_NOT_FOUND = 0x51
    CALL_NOT_ALLOWED_INSIDE_STATIC = 0x52
    INVALID_OPCODE = 0x53
    INVALID_JUMP = 0x54
    INVALID_MEMORY_RANGE = 0x55
    NOT_ACTIVATED = 0x56
    STACK_UNDERFLOW = 0x57
    STACK_OVERFLOW = 0x58
    OUT_OF_OFFSET = 0x59
    FATAL_EXTERNAL_ERROR = 0x5A
    GAS_MAX_FEE_GREATER_THAN_PRIORITY_FEE = 0x5B
    GAS_PRICE_LESS_THEN_BASEFEE = 0x5C
    CALLER_GAS_LIMIT_MORE_THEN_BLOCK = 0x5D
    # EIP-3607: reject transactions from senders with deployed code
    REJECT_CALLER_WITH_CODE = 0x5E
    LACK_OF_FUND_FOR_GAS_LIMIT = 0x5F
    CREATE_COLLISION = 0x60
    OVERFLOW_PAYMENT = 0x61
    PRECOMPILE_ERROR = 0x62
    NONCE_OVERFLOW = 0x63
    # init code returned code larger than the limit
    CREATE_CONTRACT_LIMIT = 0x64
    # created contract code begins with 0xEF
    CREATE_CONTRACT_WITH_EF = 0x65

    def is_ok(self) -> bool:
        """True for the successful exit reasons."""
        return self in _OK

    def is_revert(self) -> bool:
        """True for exits that revert state but return unused gas."""
        return self in _REVERT


_OK = frozenset({Return.CONTINUE, Return.STOP, Return.RETURN, Return.SELF_DESTRUCT})
_REVERT = frozenset({Return.REVERT, Return.CALL_TOO_DEEP, Return.OUT_OF_FUND})


def settle_gas(gas: Gas, exit_reason: Return, returned_gas: Gas) -> None:
    """Apply the outcome of a top-level call or create to the transaction gas.

    On success the unused gas is given back and the refund is recorded; on a
    revert only the unused gas is given back; on any other error all gas is
    consumed and ``gas`` is left unchanged.
    """
    if exit_reason.is_ok():
        gas.erase_cost(returned_gas.remaining())
        gas.record_refund(returned_gas.refunded)
    elif exit_reason.is_revert():
        gas.erase_cost(returned_gas.remaining())