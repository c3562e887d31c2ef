"""Gas accounting for a single call frame, and the gas constants."""

from __future__ import annotations

from dataclasses import dataclass

U64_MAX = (1 << 64) - 1

ZERO = 0
BASE = 2
VERYLOW = 3
LOW = 5
MID = 8
HIGH = 10
JUMPDEST = 1
SELFDESTRUCT = 24000
CREATE = 32000
CALLVALUE = 9000
NEWACCOUNT = 25000
EXP = 10
MEMORY = 3
LOG = 375
LOGDATA = 8
LOGTOPIC = 375
SHA3 = 30
SHA3WORD = 6
COPY = 3
BLOCKHASH = 20
CODEDEPOSIT = 200

SSTORE_SET = 20000
SSTORE_RESET = 5000
REFUND_SSTORE_CLEARS = 15000

TRANSACTION_ZERO_DATA = 4
TRANSACTION_NON_ZERO_DATA_INIT = 16
TRANSACTION_NON_ZERO_DATA_FRONTIER = 68

# EIP-2929 (Berlin)
ACCESS_LIST_ADDRESS = 2400
ACCESS_LIST_STORAGE_KEY = 1900
COLD_SLOAD_COST = 2100
COLD_ACCOUNT_ACCESS_COST = 2600
WARM_STORAGE_READ_COST = 100

CALL_STIPEND = 2300


@dataclass
class Gas:
    """Gas limit, usage, memory expansion cost and refund counter."""

    limit: int
    used: int = 0
    memory: int = 0
    refunded: int = 0
    all_used_gas: int = 0

    def spend(self) -> int:
        """Total gas consumed, including memory expansion."""
        return self.all_used_gas

    def remaining(self) -> int:
        return self.limit - self.all_used_gas

    def erase_cost(self, returned: int) -> None:
        """Give back gas that a sub-call did not use."""
        if returned > self.used or returned > self.all_used_gas:
            raise ValueError("cannot return more gas than was used")
        self.used -= returned
        self.all_used_gas -= returned

    def record_refund(self, refund: int) -> None:
        self.refunded += refund

    def record_cost(self, cost: int) -> bool:
        """Charge ``cost``; return False if it exceeds the limit."""
        all_used_gas = self.all_used_gas + cost
        if all_used_gas > U64_MAX or self.limit < all_used_gas:
            return False
        self.used += cost
        self.all_used_gas = all_used_gas
        return True

    def record_memory(self, gas_memory: int) -> bool:
        """Raise the memory expansion cost; return False if out of gas."""
        if gas_memory > self.memory:
            all_used_gas = self.used + gas_memory
            if all_used_gas > U64_MAX or self.limit < all_used_gas:
                return False
            self.memory = gas_memory
            self.all_used_gas = all_used_gas
        return True

    def gas_refund(self, refund: int) -> None:
        self.refunded += refund