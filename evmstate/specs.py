"""Hard-fork identifiers and the names used for them in state test fixtures."""

from __future__ import annotations

from enum import Enum, IntEnum


class SpecId(IntEnum):
    """Ethereum hard forks, ordered by activation."""

    FRONTIER = 0
    FRONTIER_THAWING = 1
    HOMESTEAD = 2
    DAO_FORK = 3
    TANGERINE = 4
    SPURIOUS_DRAGON = 5
    BYZANTIUM = 6
    CONSTANTINOPLE = 7
    PETERSBURG = 8
    ISTANBUL = 9
    MUIR_GLACIER = 10
    BERLIN = 11
    LONDON = 12
    ARROW_GLACIER = 13
    GRAY_GLACIER = 14
    MERGE = 15
    LATEST = 16

    def enabled(self, other: SpecId) -> bool:
        """Return True if the fork ``other`` is active under this fork."""
        return self >= other


class SpecName(Enum):
    """Fork names as they appear in the ``post`` section of state tests."""

    Frontier = "Frontier"
    FrontierToHomesteadAt5 = "FrontierToHomesteadAt5"
    Homestead = "Homestead"
    HomesteadToDaoAt5 = "HomesteadToDaoAt5"
    HomesteadToEIP150At5 = "HomesteadToEIP150At5"
    EIP150 = "EIP150"
    EIP158 = "EIP158"
    EIP158ToByzantiumAt5 = "EIP158ToByzantiumAt5"
    Byzantium = "Byzantium"
    ByzantiumToConstantinopleAt5 = "ByzantiumToConstantinopleAt5"
    ByzantiumToConstantinopleFixAt5 = "ByzantiumToConstantinopleFixAt5"
    Constantinople = "Constantinople"
    ConstantinopleFix = "ConstantinopleFix"
    Istanbul = "Istanbul"
    Berlin = "Berlin"
    BerlinToLondonAt5 = "BerlinToLondonAt5"
    London = "London"
    Merge = "Merge"

    def to_spec_id(self) -> SpecId:
        """Map the fixture name to the fork it is executed under."""
        try:
            return _SPEC_IDS[self]
        except KeyError:
            raise ValueError(f"{self.value} is overridden with PETERSBURG") from None


_SPEC_IDS = {
    SpecName.Frontier: SpecId.FRONTIER,
    SpecName.Homestead: SpecId.HOMESTEAD,
    SpecName.FrontierToHomesteadAt5: SpecId.HOMESTEAD,
    SpecName.EIP150: SpecId.TANGERINE,
    SpecName.HomesteadToDaoAt5: SpecId.TANGERINE,
    SpecName.HomesteadToEIP150At5: SpecId.TANGERINE,
    SpecName.EIP158: SpecId.SPURIOUS_DRAGON,
    SpecName.Byzantium: SpecId.BYZANTIUM,
    SpecName.EIP158ToByzantiumAt5: SpecId.BYZANTIUM,
    SpecName.ConstantinopleFix: SpecId.PETERSBURG,
    SpecName.ByzantiumToConstantinopleFixAt5: SpecId.PETERSBURG,
    SpecName.Istanbul: SpecId.ISTANBUL,
    SpecName.Berlin: SpecId.BERLIN,
    SpecName.London: SpecId.LONDON,
    SpecName.BerlinToLondonAt5: SpecId.LONDON,
    SpecName.Merge: SpecId.MERGE,
}