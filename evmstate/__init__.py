"""Ethereum state primitives: fork specs, gas rules, RLP, tries and state databases."""

__version__ = "0.1.0"

__all__ = [
    "address",
    "crypto",
    "db",
    "deserializer",
    "gas",
    "gascost",
    "returns",
    "specs",
    "state",
    "transaction",
    "trie",
]