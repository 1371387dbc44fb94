"""Exception types raised by the scaffolding toolkit."""

from __future__ import annotations


class HubError(Exception):
    """Base class for all errors raised by ``fhevm_hub``."""


class UnknownEntryError(HubError):
    """Raised when a name is not present in the registry being queried."""

    def __init__(self, kind: str, name: str) -> None:
        self.kind = kind
        self.name = name
        super().__init__(f"Unknown {kind}: {name}")
