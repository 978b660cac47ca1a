"""Disambiguate colliding event signatures by probing the emitting contract's ABI."""

import logging
from collections import defaultdict

from tokensync.domain.enums import TransferKind
from tokensync.infra.blockchain.base import LedgerClient

logger = logging.getLogger(__name__)

# ERC20 emits the same `Transfer` key with the same 4-word layout; only ERC721 exposes ownerOf.
REQUIRED_ENTRY_POINTS: dict[TransferKind, frozenset[str]] = {
    TransferKind.ERC721_TRANSFER: frozenset({"ownerOf", "owner_of"}),
}


class NotAMatchCache:
    """Contracts known not to implement the interface of an event kind. Add-only."""

    def __init__(self) -> None:
        self._addresses: dict[TransferKind, set[str]] = defaultdict(set)

    def add(self, kind: TransferKind, address: str) -> None:
        self._addresses[kind].add(address)

    def __contains__(self, item: tuple[TransferKind, str]) -> bool:
        kind, address = item
        return address in self._addresses.get(kind, ())

    def __len__(self) -> int:
        return sum(len(addresses) for addresses in self._addresses.values())


def function_names(abi: list[dict]) -> set[str]:
    """Function names declared in an ABI, including those nested in Cairo 1 interfaces."""
    names: set[str] = set()
    for entry in abi:
        entry_type = entry.get("type")
        if entry_type == "function":
            names.add(entry.get("name", ""))
        elif entry_type == "interface":
            names |= function_names(entry.get("items", []))
    return names


class ContractClassifier:
    def __init__(self, ledger: LedgerClient, cache: NotAMatchCache | None = None) -> None:
        self._ledger = ledger
        self.cache = cache if cache is not None else NotAMatchCache()

    async def is_match(self, kind: TransferKind, address: str, block_number: int) -> bool:
        """True if `address` exposes the entry point `kind` requires.

        Kinds without a required entry point always match. Negative answers are
        cached for the lifetime of this classifier, positive ones are not.
        """
        required = REQUIRED_ENTRY_POINTS.get(kind)
        if required is None:
            return True
        if (kind, address) in self.cache:
            return False

        abi = await self._ledger.get_contract_interface(address, block_number)
        if function_names(abi) & required:
            return True

        logger.debug("Contract %s does not implement %s, caching", address, kind.value)
        self.cache.add(kind, address)
        return False
