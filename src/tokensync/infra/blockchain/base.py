"""Abstract ledger client consumed by the ingestion pipeline."""

from abc import ABC, abstractmethod

from tokensync.events.types import LedgerBlock


class LedgerClient(ABC):
    """Source of blocks and contract interface descriptions."""

    @abstractmethod
    async def get_block_number(self) -> int:
        """Latest accepted block number."""

    @abstractmethod
    async def get_block(self, block_number: int) -> LedgerBlock:
        """Block with its receipts and their events, in execution order."""

    @abstractmethod
    async def get_contract_interface(self, address: str, block_number: int) -> list[dict]:
        """ABI entries of the contract deployed at `address` as of `block_number`."""
