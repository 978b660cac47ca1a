"""Core data types for the event pipeline."""

from typing import Annotated, Any, Iterator, Literal, Union

from pydantic import BaseModel, Field, field_validator

from tokensync.domain.enums import TransferKind
from tokensync.events.uint256 import Uint256

ZERO_ADDRESS = "0x0"


def to_hex(value: int | str) -> str:
    """Normalize a field element to lowercase 0x-hex without leading zeros."""
    if isinstance(value, str):
        value = int(value, 16)
    return hex(value)


def _to_felt(value: Any) -> int:
    if isinstance(value, str):
        return int(value, 16)
    return int(value)


class RawEvent(BaseModel):
    """An event as emitted by the ledger. `keys` and `data` are field elements."""

    model_config = {"frozen": True}

    from_address: str
    block_number: int
    keys: tuple[int, ...] = ()
    data: tuple[int, ...] = ()
    transaction_hash: str | None = None

    @field_validator("from_address", mode="before")
    @classmethod
    def normalize_address(cls, v: Any) -> str:
        return to_hex(v)

    @field_validator("keys", "data", mode="before")
    @classmethod
    def parse_felts(cls, v: Any) -> tuple[int, ...]:
        return tuple(_to_felt(x) for x in v)


class Receipt(BaseModel):
    transaction_hash: str
    execution_status: str = "SUCCEEDED"
    events: list[RawEvent] = []


class LedgerBlock(BaseModel):
    """One block as returned by the ledger client, receipts in execution order."""

    block_number: int
    block_hash: str | None = None
    receipts: list[Receipt] = []

    def iter_events(self) -> Iterator[RawEvent]:
        """Yield events in emission order. Reverted transactions emit nothing."""
        for receipt in self.receipts:
            if receipt.execution_status == "REVERTED":
                continue
            yield from receipt.events


class OwnershipTransfer(BaseModel):
    """ERC721 `Transfer`: the token's single owner becomes `to_address`."""

    kind: Literal[TransferKind.ERC721_TRANSFER] = TransferKind.ERC721_TRANSFER
    contract: str
    token_id: Uint256
    from_address: str
    to_address: str
    block_number: int


class BalanceTransfer(BaseModel):
    """ERC1155 `TransferSingle`: move `amount` of `token_id` between balances."""

    kind: Literal[TransferKind.ERC1155_TRANSFER_SINGLE] = TransferKind.ERC1155_TRANSFER_SINGLE
    contract: str
    token_id: Uint256
    from_address: str
    to_address: str
    amount: Uint256
    block_number: int


class BatchBalanceTransfer(BaseModel):
    """ERC1155 `TransferBatch`: ordered (token_id, amount) pairs sharing sender and recipient."""

    kind: Literal[TransferKind.ERC1155_TRANSFER_BATCH] = TransferKind.ERC1155_TRANSFER_BATCH
    contract: str
    from_address: str
    to_address: str
    transfers: list[tuple[Uint256, Uint256]]
    block_number: int

    def singles(self) -> list[BalanceTransfer]:
        return [
            BalanceTransfer(
                contract=self.contract,
                token_id=token_id,
                from_address=self.from_address,
                to_address=self.to_address,
                amount=amount,
                block_number=self.block_number,
            )
            for token_id, amount in self.transfers
        ]


TransferRecord = Annotated[
    Union[OwnershipTransfer, BalanceTransfer, BatchBalanceTransfer],
    Field(discriminator="kind"),
]
