"""Apply decoded transfer records to persisted ownership and balance state."""

import logging
from typing import assert_never

from sqlalchemy.ext.asyncio import AsyncSession

from tokensync.db.repos.balance_repo import BalanceRepo
from tokensync.db.repos.metadata_repo import MetadataRepo
from tokensync.db.repos.ownership_repo import OwnershipRepo
from tokensync.domain.enums import TokenStandard
from tokensync.events.types import (
    ZERO_ADDRESS,
    BalanceTransfer,
    BatchBalanceTransfer,
    OwnershipTransfer,
    TransferRecord,
)
from tokensync.exceptions import NegativeBalanceError, OwnershipMismatchError

logger = logging.getLogger(__name__)


class StateReconciler:
    """Mutates state inside the caller's session; the caller owns commit/rollback.

    ERC721 transfers overwrite the recorded owner. Whether the event's `from`
    must match the currently recorded owner is controlled by
    `verify_previous_owner`: off by default (mismatches are only logged),
    on raises OwnershipMismatchError. Mints (from the zero address) are
    never checked.
    """

    def __init__(self, session: AsyncSession, verify_previous_owner: bool = False) -> None:
        self._owners = OwnershipRepo(session)
        self._balances = BalanceRepo(session)
        self._metadata = MetadataRepo(session)
        self.verify_previous_owner = verify_previous_owner

    async def apply(self, record: TransferRecord) -> None:
        if isinstance(record, OwnershipTransfer):
            await self.apply_ownership(record)
        elif isinstance(record, BalanceTransfer):
            await self.apply_balance(record)
        elif isinstance(record, BatchBalanceTransfer):
            for single in record.singles():
                await self.apply_balance(single)
        else:
            assert_never(record)

    async def apply_ownership(self, record: OwnershipTransfer) -> None:
        token_id = record.token_id.value
        await self._register(record.contract, token_id, record.kind.standard, record.block_number)

        current = await self._owners.get(record.contract, token_id)
        if current is not None and record.from_address != ZERO_ADDRESS and current.owner != record.from_address:
            if self.verify_previous_owner:
                raise OwnershipMismatchError(record.contract, token_id, record.from_address, current.owner)
            logger.warning(
                "Token %d on %s recorded owner %s but transfer is from %s (block %d), overwriting",
                token_id, record.contract, current.owner, record.from_address, record.block_number,
            )

        await self._owners.set_owner(record.contract, token_id, record.to_address, record.block_number)

    async def apply_balance(self, record: BalanceTransfer) -> None:
        token_id = record.token_id.value
        amount = record.amount.value
        await self._register(record.contract, token_id, record.kind.standard, record.block_number)

        if record.from_address != ZERO_ADDRESS:
            balance = await self._balances.get_amount(record.contract, token_id, record.from_address)
            if balance < amount:
                raise NegativeBalanceError(record.contract, token_id, record.from_address, balance, amount)
            await self._balances.set_amount(
                record.contract, token_id, record.from_address, balance - amount, record.block_number,
            )

        if record.to_address != ZERO_ADDRESS:
            balance = await self._balances.get_amount(record.contract, token_id, record.to_address)
            await self._balances.set_amount(
                record.contract, token_id, record.to_address, balance + amount, record.block_number,
            )

    async def _register(self, contract: str, token_id: int, standard: TokenStandard, block_number: int) -> None:
        await self._metadata.ensure_contract(contract, standard.value, block_number)
        await self._metadata.ensure_token(contract, token_id, block_number)
