from sqlalchemy import delete, update
from sqlalchemy.ext.asyncio import AsyncSession

from tokensync.db.models.balance import Erc1155Balance
from tokensync.db.models.contract import ContractMetadata, TokenMetadata
from tokensync.db.models.ownership import Erc721Owner
from tokensync.db.models.sync_state import SyncState

DOMAIN_TABLES = (ContractMetadata, TokenMetadata, Erc721Owner, Erc1155Balance)


class MetadataRepo:
    """Contract and token registry rows, plus the full-reset operation."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def ensure_contract(self, address: str, standard: str, block_number: int) -> ContractMetadata:
        row = await self._session.get(ContractMetadata, address)
        if row is None:
            row = ContractMetadata(address=address, standard=standard, first_seen_block=block_number)
            self._session.add(row)
            await self._session.flush()
        return row

    async def ensure_token(self, contract: str, token_id: int, block_number: int) -> TokenMetadata:
        row = await self._session.get(TokenMetadata, (contract, token_id))
        if row is None:
            row = TokenMetadata(contract_address=contract, token_id=token_id, first_seen_block=block_number)
            self._session.add(row)
            await self._session.flush()
        return row

    async def delete_all_domain_rows(self) -> None:
        """Empty every domain table and null out the cursor row. Schema is left in place."""
        for model in DOMAIN_TABLES:
            await self._session.execute(delete(model))
        await self._session.execute(update(SyncState).values(last_synced_block=None))
