from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from tokensync.db.models.ownership import Erc721Owner


class OwnershipRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, contract: str, token_id: int) -> Optional[Erc721Owner]:
        result = await self._session.execute(
            select(Erc721Owner).where(
                Erc721Owner.contract_address == contract,
                Erc721Owner.token_id == token_id,
            )
        )
        return result.scalar_one_or_none()

    async def set_owner(self, contract: str, token_id: int, owner: str, block_number: int) -> Erc721Owner:
        row = await self.get(contract, token_id)
        if row is None:
            row = Erc721Owner(
                contract_address=contract,
                token_id=token_id,
                owner=owner,
                last_transfer_block=block_number,
            )
            self._session.add(row)
        else:
            row.owner = owner
            row.last_transfer_block = block_number
        await self._session.flush()
        return row
